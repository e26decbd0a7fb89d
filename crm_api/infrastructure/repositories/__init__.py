"""Repository implementations for infrastructure layer."""

from .campaign_repository import CampaignRepository
from .lead_repository import LeadRepository
from .lead_status_repository import LeadStatusRepository
from .notification_repository import NotificationRepository
from .role_repository import RoleRepository
from .social_network_repository import SocialNetworkRepository
from .user_repository import UserRepository

__all__ = [
    "CampaignRepository",
    "LeadRepository",
    "LeadStatusRepository",
    "NotificationRepository",
    "RoleRepository",
    "SocialNetworkRepository",
    "UserRepository",
]
