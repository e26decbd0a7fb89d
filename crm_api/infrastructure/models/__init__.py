"""ORM models used by the application infrastructure."""

from .role import RoleModel
from .user import UserModel
from .notification import NotificationModel
from .social_network import SocialNetworkModel
from .campaign import CampaignModel
from .lead_status import LeadStatusModel
from .lead import LeadModel

__all__ = [
    "CampaignModel",
    "LeadModel",
    "LeadStatusModel",
    "NotificationModel",
    "RoleModel",
    "SocialNetworkModel",
    "UserModel",
]
