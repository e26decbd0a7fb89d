"""Domain entities exposed by the application."""

from .campaign import Campaign, SocialNetwork
from .dashboard import DashboardStats
from .lead import DEFAULT_LEAD_SOURCE, Lead, LeadFilters, LeadStatus
from .notification import Notification, NotificationCategory, NotificationPage
from .role import ROLE_ADMIN, ROLE_AGENT, Role
from .user import User

__all__ = [
    "Campaign",
    "DashboardStats",
    "DEFAULT_LEAD_SOURCE",
    "Lead",
    "LeadFilters",
    "LeadStatus",
    "Notification",
    "NotificationCategory",
    "NotificationPage",
    "ROLE_ADMIN",
    "ROLE_AGENT",
    "Role",
    "SocialNetwork",
    "User",
]
