from .auth import (
    ForgotPasswordRequest,
    LoginData,
    LoginRequest,
    LoginResponse,
    RefreshData,
    RefreshRequest,
)
from .campaign import (
    CampaignCreate,
    CampaignRead,
    SocialNetworkCreate,
    SocialNetworkRead,
    SocialNetworkUpdate,
)
from .common import DataResponse, MessageResponse, Money
from .dashboard import DashboardStatsRead, HealthResponse
from .lead import (
    LeadCreate,
    LeadListResponse,
    LeadRead,
    LeadStatusChange,
    LeadStatusRead,
    Pagination,
)
from .notification import (
    BroadcastRequest,
    BroadcastResponse,
    NotificationListResponse,
    NotificationRead,
    ReadAllResponse,
    UnreadCountResponse,
)
from .user import RoleRead, UserCreate, UserRead

__all__ = [
    "BroadcastRequest",
    "BroadcastResponse",
    "CampaignCreate",
    "CampaignRead",
    "DashboardStatsRead",
    "DataResponse",
    "ForgotPasswordRequest",
    "HealthResponse",
    "LeadCreate",
    "LeadListResponse",
    "LeadRead",
    "LeadStatusChange",
    "LeadStatusRead",
    "LoginData",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "Money",
    "NotificationListResponse",
    "NotificationRead",
    "Pagination",
    "ReadAllResponse",
    "RefreshData",
    "RefreshRequest",
    "RoleRead",
    "SocialNetworkCreate",
    "SocialNetworkRead",
    "SocialNetworkUpdate",
    "UnreadCountResponse",
    "UserCreate",
    "UserRead",
]
