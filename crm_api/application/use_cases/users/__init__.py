"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .create_user import create_user
from .reset_password_by_email import reset_password_by_email
from .update_avatar import ALLOWED_AVATAR_TYPES, update_avatar

__all__ = [
    "ALLOWED_AVATAR_TYPES",
    "AuthenticationStatus",
    "authenticate_user",
    "create_user",
    "reset_password_by_email",
    "update_avatar",
]
