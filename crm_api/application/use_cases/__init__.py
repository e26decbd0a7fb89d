"""Aggregate application use cases."""

from .users import authenticate_user, create_user, reset_password_by_email

__all__ = [
    "authenticate_user",
    "create_user",
    "reset_password_by_email",
]
