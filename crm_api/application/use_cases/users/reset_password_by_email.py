"""Use case to reset a user's password identified by email."""

from dataclasses import replace

from sqlalchemy.orm import Session

from crm_api.domain.entities import User
from crm_api.domain.exceptions import NotFoundError
from crm_api.infrastructure.repositories import UserRepository
from crm_api.infrastructure.security import generate_secure_password, get_password_hash

from .validators import normalize_email


def reset_password_by_email(session: Session, *, email: str) -> tuple[User, str]:
    """Reset the password of an active user identified by ``email``.

    A temporary password replaces the stored hash and the account is flagged
    so the user must change it on next login. Existing tokens stop working
    because their password signature no longer matches.
    """

    repository = UserRepository(session)
    user = repository.get_by_email(normalize_email(email))
    if user is None or not user.is_active:
        raise NotFoundError("Usuario no encontrado")

    temporary_password = generate_secure_password()
    updated_user = replace(
        user,
        password=get_password_hash(temporary_password),
        must_change_password=True,
    )
    return repository.update(updated_user), temporary_password


__all__ = ["reset_password_by_email"]
