"""Use case for creating users."""

from sqlalchemy.orm import Session

from crm_api.domain.entities import ROLE_AGENT, User
from crm_api.domain.exceptions import ValidationError
from crm_api.infrastructure.repositories import RoleRepository, UserRepository
from crm_api.infrastructure.security import get_password_hash

from .validators import ensure_password_strength, normalize_email


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role_alias: str = ROLE_AGENT,
    phone: str | None = None,
    must_change_password: bool = False,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)
    normalized_email = normalize_email(email)
    ensure_password_strength(password)

    if not name or not name.strip():
        raise ValidationError("El nombre es requerido")

    if repository.get_by_email(normalized_email):
        raise ValidationError("El correo electrónico ya está registrado")

    role = RoleRepository(session).get_by_alias(role_alias)
    if role is None:
        raise ValidationError("Rol no encontrado")

    user = User(
        id=None,
        role=role,
        name=name.strip(),
        email=normalized_email,
        password=get_password_hash(password),
        phone=phone,
        avatar_url=None,
        must_change_password=must_change_password,
        last_login=None,
        created_at=None,
        updated_at=None,
        is_active=True,
    )
    return repository.create(user)
