"""FastAPI dependency utilities."""

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from crm_api.application.use_cases.notifications import NotificationDispatcher
from crm_api.domain.entities import User
from crm_api.domain.exceptions import AuthError
from crm_api.infrastructure.database import get_db
from crm_api.infrastructure.notifications import NotificationPublisher
from crm_api.infrastructure.repositories import UserRepository
from crm_api.infrastructure.security import decode_token, password_signature

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the user owning ``token`` or raise :class:`AuthError`."""

    try:
        payload = decode_token(token)
    except ValueError as exc:
        raise AuthError("Token inválido o expirado") from exc

    email = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(email, str) or not isinstance(signature_claim, str):
        raise AuthError()

    user = UserRepository(db).get_by_email(email)
    if user is None:
        raise AuthError("Usuario no encontrado")

    if signature_claim != password_signature(user.password, user.is_active):
        raise AuthError()

    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    return resolve_current_user(token, db)


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise AuthError("Usuario inactivo", status_code=403)
    return current_user


def require_admin(current_user: User = Depends(get_current_active_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.is_admin():
        raise AuthError("No autorizado", status_code=403)
    return current_user


def get_notification_publisher(request: Request) -> NotificationPublisher:
    return request.app.state.notification_publisher


def get_notification_dispatcher(request: Request) -> NotificationDispatcher:
    return request.app.state.notification_dispatcher
