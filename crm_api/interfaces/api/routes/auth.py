"""Endpoints relacionados con autenticación y recuperación de contraseñas."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from crm_api.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    reset_password_by_email,
)
from crm_api.domain.entities import User
from crm_api.domain.exceptions import AuthError, NotFoundError
from crm_api.infrastructure.database import get_db
from crm_api.infrastructure.email import send_password_reset_email
from crm_api.infrastructure.repositories import UserRepository
from crm_api.infrastructure.security import (
    REFRESH_TOKEN_TYPE,
    create_access_token,
    create_refresh_token,
    decode_token,
    password_signature,
)
from crm_api.interfaces.api.dependencies import get_current_active_user
from crm_api.interfaces.api.schemas import (
    DataResponse,
    ForgotPasswordRequest,
    LoginData,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RefreshData,
    RefreshRequest,
    UserRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)

_PASSWORD_RESET_MESSAGE = (
    "Si el correo está registrado, recibirás un mensaje con una contraseña temporal."
)


def _token_claims(user: User) -> dict[str, object]:
    return {
        "sub": user.email,
        "uid": user.id,
        "role": user.role.alias,
        "pwd_sig": password_signature(user.password, user.is_active),
    }


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """Autentica al usuario por correo y devuelve el token de acceso y el de renovación."""

    user, auth_status = authenticate_user(db, payload.email, payload.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise AuthError("Credenciales incorrectas")
    if auth_status is AuthenticationStatus.INACTIVE:
        raise AuthError("Usuario inactivo", status_code=status.HTTP_403_FORBIDDEN)

    repository = UserRepository(db)
    repository.record_login(user.id)
    user = repository.get(user.id) or user

    claims = _token_claims(user)
    return LoginResponse(
        message="Login exitoso",
        data=LoginData(
            user=UserRead.model_validate(user),
            token=create_access_token(claims),
            refresh_token=create_refresh_token(claims),
        ),
    )


@router.post("/refresh", response_model=DataResponse[RefreshData])
def refresh_token(payload: RefreshRequest, db: Session = Depends(get_db)):
    """Emite un nuevo token de acceso a partir de un token de renovación válido."""

    try:
        claims = decode_token(payload.refresh_token, expected_type=REFRESH_TOKEN_TYPE)
    except ValueError as exc:
        raise AuthError("Refresh token inválido") from exc

    email = claims.get("sub")
    user = UserRepository(db).get_by_email(email) if isinstance(email, str) else None
    if user is None or not user.is_active:
        raise NotFoundError("Usuario no encontrado")
    if claims.get("pwd_sig") != password_signature(user.password, user.is_active):
        raise AuthError("Refresh token inválido")

    return DataResponse(data=RefreshData(token=create_access_token(_token_claims(user))))


@router.get("/me", response_model=DataResponse[UserRead])
def read_current_user(current_user: User = Depends(get_current_active_user)):
    """Devuelve la información del usuario autenticado."""

    return DataResponse(data=UserRead.model_validate(current_user))


@router.post(
    "/forgot-password",
    response_model=MessageResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
def forgot_password(payload: ForgotPasswordRequest, db: Session = Depends(get_db)):
    """Genera una contraseña temporal y la envía por correo si el usuario existe."""

    try:
        user, temporary_password = reset_password_by_email(db, email=payload.email)
    except NotFoundError:
        logger.info("Password reset requested for unknown or inactive account")
        return MessageResponse(message=_PASSWORD_RESET_MESSAGE)

    if not send_password_reset_email(user.email, temporary_password, name=user.name):
        logger.warning("No se pudo enviar el correo de recuperación al usuario %s", user.id)

    return MessageResponse(message=_PASSWORD_RESET_MESSAGE)
