"""Rutas para administrar usuarios y su foto de perfil."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from crm_api.application.use_cases.users import create_user as create_user_uc
from crm_api.application.use_cases.users import update_avatar
from crm_api.config import get_settings
from crm_api.domain.entities import User
from crm_api.domain.exceptions import NotFoundError
from crm_api.infrastructure.database import get_db
from crm_api.infrastructure.repositories import UserRepository
from crm_api.infrastructure.storage import StorageConfigurationError
from crm_api.interfaces.api.dependencies import get_current_active_user, require_admin
from crm_api.interfaces.api.schemas import DataResponse, UserCreate, UserRead

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


@router.get("", response_model=DataResponse[list[UserRead]])
def list_users(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Devuelve los usuarios activos, por ejemplo para asignar leads."""

    users = UserRepository(db).list(active_only=True)
    return DataResponse(data=[UserRead.model_validate(user) for user in users])


@router.post("", response_model=DataResponse[UserRead], status_code=status.HTTP_201_CREATED)
def register_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Crea un nuevo usuario con credenciales de acceso a la API."""

    user = create_user_uc(
        db,
        name=user_in.name,
        email=user_in.email,
        password=user_in.password,
        role_alias=user_in.role,
        phone=user_in.phone,
    )
    logger.info("User %s created with role '%s'", user.id, user.role.alias)
    return DataResponse(data=UserRead.model_validate(user))


@router.post("/me/avatar", response_model=DataResponse[UserRead])
def upload_avatar(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Sube la foto de perfil del usuario autenticado."""

    # One byte past the limit is enough to reject oversized files.
    data = file.file.read(get_settings().avatar_max_bytes + 1)
    try:
        user = update_avatar(
            db,
            user_id=current_user.id,
            data=data,
            content_type=file.content_type,
        )
    except StorageConfigurationError as exc:
        logger.error("Avatar upload unavailable: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="El almacenamiento de archivos no está configurado",
        ) from exc
    return DataResponse(data=UserRead.model_validate(user))


@router.get("/{user_id}", response_model=DataResponse[UserRead])
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Obtiene al usuario identificado por ``user_id``."""

    user = UserRepository(db).get(user_id)
    if user is None:
        raise NotFoundError("Usuario no encontrado")
    return DataResponse(data=UserRead.model_validate(user))
