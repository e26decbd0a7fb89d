"""Use case to store a new avatar picture for a user."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm import Session

from crm_api.config import get_settings
from crm_api.domain.entities import User
from crm_api.domain.exceptions import NotFoundError, ValidationError
from crm_api.infrastructure import storage
from crm_api.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)

ALLOWED_AVATAR_TYPES = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}


def update_avatar(
    session: Session,
    *,
    user_id: int,
    data: bytes,
    content_type: str | None,
) -> User:
    """Upload ``data`` as the avatar of ``user_id`` and persist its URL."""

    extension = ALLOWED_AVATAR_TYPES.get((content_type or "").lower())
    if extension is None:
        allowed = ", ".join(sorted(ALLOWED_AVATAR_TYPES))
        raise ValidationError(f"Formato de imagen no permitido; use: {allowed}")
    if not data:
        raise ValidationError("El archivo está vacío")
    max_bytes = get_settings().avatar_max_bytes
    if len(data) > max_bytes:
        raise ValidationError(
            f"La imagen supera el tamaño máximo de {max_bytes // (1024 * 1024)} MB"
        )

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise NotFoundError("Usuario no encontrado")

    blob_path = f"avatars/{user_id}/{uuid.uuid4().hex}.{extension}"
    avatar_url = storage.upload_blob(blob_path, data, content_type=content_type)
    logger.info("Avatar for user %s uploaded to %s", user_id, blob_path)

    updated = repository.set_avatar_url(user_id, avatar_url)
    if updated is None:  # pragma: no cover - user removed mid-request
        raise NotFoundError("Usuario no encontrado")
    return updated
