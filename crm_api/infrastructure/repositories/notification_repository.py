"""Persistence helpers for notification entities.

Every operation is scoped to a recipient: a notification id that belongs to a
different user behaves exactly like an id that does not exist.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from crm_api.domain.entities import Notification, NotificationCategory, NotificationPage
from crm_api.domain.exceptions import NotFoundError, StorageError, ValidationError
from crm_api.infrastructure.models import NotificationModel
from crm_api.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100
_NOT_FOUND_MESSAGE = "Notificación no encontrada"


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(
        self,
        *,
        recipient_id: int | None,
        title: str | None,
        message: str | None,
        category: NotificationCategory | str = NotificationCategory.INFO,
        extra_data: dict[str, Any] | None = None,
    ) -> Notification:
        """Insert a new unread notification and return the stored record."""

        if not recipient_id:
            raise ValidationError("El destinatario es requerido")
        if not title or not title.strip():
            raise ValidationError("El título es requerido")
        if not message or not message.strip():
            raise ValidationError("El mensaje es requerido")
        resolved_category = _coerce_category(category)

        model = NotificationModel(
            user_id=recipient_id,
            title=title.strip(),
            message=message,
            category=resolved_category.value,
            read=False,
            created_at=ensure_app_naive_datetime(now_in_app_timezone()),
            extra_data=extra_data,
        )
        with self._storage_guard("create"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def list_for_recipient(
        self,
        recipient_id: int,
        *,
        read: bool | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> NotificationPage:
        """Return a page of notifications, most recent first.

        ``total`` counts the rows matching ``read``; ``unread_count`` always
        counts every unread notification of the recipient.
        """

        if limit < 1 or limit > MAX_PAGE_SIZE:
            raise ValidationError(f"El límite debe estar entre 1 y {MAX_PAGE_SIZE}")
        if offset < 0:
            raise ValidationError("El desplazamiento no puede ser negativo")

        with self._storage_guard("list"):
            query = self.session.query(NotificationModel).filter(
                NotificationModel.user_id == recipient_id
            )
            if read is not None:
                query = query.filter(NotificationModel.read.is_(read))
            total = query.order_by(None).count()
            models = (
                query.order_by(
                    NotificationModel.created_at.desc(), NotificationModel.id.desc()
                )
                .offset(offset)
                .limit(limit)
                .all()
            )
            unread_count = self._count_unread(recipient_id)
        return NotificationPage(
            items=[self._to_entity(model) for model in models],
            total=total,
            unread_count=unread_count,
        )

    def count_unread(self, recipient_id: int) -> int:
        with self._storage_guard("count_unread"):
            return self._count_unread(recipient_id)

    def mark_as_read(self, recipient_id: int, notification_id: int) -> None:
        """Flag one notification as read; repeated calls are no-ops."""

        with self._storage_guard("mark_as_read"):
            model = self._get_owned(recipient_id, notification_id)
            if model is None:
                raise NotFoundError(_NOT_FOUND_MESSAGE)
            if model.read:
                return
            model.read = True
            self.session.commit()

    def mark_all_as_read(self, recipient_id: int) -> int:
        """Flag every unread notification of ``recipient_id`` in one statement."""

        with self._storage_guard("mark_all_as_read"):
            updated = (
                self.session.query(NotificationModel)
                .filter(
                    NotificationModel.user_id == recipient_id,
                    NotificationModel.read.is_(False),
                )
                .update({NotificationModel.read: True}, synchronize_session=False)
            )
            self.session.commit()
        return int(updated or 0)

    def delete(self, recipient_id: int, notification_id: int) -> None:
        with self._storage_guard("delete"):
            model = self._get_owned(recipient_id, notification_id)
            if model is None:
                raise NotFoundError(_NOT_FOUND_MESSAGE)
            self.session.delete(model)
            self.session.commit()

    def _get_owned(self, recipient_id: int, notification_id: int) -> NotificationModel | None:
        return (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == recipient_id,
            )
            .one_or_none()
        )

    def _count_unread(self, recipient_id: int) -> int:
        count = (
            self.session.query(func.count(NotificationModel.id))
            .filter(
                NotificationModel.user_id == recipient_id,
                NotificationModel.read.is_(False),
            )
            .scalar()
        )
        return int(count or 0)

    @contextmanager
    def _storage_guard(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Notification store failed during %s", operation)
            raise StorageError("Error en el servidor") from exc

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.user_id,
            title=model.title,
            message=model.message,
            category=_coerce_category(model.category),
            read=bool(model.read),
            created_at=ensure_app_timezone(model.created_at),
            extra_data=model.extra_data,
        )


def _coerce_category(value: NotificationCategory | str | None) -> NotificationCategory:
    if value is None:
        return NotificationCategory.INFO
    try:
        return NotificationCategory(value)
    except ValueError as exc:
        allowed = ", ".join(category.value for category in NotificationCategory)
        raise ValidationError(f"Tipo de notificación inválido; use uno de: {allowed}") from exc


__all__ = ["DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "NotificationRepository"]
