"""Single entry point used by business events to notify a user."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy.orm import Session

from crm_api.domain.entities import Notification, NotificationCategory
from crm_api.infrastructure.notifications import NotificationPublisher
from crm_api.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Persist a notification, then push it to the recipient's live channels.

    The stored row is the source of truth. Push is attempted only after the
    insert commits and its failures never reach the caller; recipients
    without a live channel find the notification on their next listing.
    """

    def __init__(self, publisher: NotificationPublisher) -> None:
        self._publisher = publisher

    def notify(
        self,
        session: Session,
        *,
        recipient_id: int,
        title: str,
        message: str,
        category: NotificationCategory | str = NotificationCategory.INFO,
        extra_data: dict[str, Any] | None = None,
    ) -> Notification:
        saved = NotificationRepository(session).create(
            recipient_id=recipient_id,
            title=title,
            message=message,
            category=category,
            extra_data=extra_data,
        )
        scheduled = self._publisher.publish_notification(saved)
        logger.debug(
            "Notification %s stored for user %s; push scheduled on %d channel(s)",
            saved.id,
            recipient_id,
            scheduled,
        )
        return saved

    def notify_many(
        self,
        session: Session,
        recipient_ids: Iterable[int],
        *,
        title: str,
        message: str,
        category: NotificationCategory | str = NotificationCategory.INFO,
        extra_data: dict[str, Any] | None = None,
    ) -> list[Notification]:
        """Notify each distinct recipient in order, stopping at the first storage failure."""

        seen: set[int] = set()
        delivered: list[Notification] = []
        for recipient_id in recipient_ids:
            if not recipient_id or recipient_id in seen:
                continue
            seen.add(recipient_id)
            delivered.append(
                self.notify(
                    session,
                    recipient_id=recipient_id,
                    title=title,
                    message=message,
                    category=category,
                    extra_data=extra_data,
                )
            )
        return delivered


__all__ = ["NotificationDispatcher"]
