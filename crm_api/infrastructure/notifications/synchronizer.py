"""Keep every device of a recipient in sync with read/delete actions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from crm_api.domain.exceptions import NotFoundError, StorageError
from crm_api.infrastructure.repositories import NotificationRepository

from .manager import ChannelHandle
from .publisher import (
    ERROR_EVENT,
    NOTIFICATION_DELETED_EVENT,
    NOTIFICATION_READ_EVENT,
    NotificationPublisher,
)

logger = logging.getLogger(__name__)

_StoreAction = Callable[[NotificationRepository, int, int], None]


class ReadStateSynchronizer:
    """Apply channel-originated actions to the store and fan the result out.

    Successful actions are broadcast to every live channel of the recipient,
    the originator included. Failures are reported to the originating channel
    only.
    """

    def __init__(
        self,
        publisher: NotificationPublisher,
        session_factory: Callable[[], Session],
    ) -> None:
        self._publisher = publisher
        self._session_factory = session_factory

    async def on_mark_read(self, channel: ChannelHandle, notification_id: int) -> bool:
        return await self._synchronize(
            channel,
            notification_id,
            action=NotificationRepository.mark_as_read,
            event_type=NOTIFICATION_READ_EVENT,
        )

    async def on_delete(self, channel: ChannelHandle, notification_id: int) -> bool:
        return await self._synchronize(
            channel,
            notification_id,
            action=NotificationRepository.delete,
            event_type=NOTIFICATION_DELETED_EVENT,
        )

    async def report_error(
        self,
        channel: ChannelHandle,
        message: str,
        *,
        notification_id: Any = None,
    ) -> None:
        """Send an ``error`` event to ``channel`` alone."""

        data: dict[str, Any] = {"message": message}
        if notification_id is not None:
            data["id"] = notification_id
        await self._publisher.deliver(channel, {"type": ERROR_EVENT, "data": data})

    async def _synchronize(
        self,
        channel: ChannelHandle,
        notification_id: int,
        *,
        action: _StoreAction,
        event_type: str,
    ) -> bool:
        recipient_id = self._publisher.registry.recipient_for(channel)
        if recipient_id is None:
            logger.info("Ignoring '%s' from unregistered channel %r", event_type, channel)
            return False

        try:
            await run_in_threadpool(self._apply, action, recipient_id, notification_id)
        except NotFoundError as exc:
            await self.report_error(channel, str(exc), notification_id=notification_id)
            return False
        except StorageError:
            await self.report_error(
                channel, "Error en el servidor", notification_id=notification_id
            )
            return False

        self._publisher.publish_event(recipient_id, event_type, {"id": notification_id})
        return True

    def _apply(self, action: _StoreAction, recipient_id: int, notification_id: int) -> None:
        session = self._session_factory()
        try:
            action(NotificationRepository(session), recipient_id, notification_id)
        finally:
            session.close()


__all__ = ["ReadStateSynchronizer"]
