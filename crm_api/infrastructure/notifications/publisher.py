"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from anyio import from_thread

from crm_api.domain.entities import Notification

from .manager import ChannelHandle, ChannelRegistry

logger = logging.getLogger(__name__)

NOTIFICATION_EVENT = "notification"
NOTIFICATION_READ_EVENT = "notification_read"
NOTIFICATION_DELETED_EVENT = "notification_deleted"
NOTIFICATIONS_READ_ALL_EVENT = "notifications_read_all"
ERROR_EVENT = "error"


class NotificationPublisher:
    """Schedule best-effort delivery of realtime events to live channels.

    Delivery never raises back to the caller: a channel that fails to receive
    a message is logged and dropped from the registry.
    """

    def __init__(self, registry: ChannelRegistry) -> None:
        self._registry = registry
        self._pending: set[asyncio.Task[bool]] = set()

    @property
    def registry(self) -> ChannelRegistry:
        return self._registry

    def publish(self, recipient_id: int, message: dict[str, Any]) -> int:
        """Schedule ``message`` for every live channel of ``recipient_id``.

        Returns the number of channels a delivery was scheduled for.
        """

        channels = self._registry.channels_for(recipient_id)
        for channel in channels:
            self._schedule_delivery(channel, message.copy())
        return len(channels)

    def publish_notification(self, notification: Notification) -> int:
        message = {"type": NOTIFICATION_EVENT, "data": serialize_notification(notification)}
        return self.publish(notification.recipient_id, message)

    def publish_event(self, recipient_id: int, event_type: str, data: dict[str, Any]) -> int:
        return self.publish(recipient_id, {"type": event_type, "data": data})

    async def deliver(self, channel: ChannelHandle, message: dict[str, Any]) -> bool:
        """Send ``message`` to ``channel`` right away, tolerating closed channels."""

        try:
            await channel.send(message)
        except Exception:
            logger.warning(
                "Dropping channel %r after failed delivery of '%s'",
                channel,
                message.get("type"),
                exc_info=True,
            )
            self._registry.unregister(channel)
            return False
        return True

    async def drain(self) -> None:
        """Wait for the deliveries scheduled so far to finish."""

        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def _schedule_delivery(self, channel: ChannelHandle, message: dict[str, Any]) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run_sync(self._start_delivery, channel, message)
            except RuntimeError:
                logger.warning(
                    "No event loop available; push of '%s' to %r skipped",
                    message.get("type"),
                    channel,
                )
        else:
            self._start_delivery(channel, message)

    def _start_delivery(self, channel: ChannelHandle, message: dict[str, Any]) -> None:
        task = asyncio.get_running_loop().create_task(self.deliver(channel, message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the JSON representation shared by the API and the websocket."""

    return {
        "id": notification.id,
        "user_id": notification.recipient_id,
        "title": notification.title,
        "message": notification.message,
        "category": notification.category.value,
        "read": notification.read,
        "created_at": notification.created_at.isoformat()
        if notification.created_at
        else None,
        "extra_data": notification.extra_data,
    }


__all__ = [
    "ERROR_EVENT",
    "NOTIFICATION_DELETED_EVENT",
    "NOTIFICATION_EVENT",
    "NOTIFICATION_READ_EVENT",
    "NOTIFICATIONS_READ_ALL_EVENT",
    "NotificationPublisher",
    "serialize_notification",
]
