"""Realtime notification helpers for the infrastructure layer."""

from .manager import ChannelHandle, ChannelRegistry, NotificationChannel
from .publisher import (
    ERROR_EVENT,
    NOTIFICATION_DELETED_EVENT,
    NOTIFICATION_EVENT,
    NOTIFICATION_READ_EVENT,
    NOTIFICATIONS_READ_ALL_EVENT,
    NotificationPublisher,
    serialize_notification,
)
from .synchronizer import ReadStateSynchronizer

__all__ = [
    "ChannelHandle",
    "ChannelRegistry",
    "NotificationChannel",
    "NotificationPublisher",
    "ReadStateSynchronizer",
    "serialize_notification",
    "ERROR_EVENT",
    "NOTIFICATION_DELETED_EVENT",
    "NOTIFICATION_EVENT",
    "NOTIFICATION_READ_EVENT",
    "NOTIFICATIONS_READ_ALL_EVENT",
]
