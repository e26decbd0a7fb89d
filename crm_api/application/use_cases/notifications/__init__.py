"""Public helpers for emitting domain notifications."""

from .dispatcher import NotificationDispatcher
from .events import (
    broadcast_to_active_users,
    notify_lead_assigned,
    notify_lead_status_changed,
)

__all__ = [
    "NotificationDispatcher",
    "broadcast_to_active_users",
    "notify_lead_assigned",
    "notify_lead_status_changed",
]
