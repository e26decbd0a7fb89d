"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class NotificationCategory(str, Enum):
    """Visual severity attached to a notification."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    recipient_id: int
    title: str
    message: str
    category: NotificationCategory = NotificationCategory.INFO
    read: bool = False
    created_at: datetime | None = None
    extra_data: dict[str, Any] | None = None


@dataclass
class NotificationPage:
    """One page of a recipient's notifications plus the aggregates."""

    items: list[Notification] = field(default_factory=list)
    total: int = 0
    unread_count: int = 0


__all__ = ["Notification", "NotificationCategory", "NotificationPage"]
