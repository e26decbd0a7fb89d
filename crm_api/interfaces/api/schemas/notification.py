"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from crm_api.domain.entities import NotificationCategory


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int
    title: str
    message: str
    category: NotificationCategory
    read: bool
    created_at: datetime | None = None
    extra_data: dict[str, Any] | None = None


class NotificationListResponse(BaseModel):
    success: bool = True
    data: list[NotificationRead]
    total: int
    unread_count: int


class UnreadCountResponse(BaseModel):
    success: bool = True
    unread_count: int


class ReadAllResponse(BaseModel):
    success: bool = True
    message: str
    updated: int


class BroadcastRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    category: NotificationCategory = NotificationCategory.INFO


class BroadcastResponse(BaseModel):
    success: bool = True
    sent_to: int


__all__ = [
    "BroadcastRequest",
    "BroadcastResponse",
    "NotificationListResponse",
    "NotificationRead",
    "ReadAllResponse",
    "UnreadCountResponse",
]
