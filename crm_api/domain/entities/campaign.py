"""Domain entities for marketing campaigns and the networks they run on."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass
class SocialNetwork:
    """Channel where a campaign can capture leads."""

    id: int | None
    name: str
    icon: str | None = None
    color: str | None = None
    url: str | None = None
    is_active: bool = True
    created_at: datetime | None = None


@dataclass
class Campaign:
    """Marketing campaign leads can be attributed to."""

    id: int | None
    name: str
    description: str | None = None
    social_network_id: int | None = None
    budget: Decimal | None = None
    start_date: date | None = None
    end_date: date | None = None
    is_active: bool = True
    created_by: int | None = None
    created_at: datetime | None = None
    social_network_name: str | None = None


__all__ = ["Campaign", "SocialNetwork"]
