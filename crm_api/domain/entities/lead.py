"""Domain entities describing sales leads and their pipeline statuses."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

DEFAULT_LEAD_SOURCE = "web"


@dataclass
class LeadStatus:
    """Stage of the sales pipeline a lead can be in."""

    id: int | None
    name: str
    order: int
    color: str | None = None
    is_won: bool = False


@dataclass
class Lead:
    """Prospective client tracked by the sales team."""

    id: int | None
    full_name: str
    email: str | None
    phone: str | None
    company: str | None
    position: str | None
    source: str
    status_id: int
    assigned_to: int | None
    estimated_value: Decimal | None
    close_probability: int | None
    expected_close_date: date | None
    campaign_id: int | None
    notes: str | None
    converted_to_client: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    status_name: str | None = None
    status_color: str | None = None
    assigned_name: str | None = None
    campaign_name: str | None = None


@dataclass
class LeadFilters:
    """Optional criteria applied when listing leads."""

    status_id: int | None = None
    assigned_to: int | None = None
    source: str | None = None
    search: str | None = None


__all__ = ["DEFAULT_LEAD_SOURCE", "Lead", "LeadFilters", "LeadStatus"]
