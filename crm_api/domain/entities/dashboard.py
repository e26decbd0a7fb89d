"""Domain entity summarizing a user's activity."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class DashboardStats:
    """Counters displayed on the home screen of an agent."""

    total_leads: int
    converted_leads: int
    unread_notifications: int
    pipeline_value: Decimal
    won_value: Decimal


__all__ = ["DashboardStats"]
