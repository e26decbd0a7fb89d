"""Dashboard schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .common import Money


class DashboardStatsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_leads: int
    converted_leads: int
    unread_notifications: int
    pipeline_value: Money
    won_value: Money


class HealthResponse(BaseModel):
    success: bool = True
    message: str
    timestamp: datetime


__all__ = ["DashboardStatsRead", "HealthResponse"]
