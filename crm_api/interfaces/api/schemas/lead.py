"""Lead schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from .common import Money


class LeadStatusRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    order: int
    color: str | None = None
    is_won: bool = False


class LeadCreate(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=150)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=30)
    company: str | None = Field(default=None, max_length=150)
    position: str | None = Field(default=None, max_length=100)
    source: str | None = Field(default=None, max_length=50)
    status_id: int | None = Field(default=None, ge=1)
    assigned_to: int | None = Field(default=None, ge=1)
    estimated_value: Money | None = Field(default=None, ge=0)
    close_probability: int | None = Field(default=None, ge=0, le=100)
    expected_close_date: date | None = None
    campaign_id: int | None = Field(default=None, ge=1)
    notes: str | None = None


class LeadStatusChange(BaseModel):
    status_id: int = Field(..., ge=1)


class LeadRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    position: str | None = None
    source: str
    status_id: int
    status_name: str | None = None
    status_color: str | None = None
    assigned_to: int | None = None
    assigned_name: str | None = None
    estimated_value: Money | None = None
    close_probability: int | None = None
    expected_close_date: date | None = None
    campaign_id: int | None = None
    campaign_name: str | None = None
    notes: str | None = None
    converted_to_client: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Pagination(BaseModel):
    page: int
    limit: int
    total: int


class LeadListResponse(BaseModel):
    success: bool = True
    data: list[LeadRead]
    pagination: Pagination


__all__ = [
    "LeadCreate",
    "LeadListResponse",
    "LeadRead",
    "LeadStatusChange",
    "LeadStatusRead",
    "Pagination",
]
