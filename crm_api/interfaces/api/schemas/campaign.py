"""Campaign and social network schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import Money


class SocialNetworkRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    icon: str | None = None
    color: str | None = None
    url: str | None = None
    is_active: bool
    created_at: datetime | None = None


class SocialNetworkCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    icon: str | None = Field(default=None, max_length=255)
    color: str | None = Field(default=None, max_length=7)
    url: str | None = Field(default=None, max_length=255)


class SocialNetworkUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=100)
    icon: str | None = Field(default=None, max_length=255)
    color: str | None = Field(default=None, max_length=7)
    url: str | None = Field(default=None, max_length=255)
    is_active: bool | None = None


class CampaignRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    social_network_id: int | None = None
    social_network_name: str | None = None
    budget: Money | None = None
    start_date: date | None = None
    end_date: date | None = None
    is_active: bool
    created_by: int | None = None
    created_at: datetime | None = None


class CampaignCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: str | None = None
    social_network_id: int | None = Field(default=None, ge=1)
    budget: Money | None = Field(default=None, ge=0)
    start_date: date | None = None
    end_date: date | None = None


__all__ = [
    "CampaignCreate",
    "CampaignRead",
    "SocialNetworkCreate",
    "SocialNetworkRead",
    "SocialNetworkUpdate",
]
