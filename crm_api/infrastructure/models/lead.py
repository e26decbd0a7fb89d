"""SQLAlchemy model for sales leads."""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from crm_api.infrastructure.database import Base
from crm_api.utils import now_in_app_naive_datetime


class LeadModel(Base):
    """Database representation of a lead."""

    __tablename__ = "lead"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(150), nullable=False)
    email = Column(String(120), nullable=True, index=True)
    phone = Column(String(30), nullable=True)
    company = Column(String(150), nullable=True)
    position = Column(String(100), nullable=True)
    source = Column(String(50), nullable=False, default="web", index=True)
    status_id = Column(Integer, ForeignKey("lead_status.id"), nullable=False, index=True)
    assigned_to = Column(
        Integer, ForeignKey("user.id", ondelete="SET NULL"), nullable=True, index=True
    )
    estimated_value = Column(Numeric(12, 2), nullable=True)
    close_probability = Column(Integer, nullable=True)
    expected_close_date = Column(Date, nullable=True)
    campaign_id = Column(
        Integer, ForeignKey("campaign.id", ondelete="SET NULL"), nullable=True
    )
    notes = Column(Text, nullable=True)
    converted_to_client = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)

    status = relationship("LeadStatusModel", lazy="joined")
    assignee = relationship("UserModel", lazy="joined")
    campaign = relationship("CampaignModel", lazy="joined")


__all__ = ["LeadModel"]
