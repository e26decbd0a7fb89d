"""SQLAlchemy model for marketing campaigns."""

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


class CampaignModel(Base):
    """Database representation of a campaign."""

    __tablename__ = "campaign"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    social_network_id = Column(
        Integer, ForeignKey("social_network.id", ondelete="SET NULL"), nullable=True
    )
    budget = Column(Numeric(12, 2), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    is_active = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    created_by = Column(Integer, ForeignKey("user.id"), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    social_network = relationship("SocialNetworkModel", lazy="joined")


__all__ = ["CampaignModel"]
