"""SQLAlchemy model for social networks."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.sql import expression

from crm_api.infrastructure.database import Base
from crm_api.utils import now_in_app_naive_datetime


class SocialNetworkModel(Base):
    """Database representation of a social network."""

    __tablename__ = "social_network"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    icon = Column(String(255), nullable=True)
    color = Column(String(7), nullable=True)
    url = Column(String(255), nullable=True)
    is_active = Column(
        Boolean, nullable=False, default=True, server_default=expression.true(), index=True
    )
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["SocialNetworkModel"]
