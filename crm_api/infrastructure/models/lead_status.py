"""SQLAlchemy model for pipeline statuses."""

from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.sql import expression

from crm_api.infrastructure.database import Base


class LeadStatusModel(Base):
    """Database representation of a pipeline stage."""

    __tablename__ = "lead_status"

    id = Column(Integer, primary_key=True)
    name = Column(String(50), nullable=False, unique=True)
    order = Column("sort_order", Integer, nullable=False, default=0)
    color = Column(String(7), nullable=True)
    is_won = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )


__all__ = ["LeadStatusModel"]
