"""Persistence helpers for pipeline statuses."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from crm_api.domain.entities import LeadStatus
from crm_api.infrastructure.models import LeadStatusModel


class LeadStatusRepository:
    """Provide read access to :class:`LeadStatus` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[LeadStatus]:
        query = self.session.query(LeadStatusModel).order_by(
            LeadStatusModel.order.asc(), LeadStatusModel.id.asc()
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, status_id: int) -> LeadStatus | None:
        model = self.session.get(LeadStatusModel, status_id)
        return self._to_entity(model) if model else None

    def get_default(self) -> LeadStatus | None:
        model = (
            self.session.query(LeadStatusModel)
            .order_by(LeadStatusModel.order.asc(), LeadStatusModel.id.asc())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, status: LeadStatus) -> LeadStatus:
        model = LeadStatusModel(
            name=status.name,
            order=status.order,
            color=status.color,
            is_won=status.is_won,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def exists_by_name(self, name: str) -> bool:
        return (
            self.session.query(LeadStatusModel.id)
            .filter(LeadStatusModel.name == name)
            .first()
            is not None
        )

    @staticmethod
    def _to_entity(model: LeadStatusModel) -> LeadStatus:
        return LeadStatus(
            id=model.id,
            name=model.name,
            order=model.order,
            color=model.color,
            is_won=bool(model.is_won),
        )


__all__ = ["LeadStatusRepository"]
