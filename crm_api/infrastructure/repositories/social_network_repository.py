"""Persistence helpers for social networks."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from crm_api.domain.entities import SocialNetwork
from crm_api.infrastructure.models import SocialNetworkModel
from crm_api.utils import ensure_app_timezone


class SocialNetworkRepository:
    """Provide CRUD operations for :class:`SocialNetwork` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, active_only: bool = True) -> Sequence[SocialNetwork]:
        query = self.session.query(SocialNetworkModel)
        if active_only:
            query = query.filter(SocialNetworkModel.is_active.is_(True))
        query = query.order_by(SocialNetworkModel.name.asc())
        return [self._to_entity(model) for model in query.all()]

    def get(self, network_id: int) -> SocialNetwork | None:
        model = self.session.get(SocialNetworkModel, network_id)
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> SocialNetwork | None:
        model = (
            self.session.query(SocialNetworkModel)
            .filter(SocialNetworkModel.name == name)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, network: SocialNetwork) -> SocialNetwork:
        model = SocialNetworkModel()
        self._apply_entity_to_model(model, network)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, network: SocialNetwork) -> SocialNetwork:
        model = self.session.get(SocialNetworkModel, network.id)
        if model is None:
            msg = f"Social network with id {network.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, network)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: SocialNetworkModel, network: SocialNetwork) -> None:
        model.name = network.name
        model.icon = network.icon
        model.color = network.color
        model.url = network.url
        model.is_active = network.is_active

    @staticmethod
    def _to_entity(model: SocialNetworkModel) -> SocialNetwork:
        return SocialNetwork(
            id=model.id,
            name=model.name,
            icon=model.icon,
            color=model.color,
            url=model.url,
            is_active=bool(model.is_active),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["SocialNetworkRepository"]
