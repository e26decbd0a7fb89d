"""Persistence helpers for campaigns."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from crm_api.domain.entities import Campaign
from crm_api.infrastructure.models import CampaignModel
from crm_api.utils import ensure_app_timezone


class CampaignRepository:
    """Provide CRUD operations for :class:`Campaign` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, active: bool | None = None) -> Sequence[Campaign]:
        query = self.session.query(CampaignModel)
        if active is not None:
            query = query.filter(CampaignModel.is_active.is_(active))
        query = query.order_by(CampaignModel.created_at.desc(), CampaignModel.id.desc())
        return [self._to_entity(model) for model in query.all()]

    def get(self, campaign_id: int) -> Campaign | None:
        model = self.session.get(CampaignModel, campaign_id)
        return self._to_entity(model) if model else None

    def create(self, campaign: Campaign) -> Campaign:
        model = CampaignModel(
            name=campaign.name,
            description=campaign.description,
            social_network_id=campaign.social_network_id,
            budget=campaign.budget,
            start_date=campaign.start_date,
            end_date=campaign.end_date,
            is_active=campaign.is_active,
            created_by=campaign.created_by,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: CampaignModel) -> Campaign:
        network = model.social_network
        return Campaign(
            id=model.id,
            name=model.name,
            description=model.description,
            social_network_id=model.social_network_id,
            budget=model.budget,
            start_date=model.start_date,
            end_date=model.end_date,
            is_active=bool(model.is_active),
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
            social_network_name=network.name if network is not None else None,
        )


__all__ = ["CampaignRepository"]
