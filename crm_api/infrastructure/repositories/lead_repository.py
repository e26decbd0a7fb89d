"""Persistence helpers for lead entities."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy import func, or_
from sqlalchemy.orm import Query, Session

from crm_api.domain.entities import Lead, LeadFilters
from crm_api.infrastructure.models import LeadModel, LeadStatusModel
from crm_api.utils import ensure_app_timezone, now_in_app_naive_datetime


class LeadRepository:
    """Provide CRUD operations and aggregates for :class:`Lead` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        filters: LeadFilters | None = None,
        *,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[Lead], int]:
        """Return a page of leads and the number of rows matching ``filters``."""

        query = self._apply_filters(self.session.query(LeadModel), filters)
        total = query.order_by(None).count()
        models = (
            query.order_by(LeadModel.created_at.desc(), LeadModel.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return [self._to_entity(model) for model in models], total

    def list_open_by_status(self) -> Sequence[Lead]:
        query = (
            self.session.query(LeadModel)
            .join(LeadStatusModel, LeadModel.status_id == LeadStatusModel.id)
            .filter(LeadModel.converted_to_client.is_(False))
            .order_by(
                LeadStatusModel.order.asc(),
                LeadModel.created_at.desc(),
                LeadModel.id.desc(),
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, lead_id: int) -> Lead | None:
        model = self.session.get(LeadModel, lead_id)
        return self._to_entity(model) if model else None

    def create(self, lead: Lead) -> Lead:
        model = LeadModel(
            full_name=lead.full_name,
            email=lead.email,
            phone=lead.phone,
            company=lead.company,
            position=lead.position,
            source=lead.source,
            status_id=lead.status_id,
            assigned_to=lead.assigned_to,
            estimated_value=lead.estimated_value,
            close_probability=lead.close_probability,
            expected_close_date=lead.expected_close_date,
            campaign_id=lead.campaign_id,
            notes=lead.notes,
            converted_to_client=lead.converted_to_client,
            created_at=now_in_app_naive_datetime(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status(
        self, lead_id: int, *, status_id: int, converted_to_client: bool | None = None
    ) -> Lead | None:
        model = self.session.get(LeadModel, lead_id)
        if model is None:
            return None
        model.status_id = status_id
        if converted_to_client is not None:
            model.converted_to_client = converted_to_client
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def summarize_for_user(self, user_id: int) -> dict[str, Decimal | int]:
        """Return counters and value totals for the leads assigned to ``user_id``."""

        rows = (
            self.session.query(
                LeadModel.converted_to_client,
                func.count(LeadModel.id),
                func.coalesce(func.sum(LeadModel.estimated_value), 0),
            )
            .filter(LeadModel.assigned_to == user_id)
            .group_by(LeadModel.converted_to_client)
            .all()
        )
        summary: dict[str, Decimal | int] = {
            "open_count": 0,
            "converted_count": 0,
            "open_value": Decimal("0"),
            "converted_value": Decimal("0"),
        }
        for converted, count, value in rows:
            prefix = "converted" if converted else "open"
            summary[f"{prefix}_count"] = int(count or 0)
            summary[f"{prefix}_value"] = Decimal(str(value or 0))
        return summary

    @staticmethod
    def _apply_filters(query: Query, filters: LeadFilters | None) -> Query:
        if filters is None:
            return query
        if filters.status_id is not None:
            query = query.filter(LeadModel.status_id == filters.status_id)
        if filters.assigned_to is not None:
            query = query.filter(LeadModel.assigned_to == filters.assigned_to)
        if filters.source:
            query = query.filter(LeadModel.source == filters.source)
        if filters.search:
            term = f"%{filters.search.strip()}%"
            query = query.filter(
                or_(
                    LeadModel.full_name.ilike(term),
                    LeadModel.company.ilike(term),
                    LeadModel.email.ilike(term),
                )
            )
        return query

    @staticmethod
    def _to_entity(model: LeadModel) -> Lead:
        status = model.status
        assignee = model.assignee
        campaign = model.campaign
        return Lead(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            phone=model.phone,
            company=model.company,
            position=model.position,
            source=model.source,
            status_id=model.status_id,
            assigned_to=model.assigned_to,
            estimated_value=model.estimated_value,
            close_probability=model.close_probability,
            expected_close_date=model.expected_close_date,
            campaign_id=model.campaign_id,
            notes=model.notes,
            converted_to_client=bool(model.converted_to_client),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            status_name=status.name if status is not None else None,
            status_color=status.color if status is not None else None,
            assigned_name=assignee.name if assignee is not None else None,
            campaign_name=campaign.name if campaign is not None else None,
        )


__all__ = ["LeadRepository"]
