"""Use cases for reading leads."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from crm_api.domain.entities import Lead, LeadFilters, LeadStatus
from crm_api.domain.exceptions import NotFoundError, ValidationError
from crm_api.infrastructure.repositories import LeadRepository, LeadStatusRepository

MAX_PAGE_SIZE = 100


def list_leads(
    session: Session,
    filters: LeadFilters | None = None,
    *,
    page: int = 1,
    limit: int = 50,
) -> tuple[list[Lead], int]:
    """Return the requested page of leads and the total matching ``filters``."""

    if page < 1:
        raise ValidationError("La página debe ser mayor o igual a 1")
    if limit < 1 or limit > MAX_PAGE_SIZE:
        raise ValidationError(f"El límite debe estar entre 1 y {MAX_PAGE_SIZE}")
    return LeadRepository(session).list(filters, limit=limit, offset=(page - 1) * limit)


def get_lead(session: Session, lead_id: int) -> Lead:
    lead = LeadRepository(session).get(lead_id)
    if lead is None:
        raise NotFoundError("Lead no encontrado")
    return lead


def get_pipeline(session: Session) -> dict[int, list[Lead]]:
    """Group open leads by status, keeping the pipeline order of the statuses."""

    pipeline: dict[int, list[Lead]] = {}
    for lead in LeadRepository(session).list_open_by_status():
        pipeline.setdefault(lead.status_id, []).append(lead)
    return pipeline


def list_lead_statuses(session: Session) -> Sequence[LeadStatus]:
    return LeadStatusRepository(session).list()
