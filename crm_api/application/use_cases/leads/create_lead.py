"""Use case for registering a new lead."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from crm_api.application.use_cases.notifications import (
    NotificationDispatcher,
    notify_lead_assigned,
)
from crm_api.domain.entities import DEFAULT_LEAD_SOURCE, Lead, User
from crm_api.domain.exceptions import ValidationError
from crm_api.infrastructure.repositories import (
    CampaignRepository,
    LeadRepository,
    LeadStatusRepository,
    UserRepository,
)


def create_lead(
    session: Session,
    dispatcher: NotificationDispatcher,
    *,
    created_by: User,
    full_name: str,
    email: str | None = None,
    phone: str | None = None,
    company: str | None = None,
    position: str | None = None,
    source: str | None = None,
    status_id: int | None = None,
    assigned_to: int | None = None,
    estimated_value: Decimal | None = None,
    close_probability: int | None = None,
    expected_close_date: date | None = None,
    campaign_id: int | None = None,
    notes: str | None = None,
) -> Lead:
    """Create a lead and notify the assignee when one was chosen explicitly.

    Without an explicit ``assigned_to`` the lead belongs to its creator and
    no notification is emitted.
    """

    if not full_name or not full_name.strip():
        raise ValidationError("El nombre es requerido")

    status_repository = LeadStatusRepository(session)
    if status_id is None:
        default_status = status_repository.get_default()
        if default_status is None:
            raise ValidationError("No hay estatus de lead configurados")
        status_id = default_status.id
    elif status_repository.get(status_id) is None:
        raise ValidationError("Estatus no encontrado")

    if assigned_to is not None and not UserRepository(session).exists(assigned_to):
        raise ValidationError("El usuario asignado no existe")

    if campaign_id is not None and CampaignRepository(session).get(campaign_id) is None:
        raise ValidationError("Campaña no encontrada")

    lead = LeadRepository(session).create(
        Lead(
            id=None,
            full_name=full_name.strip(),
            email=email,
            phone=phone,
            company=company,
            position=position,
            source=source or DEFAULT_LEAD_SOURCE,
            status_id=status_id,
            assigned_to=assigned_to if assigned_to is not None else created_by.id,
            estimated_value=estimated_value,
            close_probability=close_probability,
            expected_close_date=expected_close_date,
            campaign_id=campaign_id,
            notes=notes,
        )
    )

    if assigned_to is not None:
        notify_lead_assigned(dispatcher, session, lead=lead)
    return lead
