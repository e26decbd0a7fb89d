"""Use case for moving a lead through the pipeline."""

from sqlalchemy.orm import Session

from crm_api.application.use_cases.notifications import (
    NotificationDispatcher,
    notify_lead_status_changed,
)
from crm_api.domain.entities import Lead
from crm_api.domain.exceptions import NotFoundError, ValidationError
from crm_api.infrastructure.repositories import LeadRepository, LeadStatusRepository


def update_lead_status(
    session: Session,
    dispatcher: NotificationDispatcher,
    *,
    lead_id: int,
    status_id: int,
) -> Lead:
    """Change the status of ``lead_id`` and notify its assignee.

    Moving a lead into a winning status converts it into a client.
    """

    repository = LeadRepository(session)
    lead = repository.get(lead_id)
    if lead is None:
        raise NotFoundError("Lead no encontrado")

    status = LeadStatusRepository(session).get(status_id)
    if status is None:
        raise ValidationError("Estatus no encontrado")

    previous_status_id = lead.status_id
    updated = repository.update_status(
        lead_id,
        status_id=status_id,
        converted_to_client=True if status.is_won else None,
    )
    if updated is None:  # pragma: no cover - lead removed mid-request
        raise NotFoundError("Lead no encontrado")

    if previous_status_id != status_id:
        notify_lead_status_changed(
            dispatcher,
            session,
            lead=updated,
            previous_status_id=previous_status_id,
            new_status=status,
        )
    return updated
