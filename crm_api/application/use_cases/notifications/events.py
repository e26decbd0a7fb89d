"""Notifications emitted by lead and administration events."""

from __future__ import annotations

from sqlalchemy.orm import Session

from crm_api.domain.entities import Lead, LeadStatus, Notification, NotificationCategory
from crm_api.infrastructure.repositories import UserRepository

from .dispatcher import NotificationDispatcher


def notify_lead_assigned(
    dispatcher: NotificationDispatcher, session: Session, *, lead: Lead
) -> Notification | None:
    """Tell the assignee of ``lead`` that it is now theirs."""

    if not lead.assigned_to:
        return None
    return dispatcher.notify(
        session,
        recipient_id=lead.assigned_to,
        title="Nuevo Lead Asignado",
        message=f"Se te ha asignado un nuevo lead: {lead.full_name}",
        category=NotificationCategory.INFO,
        extra_data={"lead_id": lead.id, "entity_type": "lead"},
    )


def notify_lead_status_changed(
    dispatcher: NotificationDispatcher,
    session: Session,
    *,
    lead: Lead,
    previous_status_id: int,
    new_status: LeadStatus,
) -> Notification | None:
    if not lead.assigned_to:
        return None
    category = NotificationCategory.SUCCESS if new_status.is_won else NotificationCategory.INFO
    return dispatcher.notify(
        session,
        recipient_id=lead.assigned_to,
        title="Cambio de Estatus",
        message=f"El lead {lead.full_name} cambió a: {new_status.name}",
        category=category,
        extra_data={
            "lead_id": lead.id,
            "previous_status_id": previous_status_id,
            "new_status_id": new_status.id,
        },
    )


def broadcast_to_active_users(
    dispatcher: NotificationDispatcher,
    session: Session,
    *,
    title: str,
    message: str,
    category: NotificationCategory | str = NotificationCategory.INFO,
) -> list[Notification]:
    """Send the same notification to every active user."""

    recipients = UserRepository(session).list_active_ids()
    return dispatcher.notify_many(
        session,
        recipients,
        title=title,
        message=message,
        category=category,
        extra_data={"entity_type": "broadcast"},
    )
