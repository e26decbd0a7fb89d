"""Use case computing the dashboard counters of a user."""

from sqlalchemy.orm import Session

from crm_api.domain.entities import DashboardStats
from crm_api.infrastructure.repositories import LeadRepository, NotificationRepository


def get_dashboard_stats(session: Session, *, user_id: int) -> DashboardStats:
    summary = LeadRepository(session).summarize_for_user(user_id)
    return DashboardStats(
        total_leads=summary["open_count"],
        converted_leads=summary["converted_count"],
        unread_notifications=NotificationRepository(session).count_unread(user_id),
        pipeline_value=summary["open_value"],
        won_value=summary["converted_value"],
    )
