"""Use cases for managing leads."""

from .create_lead import create_lead
from .list_leads import get_lead, get_pipeline, list_lead_statuses, list_leads
from .update_lead_status import update_lead_status

__all__ = [
    "create_lead",
    "get_lead",
    "get_pipeline",
    "list_lead_statuses",
    "list_leads",
    "update_lead_status",
]
