"""Rutas del tablero principal."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from crm_api.application.use_cases.dashboard import get_dashboard_stats
from crm_api.domain.entities import User
from crm_api.infrastructure.database import get_db
from crm_api.interfaces.api.dependencies import get_current_active_user
from crm_api.interfaces.api.schemas import DashboardStatsRead, DataResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DataResponse[DashboardStatsRead])
def read_dashboard_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Devuelve los contadores del usuario autenticado."""

    stats = get_dashboard_stats(db, user_id=current_user.id)
    return DataResponse(data=DashboardStatsRead.model_validate(stats))
