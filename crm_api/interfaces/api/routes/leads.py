"""Rutas para gestionar leads y su avance en el pipeline de ventas."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from crm_api.application.use_cases.leads import (
    create_lead as create_lead_uc,
    get_lead,
    get_pipeline,
    list_lead_statuses,
    list_leads as list_leads_uc,
    update_lead_status as update_lead_status_uc,
)
from crm_api.application.use_cases.notifications import NotificationDispatcher
from crm_api.domain.entities import LeadFilters, User
from crm_api.infrastructure.database import get_db
from crm_api.interfaces.api.dependencies import (
    get_current_active_user,
    get_notification_dispatcher,
)
from crm_api.interfaces.api.schemas import (
    DataResponse,
    LeadCreate,
    LeadListResponse,
    LeadRead,
    LeadStatusChange,
    LeadStatusRead,
    Pagination,
)

router = APIRouter(prefix="/leads", tags=["leads"])


@router.get("/statuses", response_model=DataResponse[list[LeadStatusRead]])
def read_lead_statuses(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    statuses = list_lead_statuses(db)
    return DataResponse(data=[LeadStatusRead.model_validate(s) for s in statuses])


@router.get("/pipeline", response_model=DataResponse[dict[int, list[LeadRead]]])
def read_pipeline(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Agrupa por estatus los leads que aún no se han convertido en clientes."""

    pipeline = get_pipeline(db)
    return DataResponse(
        data={
            status_id: [LeadRead.model_validate(lead) for lead in leads]
            for status_id, leads in pipeline.items()
        }
    )


@router.get("", response_model=LeadListResponse)
def list_leads(
    status_id: int | None = None,
    assigned_to: int | None = None,
    source: str | None = None,
    search: str | None = None,
    page: int = 1,
    limit: int = 50,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Lista los leads con filtros opcionales y paginación."""

    filters = LeadFilters(
        status_id=status_id,
        assigned_to=assigned_to,
        source=source,
        search=search,
    )
    leads, total = list_leads_uc(db, filters, page=page, limit=limit)
    return LeadListResponse(
        data=[LeadRead.model_validate(lead) for lead in leads],
        pagination=Pagination(page=page, limit=limit, total=total),
    )


@router.get("/{lead_id}", response_model=DataResponse[LeadRead])
def read_lead(
    lead_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    return DataResponse(data=LeadRead.model_validate(get_lead(db, lead_id)))


@router.post("", response_model=DataResponse[LeadRead], status_code=status.HTTP_201_CREATED)
def create_lead(
    lead_in: LeadCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """Registra un lead y notifica al agente asignado."""

    lead = create_lead_uc(
        db,
        dispatcher,
        created_by=current_user,
        **lead_in.model_dump(),
    )
    return DataResponse(data=LeadRead.model_validate(lead))


@router.patch("/{lead_id}/status", response_model=DataResponse[LeadRead])
def change_lead_status(
    lead_id: int,
    payload: LeadStatusChange,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """Mueve el lead a otro estatus del pipeline."""

    lead = update_lead_status_uc(
        db,
        dispatcher,
        lead_id=lead_id,
        status_id=payload.status_id,
    )
    return DataResponse(data=LeadRead.model_validate(lead))
