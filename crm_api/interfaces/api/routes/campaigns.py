"""Rutas de campañas de marketing."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from crm_api.application.use_cases.campaigns import (
    create_campaign as create_campaign_uc,
    get_campaign,
    list_campaigns as list_campaigns_uc,
)
from crm_api.domain.entities import User
from crm_api.infrastructure.database import get_db
from crm_api.interfaces.api.dependencies import get_current_active_user, require_admin
from crm_api.interfaces.api.schemas import CampaignCreate, CampaignRead, DataResponse

router = APIRouter(prefix="/campaigns", tags=["campaigns"])


@router.get("", response_model=DataResponse[list[CampaignRead]])
def list_campaigns(
    active: bool | None = None,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    campaigns = list_campaigns_uc(db, active=active)
    return DataResponse(data=[CampaignRead.model_validate(c) for c in campaigns])


@router.get("/{campaign_id}", response_model=DataResponse[CampaignRead])
def read_campaign(
    campaign_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    return DataResponse(data=CampaignRead.model_validate(get_campaign(db, campaign_id)))


@router.post("", response_model=DataResponse[CampaignRead], status_code=status.HTTP_201_CREATED)
def create_campaign(
    campaign_in: CampaignCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Crea una campaña, opcionalmente ligada a una red social."""

    campaign = create_campaign_uc(db, created_by=current_user.id, **campaign_in.model_dump())
    return DataResponse(data=CampaignRead.model_validate(campaign))
