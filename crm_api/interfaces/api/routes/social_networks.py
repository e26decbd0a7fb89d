"""Rutas del catálogo de redes sociales."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from crm_api.application.use_cases.campaigns import (
    create_social_network as create_social_network_uc,
    list_social_networks as list_social_networks_uc,
    update_social_network as update_social_network_uc,
)
from crm_api.domain.entities import User
from crm_api.infrastructure.database import get_db
from crm_api.interfaces.api.dependencies import get_current_active_user, require_admin
from crm_api.interfaces.api.schemas import (
    DataResponse,
    SocialNetworkCreate,
    SocialNetworkRead,
    SocialNetworkUpdate,
)

router = APIRouter(prefix="/social-networks", tags=["social-networks"])


@router.get("", response_model=DataResponse[list[SocialNetworkRead]])
def list_social_networks(
    active_only: bool = True,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    networks = list_social_networks_uc(db, active_only=active_only)
    return DataResponse(data=[SocialNetworkRead.model_validate(n) for n in networks])


@router.post(
    "", response_model=DataResponse[SocialNetworkRead], status_code=status.HTTP_201_CREATED
)
def create_social_network(
    network_in: SocialNetworkCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    network = create_social_network_uc(db, **network_in.model_dump())
    return DataResponse(data=SocialNetworkRead.model_validate(network))


@router.patch("/{network_id}", response_model=DataResponse[SocialNetworkRead])
def update_social_network(
    network_id: int,
    network_in: SocialNetworkUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Actualiza solo los campos enviados en la petición."""

    network = update_social_network_uc(
        db, network_id, changes=network_in.model_dump(exclude_unset=True)
    )
    return DataResponse(data=SocialNetworkRead.model_validate(network))
