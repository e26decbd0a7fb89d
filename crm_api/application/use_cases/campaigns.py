"""Use cases for campaigns and the social networks they run on."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from crm_api.domain.entities import Campaign, SocialNetwork
from crm_api.domain.exceptions import NotFoundError, ValidationError
from crm_api.infrastructure.repositories import CampaignRepository, SocialNetworkRepository

_UNSET = object()


def list_campaigns(session: Session, *, active: bool | None = None) -> Sequence[Campaign]:
    return CampaignRepository(session).list(active=active)


def get_campaign(session: Session, campaign_id: int) -> Campaign:
    campaign = CampaignRepository(session).get(campaign_id)
    if campaign is None:
        raise NotFoundError("Campaña no encontrada")
    return campaign


def create_campaign(
    session: Session,
    *,
    name: str,
    created_by: int,
    description: str | None = None,
    social_network_id: int | None = None,
    budget: Decimal | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> Campaign:
    if not name or not name.strip():
        raise ValidationError("El nombre de la campaña es requerido")
    if start_date and end_date and end_date < start_date:
        raise ValidationError("La fecha de fin no puede ser anterior a la de inicio")
    if (
        social_network_id is not None
        and SocialNetworkRepository(session).get(social_network_id) is None
    ):
        raise ValidationError("Red social no encontrada")

    return CampaignRepository(session).create(
        Campaign(
            id=None,
            name=name.strip(),
            description=description,
            social_network_id=social_network_id,
            budget=budget,
            start_date=start_date,
            end_date=end_date,
            created_by=created_by,
        )
    )


def list_social_networks(session: Session, *, active_only: bool = True) -> Sequence[SocialNetwork]:
    return SocialNetworkRepository(session).list(active_only=active_only)


def create_social_network(
    session: Session,
    *,
    name: str,
    icon: str | None = None,
    color: str | None = None,
    url: str | None = None,
) -> SocialNetwork:
    repository = SocialNetworkRepository(session)
    if not name or not name.strip():
        raise ValidationError("El nombre de la red social es requerido")
    if repository.get_by_name(name.strip()) is not None:
        raise ValidationError("La red social ya existe")
    return repository.create(
        SocialNetwork(id=None, name=name.strip(), icon=icon, color=color, url=url)
    )


def update_social_network(
    session: Session,
    network_id: int,
    *,
    changes: dict[str, object],
) -> SocialNetwork:
    """Apply the provided ``changes`` (only known fields) to a social network."""

    repository = SocialNetworkRepository(session)
    network = repository.get(network_id)
    if network is None:
        raise NotFoundError("Red social no encontrada")

    allowed = {"name", "icon", "color", "url", "is_active"}
    updates = {key: value for key, value in changes.items() if key in allowed}
    if "is_active" in updates and updates["is_active"] is None:
        raise ValidationError("is_active no puede ser nulo")
    name = updates.get("name", _UNSET)
    if name is not _UNSET:
        if not name or not str(name).strip():
            raise ValidationError("El nombre de la red social es requerido")
        updates["name"] = str(name).strip()
        duplicate = repository.get_by_name(updates["name"])
        if duplicate is not None and duplicate.id != network_id:
            raise ValidationError("La red social ya existe")
    return repository.update(replace(network, **updates))
