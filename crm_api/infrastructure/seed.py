"""Default catalog rows every installation needs."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from crm_api.domain.entities import ROLE_ADMIN, ROLE_AGENT, LeadStatus, SocialNetwork
from crm_api.infrastructure.repositories import (
    LeadStatusRepository,
    RoleRepository,
    SocialNetworkRepository,
)

logger = logging.getLogger(__name__)

DEFAULT_ROLES = (
    ("Administrador", ROLE_ADMIN),
    ("Agente", ROLE_AGENT),
)

DEFAULT_LEAD_STATUSES = (
    LeadStatus(id=None, name="Nuevo", order=1, color="#2196F3"),
    LeadStatus(id=None, name="Contactado", order=2, color="#00BCD4"),
    LeadStatus(id=None, name="Calificado", order=3, color="#8BC34A"),
    LeadStatus(id=None, name="Propuesta", order=4, color="#FFC107"),
    LeadStatus(id=None, name="Negociación", order=5, color="#FF9800"),
    LeadStatus(id=None, name="Ganado", order=6, color="#4CAF50", is_won=True),
    LeadStatus(id=None, name="Perdido", order=7, color="#F44336"),
)

DEFAULT_SOCIAL_NETWORKS = (
    SocialNetwork(id=None, name="Facebook", icon="facebook", color="#1877F2", url="https://facebook.com"),
    SocialNetwork(id=None, name="Instagram", icon="instagram", color="#E4405F", url="https://instagram.com"),
    SocialNetwork(id=None, name="Twitter/X", icon="twitter", color="#000000", url="https://x.com"),
    SocialNetwork(id=None, name="LinkedIn", icon="linkedin", color="#0A66C2", url="https://linkedin.com"),
    SocialNetwork(id=None, name="TikTok", icon="tiktok", color="#000000", url="https://tiktok.com"),
    SocialNetwork(id=None, name="YouTube", icon="youtube", color="#FF0000", url="https://youtube.com"),
    SocialNetwork(id=None, name="WhatsApp", icon="whatsapp", color="#25D366", url="https://whatsapp.com"),
    SocialNetwork(id=None, name="Google Ads", icon="google", color="#4285F4", url="https://ads.google.com"),
    SocialNetwork(id=None, name="Email", icon="email", color="#EA4335"),
    SocialNetwork(id=None, name="Sitio Web", icon="web", color="#2196F3"),
)


def seed_default_catalogs(session: Session) -> None:
    """Insert the default roles, pipeline statuses and networks when missing."""

    roles = RoleRepository(session)
    for name, alias in DEFAULT_ROLES:
        roles.ensure(name=name, alias=alias)

    statuses = LeadStatusRepository(session)
    created_statuses = 0
    for status in DEFAULT_LEAD_STATUSES:
        if not statuses.exists_by_name(status.name):
            statuses.create(status)
            created_statuses += 1

    networks = SocialNetworkRepository(session)
    created_networks = 0
    for network in DEFAULT_SOCIAL_NETWORKS:
        if networks.get_by_name(network.name) is None:
            networks.create(network)
            created_networks += 1

    if created_statuses or created_networks:
        logger.info(
            "Seeded %d lead statuses and %d social networks",
            created_statuses,
            created_networks,
        )


__all__ = ["seed_default_catalogs"]
