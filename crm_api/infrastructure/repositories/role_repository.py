"""Persistence helpers for roles."""

from __future__ import annotations

from sqlalchemy.orm import Session

from crm_api.domain.entities import Role
from crm_api.infrastructure.models import RoleModel


class RoleRepository:
    """Lookup operations for :class:`Role` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, role_id: int) -> Role | None:
        model = self.session.get(RoleModel, role_id)
        return self._to_entity(model) if model else None

    def get_by_alias(self, alias: str) -> Role | None:
        model = (
            self.session.query(RoleModel)
            .filter(RoleModel.alias == alias.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def ensure(self, *, name: str, alias: str) -> Role:
        """Return the role identified by ``alias`` creating it when missing."""

        existing = self.get_by_alias(alias)
        if existing is not None:
            return existing
        model = RoleModel(name=name, alias=alias)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(id=model.id, name=model.name, alias=model.alias)


__all__ = ["RoleRepository"]
