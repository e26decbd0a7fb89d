"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session, joinedload

from crm_api.domain.entities import Role, User
from crm_api.infrastructure.models import RoleModel, UserModel
from crm_api.utils import now_in_app_naive_datetime


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, active_only: bool = True) -> Sequence[User]:
        query = self.session.query(UserModel).options(joinedload(UserModel.role))
        if active_only:
            query = query.filter(UserModel.is_active.is_(True))
        query = query.order_by(UserModel.name.asc(), UserModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def list_active_ids(self) -> list[int]:
        query = self.session.query(UserModel.id).filter(UserModel.is_active.is_(True))
        return [user_id for (user_id,) in query.order_by(UserModel.id.asc()).all()]

    def get(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self._get_model(email=email.strip().lower())
        return self._to_entity(model) if model else None

    def exists(self, user_id: int) -> bool:
        return (
            self.session.query(UserModel.id).filter(UserModel.id == user_id).first()
            is not None
        )

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        if model.role is None:
            self.session.refresh(model, attribute_names=["role"])
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self._get_model(id=user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        model.updated_at = now_in_app_naive_datetime()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def record_login(self, user_id: int) -> None:
        model = self._get_model(id=user_id)
        if model is None:
            return
        model.last_login = now_in_app_naive_datetime()
        self.session.commit()

    def set_avatar_url(self, user_id: int, avatar_url: str) -> User | None:
        model = self._get_model(id=user_id)
        if model is None:
            return None
        model.avatar_url = avatar_url
        model.updated_at = now_in_app_naive_datetime()
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=UserRepository._role_to_entity(model.role),
            name=model.name,
            email=model.email,
            password=model.password,
            phone=model.phone,
            avatar_url=model.avatar_url,
            must_change_password=model.must_change_password,
            last_login=model.last_login,
            created_at=model.created_at,
            updated_at=model.updated_at,
            is_active=model.is_active,
        )

    def _get_model(self, **filters) -> UserModel | None:
        query = self.session.query(UserModel).options(joinedload(UserModel.role))
        return query.filter_by(**filters).first()

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.role_id = user.role.id
        model.name = user.name
        model.email = user.email.strip().lower()
        model.password = user.password
        model.phone = user.phone
        model.avatar_url = user.avatar_url
        model.must_change_password = user.must_change_password
        model.last_login = user.last_login
        model.is_active = user.is_active

    @staticmethod
    def _role_to_entity(model_role: RoleModel | None) -> Role:
        if model_role is None:
            msg = "User role is not set"
            raise ValueError(msg)
        return Role(id=model_role.id, name=model_role.name, alias=model_role.alias)


__all__ = ["UserRepository"]
