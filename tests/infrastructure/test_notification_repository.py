"""Behaviour of the persistent notification store."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from crm_api.domain.entities import NotificationCategory
from crm_api.domain.exceptions import NotFoundError, StorageError, ValidationError
from crm_api.infrastructure.repositories import NotificationRepository


def _create(repository: NotificationRepository, recipient_id: int, title: str = "Aviso", **kwargs):
    return repository.create(
        recipient_id=recipient_id,
        title=title,
        message=kwargs.pop("message", "Mensaje de prueba"),
        **kwargs,
    )


def test_create_returns_unread_record_with_defaults(db_session, agent):
    repository = NotificationRepository(db_session)

    notification = _create(repository, agent.id, extra_data={"lead_id": 7})

    assert notification.id is not None
    assert notification.recipient_id == agent.id
    assert notification.read is False
    assert notification.category is NotificationCategory.INFO
    assert notification.created_at is not None
    assert notification.extra_data == {"lead_id": 7}


def test_listing_is_most_recent_first_and_paginated(db_session, agent):
    repository = NotificationRepository(db_session)
    created = [_create(repository, agent.id, title=f"Aviso {i}") for i in range(5)]

    page = repository.list_for_recipient(agent.id, limit=2)

    assert [n.id for n in page.items] == [created[4].id, created[3].id]
    assert page.total == 5
    assert page.unread_count == 5

    second_page = repository.list_for_recipient(agent.id, limit=2, offset=2)
    assert [n.id for n in second_page.items] == [created[2].id, created[1].id]


def test_read_filter_limits_total_but_not_unread_count(db_session, agent):
    repository = NotificationRepository(db_session)
    first = _create(repository, agent.id)
    _create(repository, agent.id)
    _create(repository, agent.id)
    repository.mark_as_read(agent.id, first.id)

    read_page = repository.list_for_recipient(agent.id, read=True)
    unread_page = repository.list_for_recipient(agent.id, read=False)

    assert [n.id for n in read_page.items] == [first.id]
    assert read_page.total == 1
    assert read_page.unread_count == 2
    assert unread_page.total == 2
    assert all(not n.read for n in unread_page.items)


def test_mark_as_read_is_idempotent(db_session, agent):
    repository = NotificationRepository(db_session)
    notification = _create(repository, agent.id)

    repository.mark_as_read(agent.id, notification.id)
    repository.mark_as_read(agent.id, notification.id)

    assert repository.count_unread(agent.id) == 0
    assert repository.list_for_recipient(agent.id).items[0].read is True


def test_operations_on_foreign_notifications_look_like_missing_ones(db_session, agent, make_user):
    repository = NotificationRepository(db_session)
    other = make_user("other@example.com", name="Otro")
    foreign = _create(repository, other.id)

    with pytest.raises(NotFoundError):
        repository.mark_as_read(agent.id, foreign.id)
    with pytest.raises(NotFoundError):
        repository.delete(agent.id, foreign.id)

    assert repository.count_unread(other.id) == 1
    assert repository.list_for_recipient(agent.id).total == 0


def test_deleted_notification_is_gone(db_session, agent):
    repository = NotificationRepository(db_session)
    notification = _create(repository, agent.id)

    repository.delete(agent.id, notification.id)

    with pytest.raises(NotFoundError):
        repository.mark_as_read(agent.id, notification.id)
    with pytest.raises(NotFoundError):
        repository.delete(agent.id, notification.id)
    assert repository.list_for_recipient(agent.id).total == 0


def test_mark_all_as_read_reports_updated_rows(db_session, agent, make_user):
    repository = NotificationRepository(db_session)
    other = make_user("other@example.com", name="Otro")
    for _ in range(3):
        _create(repository, agent.id)
    _create(repository, other.id)

    assert repository.mark_all_as_read(agent.id) == 3
    assert repository.mark_all_as_read(agent.id) == 0
    assert repository.count_unread(agent.id) == 0
    assert repository.count_unread(other.id) == 1


@pytest.mark.parametrize(
    ("title", "message", "category"),
    [
        ("", "Mensaje", "info"),
        ("   ", "Mensaje", "info"),
        ("Título", "", "info"),
        ("Título", "Mensaje", "urgent"),
    ],
)
def test_create_rejects_invalid_input(db_session, agent, title, message, category):
    repository = NotificationRepository(db_session)

    with pytest.raises(ValidationError):
        repository.create(
            recipient_id=agent.id, title=title, message=message, category=category
        )

    assert repository.list_for_recipient(agent.id).total == 0


@pytest.mark.parametrize(("limit", "offset"), [(0, 0), (101, 0), (10, -1)])
def test_listing_rejects_out_of_range_pagination(db_session, agent, limit, offset):
    with pytest.raises(ValidationError):
        NotificationRepository(db_session).list_for_recipient(
            agent.id, limit=limit, offset=offset
        )


def test_database_failures_surface_as_storage_errors(db_session, agent, monkeypatch):
    repository = NotificationRepository(db_session)

    def _fail():
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db_session, "commit", _fail)

    with pytest.raises(StorageError):
        _create(repository, agent.id)

    monkeypatch.undo()
    assert repository.list_for_recipient(agent.id).total == 0


def test_unread_notification_lifecycle(db_session, agent):
    repository = NotificationRepository(db_session)
    notification = repository.create(
        recipient_id=agent.id,
        title="Nuevo Lead Asignado",
        message="Se te ha asignado un nuevo lead: Ana",
        category="info",
    )

    listed = repository.list_for_recipient(agent.id)
    assert [(n.id, n.read) for n in listed.items] == [(notification.id, False)]
    assert repository.count_unread(agent.id) == 1

    repository.mark_as_read(agent.id, notification.id)

    assert repository.count_unread(agent.id) == 0
    read_ids = [n.id for n in repository.list_for_recipient(agent.id, read=True).items]
    assert notification.id in read_ids
