"""Cross-device propagation of read and delete actions."""

from __future__ import annotations

import asyncio

import pytest

from crm_api.infrastructure import database
from crm_api.infrastructure.notifications import (
    ChannelRegistry,
    NotificationPublisher,
    ReadStateSynchronizer,
)
from crm_api.infrastructure.repositories import NotificationRepository


class RecordingChannel:
    def __init__(self) -> None:
        self.messages: list[dict] = []

    async def send(self, message: dict) -> None:
        self.messages.append(message)


@pytest.fixture()
def publisher():
    return NotificationPublisher(ChannelRegistry())


@pytest.fixture()
def synchronizer(publisher):
    return ReadStateSynchronizer(publisher, database.SessionLocal)


def _run(publisher, coroutine):
    async def scenario():
        result = await coroutine
        await publisher.drain()
        return result

    return asyncio.run(scenario())


def _store(db_session, recipient_id):
    return NotificationRepository(db_session).create(
        recipient_id=recipient_id, title="Aviso", message="Mensaje"
    )


def test_mark_read_reaches_every_channel_of_the_recipient(
    db_session, agent, publisher, synchronizer
):
    notification = _store(db_session, agent.id)
    origin, sibling = RecordingChannel(), RecordingChannel()
    publisher.registry.register(agent.id, origin)
    publisher.registry.register(agent.id, sibling)

    assert _run(publisher, synchronizer.on_mark_read(origin, notification.id)) is True

    expected = {"type": "notification_read", "data": {"id": notification.id}}
    assert origin.messages == [expected]
    assert sibling.messages == [expected]
    assert NotificationRepository(db_session).count_unread(agent.id) == 0


def test_delete_reaches_every_channel_of_the_recipient(
    db_session, agent, publisher, synchronizer
):
    notification = _store(db_session, agent.id)
    origin, sibling = RecordingChannel(), RecordingChannel()
    publisher.registry.register(agent.id, origin)
    publisher.registry.register(agent.id, sibling)

    assert _run(publisher, synchronizer.on_delete(origin, notification.id)) is True

    expected = {"type": "notification_deleted", "data": {"id": notification.id}}
    assert origin.messages == [expected]
    assert sibling.messages == [expected]
    assert NotificationRepository(db_session).list_for_recipient(agent.id).total == 0


def test_failure_is_reported_to_the_originator_only(
    db_session, agent, make_user, publisher, synchronizer
):
    other = make_user("other@example.com", name="Otro")
    foreign = _store(db_session, other.id)
    origin, sibling = RecordingChannel(), RecordingChannel()
    publisher.registry.register(agent.id, origin)
    publisher.registry.register(agent.id, sibling)

    assert _run(publisher, synchronizer.on_delete(origin, foreign.id)) is False

    assert len(origin.messages) == 1
    assert origin.messages[0]["type"] == "error"
    assert origin.messages[0]["data"]["id"] == foreign.id
    assert sibling.messages == []
    assert NotificationRepository(db_session).count_unread(other.id) == 1


def test_unregistered_channel_is_ignored(db_session, agent, publisher, synchronizer):
    notification = _store(db_session, agent.id)
    stray = RecordingChannel()

    assert _run(publisher, synchronizer.on_mark_read(stray, notification.id)) is False

    assert stray.messages == []
    assert NotificationRepository(db_session).count_unread(agent.id) == 1
