"""Bookkeeping of live notification channels."""

from __future__ import annotations

from crm_api.infrastructure.notifications import ChannelRegistry


class _Channel:
    async def send(self, message):  # pragma: no cover - never awaited here
        return None


def test_register_tracks_channels_per_recipient():
    registry = ChannelRegistry()
    first, second, foreign = _Channel(), _Channel(), _Channel()

    registry.register(1, first)
    registry.register(1, second)
    registry.register(2, foreign)

    assert registry.channels_for(1) == frozenset({first, second})
    assert registry.channels_for(2) == frozenset({foreign})
    assert registry.recipient_for(second) == 1
    assert registry.connection_count() == 3


def test_unregister_is_idempotent():
    registry = ChannelRegistry()
    channel = _Channel()
    registry.register(1, channel)

    registry.unregister(channel)
    registry.unregister(channel)
    registry.unregister(_Channel())

    assert registry.channels_for(1) == frozenset()
    assert registry.recipient_for(channel) is None
    assert registry.connection_count() == 0


def test_channels_for_returns_a_snapshot():
    registry = ChannelRegistry()
    channel = _Channel()
    registry.register(1, channel)

    snapshot = registry.channels_for(1)
    registry.unregister(channel)

    assert snapshot == frozenset({channel})
    assert registry.channels_for(1) == frozenset()


def test_registering_a_channel_for_another_recipient_moves_it():
    registry = ChannelRegistry()
    channel = _Channel()

    registry.register(1, channel)
    registry.register(2, channel)

    assert registry.channels_for(1) == frozenset()
    assert registry.channels_for(2) == frozenset({channel})
    assert registry.connection_count() == 1


def test_unknown_recipient_has_no_channels():
    assert ChannelRegistry().channels_for(42) == frozenset()
