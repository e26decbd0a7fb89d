"""Connection management helpers for notification websockets."""

from __future__ import annotations

import asyncio
import threading
import uuid
from collections import defaultdict
from typing import Any, DefaultDict, Protocol, Set

from fastapi import WebSocket


class ChannelHandle(Protocol):
    """Anything able to receive a JSON message for a connected recipient."""

    async def send(self, message: dict[str, Any]) -> None: ...


class NotificationChannel:
    """Authenticated websocket connection owned by a single recipient.

    Writes are serialized so messages reach the client in the order they were
    scheduled.
    """

    def __init__(self, websocket: WebSocket, recipient_id: int) -> None:
        self.id = uuid.uuid4().hex
        self.recipient_id = recipient_id
        self._websocket = websocket
        self._send_lock = asyncio.Lock()

    async def send(self, message: dict[str, Any]) -> None:
        async with self._send_lock:
            await self._websocket.send_json(message)

    def __repr__(self) -> str:
        return f"NotificationChannel(id={self.id!r}, recipient_id={self.recipient_id})"


class ChannelRegistry:
    """Track the live channels of every connected recipient.

    Worker threads (sync routes) read the registry while the event loop
    registers and drops channels, so every access goes through a lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._channels: DefaultDict[int, Set[ChannelHandle]] = defaultdict(set)
        self._owners: dict[ChannelHandle, int] = {}

    def register(self, recipient_id: int, channel: ChannelHandle) -> None:
        """Add ``channel`` to the live set of ``recipient_id``."""

        with self._lock:
            previous = self._owners.get(channel)
            if previous is not None and previous != recipient_id:
                self._discard(previous, channel)
            self._channels[recipient_id].add(channel)
            self._owners[channel] = recipient_id

    def unregister(self, channel: ChannelHandle) -> None:
        """Remove ``channel`` from whichever recipient holds it; unknown channels are ignored."""

        with self._lock:
            recipient_id = self._owners.pop(channel, None)
            if recipient_id is None:
                return
            self._discard(recipient_id, channel)

    def channels_for(self, recipient_id: int) -> frozenset[ChannelHandle]:
        """Return a snapshot of the channels currently open for ``recipient_id``."""

        with self._lock:
            return frozenset(self._channels.get(recipient_id, ()))

    def recipient_for(self, channel: ChannelHandle) -> int | None:
        with self._lock:
            return self._owners.get(channel)

    def connection_count(self) -> int:
        with self._lock:
            return len(self._owners)

    def _discard(self, recipient_id: int, channel: ChannelHandle) -> None:
        connections = self._channels.get(recipient_id)
        if connections is None:
            return
        connections.discard(channel)
        if not connections:
            self._channels.pop(recipient_id, None)


__all__ = ["ChannelHandle", "ChannelRegistry", "NotificationChannel"]
