"""Endpoints and websocket handler for realtime notifications."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from crm_api.application.use_cases.notifications import (
    NotificationDispatcher,
    broadcast_to_active_users,
)
from crm_api.domain.entities import User
from crm_api.domain.exceptions import AuthError, StorageError
from crm_api.infrastructure.database import SessionLocal, get_db
from crm_api.infrastructure.notifications import (
    NOTIFICATION_DELETED_EVENT,
    NOTIFICATION_READ_EVENT,
    NOTIFICATIONS_READ_ALL_EVENT,
    NotificationChannel,
    NotificationPublisher,
    ReadStateSynchronizer,
    serialize_notification,
)
from crm_api.infrastructure.repositories import NotificationRepository
from crm_api.interfaces.api.dependencies import (
    get_current_active_user,
    get_notification_dispatcher,
    get_notification_publisher,
    require_admin,
    resolve_current_user,
)
from crm_api.interfaces.api.schemas import (
    BroadcastRequest,
    BroadcastResponse,
    MessageResponse,
    NotificationListResponse,
    NotificationRead,
    ReadAllResponse,
    UnreadCountResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


@router.get("", response_model=NotificationListResponse)
def list_notifications(
    read: bool | None = Query(None, description="Filtra por estado de lectura"),
    limit: int = 50,
    offset: int = 0,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Devuelve las notificaciones del usuario autenticado, de la más reciente a la más antigua."""

    page = NotificationRepository(db).list_for_recipient(
        current_user.id, read=read, limit=limit, offset=offset
    )
    return NotificationListResponse(
        data=[NotificationRead.model_validate(serialize_notification(n)) for n in page.items],
        total=page.total,
        unread_count=page.unread_count,
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    return UnreadCountResponse(
        unread_count=NotificationRepository(db).count_unread(current_user.id)
    )


@router.patch("/{notification_id}/read", response_model=MessageResponse)
def mark_notification_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
):
    """Marca una notificación como leída y sincroniza los demás dispositivos."""

    NotificationRepository(db).mark_as_read(current_user.id, notification_id)
    publisher.publish_event(current_user.id, NOTIFICATION_READ_EVENT, {"id": notification_id})
    return MessageResponse(message="Notificación marcada como leída")


@router.post("/read-all", response_model=ReadAllResponse)
def mark_all_notifications_as_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
):
    updated = NotificationRepository(db).mark_all_as_read(current_user.id)
    publisher.publish_event(current_user.id, NOTIFICATIONS_READ_ALL_EVENT, {"updated": updated})
    return ReadAllResponse(
        message="Todas las notificaciones marcadas como leídas", updated=updated
    )


@router.delete("/{notification_id}", response_model=MessageResponse)
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
):
    NotificationRepository(db).delete(current_user.id, notification_id)
    publisher.publish_event(current_user.id, NOTIFICATION_DELETED_EVENT, {"id": notification_id})
    return MessageResponse(message="Notificación eliminada")


@router.post("/broadcast", response_model=BroadcastResponse)
def broadcast_notification(
    payload: BroadcastRequest,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """Envía la misma notificación a todos los usuarios activos."""

    notifications = broadcast_to_active_users(
        dispatcher,
        db,
        title=payload.title,
        message=payload.message,
        category=payload.category,
    )
    logger.info("Broadcast '%s' sent to %d users", payload.title, len(notifications))
    return BroadcastResponse(sent_to=len(notifications))


def _extract_token(websocket: WebSocket) -> str | None:
    token = websocket.query_params.get("token")
    if token:
        return token
    authorization = websocket.headers.get("authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


def _authenticate_channel(token: str) -> tuple[User, int]:
    session = SessionLocal()
    try:
        user = resolve_current_user(token, session)
        if not user.is_active:
            raise AuthError("Usuario inactivo", status_code=status.HTTP_403_FORBIDDEN)
        return user, NotificationRepository(session).count_unread(user.id)
    finally:
        session.close()


def _parse_notification_id(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return None
    return value


async def _handle_client_message(
    channel: NotificationChannel,
    raw_message: str,
    publisher: NotificationPublisher,
    synchronizer: ReadStateSynchronizer,
) -> None:
    try:
        message = json.loads(raw_message)
    except ValueError:
        message = None
    if not isinstance(message, dict):
        await synchronizer.report_error(channel, "Mensaje inválido")
        return

    message_type = message.get("type")
    if message_type == "ping":
        await publisher.deliver(channel, {"type": "pong"})
        return

    handlers = {
        "mark_as_read": synchronizer.on_mark_read,
        "delete_notification": synchronizer.on_delete,
    }
    handler = handlers.get(message_type)
    if handler is None:
        await synchronizer.report_error(channel, f"Tipo de mensaje no soportado: {message_type}")
        return

    notification_id = _parse_notification_id(message.get("id"))
    if notification_id is None:
        await synchronizer.report_error(
            channel,
            "Identificador de notificación inválido",
            notification_id=message.get("id"),
        )
        return
    await handler(channel, notification_id)


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket endpoint that streams notifications to the authenticated user."""

    token = _extract_token(websocket)
    if not token:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    try:
        user, unread = await run_in_threadpool(_authenticate_channel, token)
    except AuthError as exc:
        logger.info("Rejected notification channel: %s", exc.message)
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    except StorageError:
        await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
        return

    state = websocket.app.state
    publisher: NotificationPublisher = state.notification_publisher
    synchronizer: ReadStateSynchronizer = state.read_state_synchronizer

    await websocket.accept()
    channel = NotificationChannel(websocket, user.id)
    publisher.registry.register(user.id, channel)
    logger.info("Channel %s opened for user %s", channel.id, user.id)
    try:
        await publisher.deliver(
            channel,
            {"type": "connected", "data": {"user_id": user.id, "unread_count": unread}},
        )
        while True:
            frame = await websocket.receive()
            if frame["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(frame.get("code", status.WS_1000_NORMAL_CLOSURE))
            raw_message = frame.get("text")
            if raw_message is None:
                # The protocol is JSON text; binary frames are rejected.
                await synchronizer.report_error(channel, "Mensaje inválido")
                continue
            await _handle_client_message(channel, raw_message, publisher, synchronizer)
    except WebSocketDisconnect:
        pass
    finally:
        publisher.registry.unregister(channel)
        logger.info("Channel %s closed for user %s", channel.id, user.id)
