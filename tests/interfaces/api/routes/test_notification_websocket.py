"""Live notification channel over websockets."""

from __future__ import annotations

import pytest
from starlette.websockets import WebSocketDisconnect

from crm_api.infrastructure.repositories import NotificationRepository


def _connect(client, token):
    return client.websocket_connect(f"/notifications/ws?token={token}")


def _store(db_session, recipient_id, title="Aviso"):
    return NotificationRepository(db_session).create(
        recipient_id=recipient_id, title=title, message="Mensaje"
    )


def test_invalid_token_is_rejected_before_registration(client, app):
    with pytest.raises(WebSocketDisconnect) as excinfo:
        with _connect(client, "not-a-token"):
            pass

    assert excinfo.value.code == 1008
    assert app.state.channel_registry.connection_count() == 0


def test_missing_token_is_rejected(client):
    with pytest.raises(WebSocketDisconnect) as excinfo:
        with client.websocket_connect("/notifications/ws"):
            pass

    assert excinfo.value.code == 1008


def test_handshake_reports_unread_count(client, db_session, agent, token_for):
    _store(db_session, agent.id)

    with _connect(client, token_for(agent)) as websocket:
        message = websocket.receive_json()

    assert message == {"type": "connected", "data": {"user_id": agent.id, "unread_count": 1}}


def test_bearer_header_is_accepted(client, agent, token_for):
    headers = {"Authorization": f"Bearer {token_for(agent)}"}

    with client.websocket_connect("/notifications/ws", headers=headers) as websocket:
        assert websocket.receive_json()["type"] == "connected"


def test_lead_assignment_is_pushed_live(client, agent, admin, token_for, auth_headers):
    with _connect(client, token_for(agent)) as websocket:
        websocket.receive_json()

        response = client.post(
            "/leads",
            json={"full_name": "Ana Pérez", "assigned_to": agent.id},
            headers=auth_headers(admin),
        )
        assert response.status_code == 201

        message = websocket.receive_json()

    assert message["type"] == "notification"
    assert message["data"]["title"] == "Nuevo Lead Asignado"
    assert message["data"]["message"] == "Se te ha asignado un nuevo lead: Ana Pérez"
    assert message["data"]["extra_data"] == {
        "lead_id": response.json()["data"]["id"],
        "entity_type": "lead",
    }


def test_mark_as_read_syncs_every_device(client, db_session, agent, token_for):
    notification = _store(db_session, agent.id)
    token = token_for(agent)

    with _connect(client, token) as phone, _connect(client, token) as laptop:
        phone.receive_json()
        laptop.receive_json()

        phone.send_json({"type": "mark_as_read", "id": notification.id})

        expected = {"type": "notification_read", "data": {"id": notification.id}}
        assert phone.receive_json() == expected
        assert laptop.receive_json() == expected

    assert NotificationRepository(db_session).count_unread(agent.id) == 0


def test_delete_syncs_every_device(client, db_session, agent, token_for):
    notification = _store(db_session, agent.id)
    token = token_for(agent)

    with _connect(client, token) as phone, _connect(client, token) as laptop:
        phone.receive_json()
        laptop.receive_json()

        laptop.send_json({"type": "delete_notification", "id": notification.id})

        expected = {"type": "notification_deleted", "data": {"id": notification.id}}
        assert laptop.receive_json() == expected
        assert phone.receive_json() == expected


def test_errors_go_to_the_originating_channel_only(client, agent, token_for):
    token = token_for(agent)

    with _connect(client, token) as phone, _connect(client, token) as laptop:
        phone.receive_json()
        laptop.receive_json()

        phone.send_json({"type": "mark_as_read", "id": 9999})
        error = phone.receive_json()

        # The sibling only sees the reply to its own ping.
        laptop.send_json({"type": "ping"})
        assert laptop.receive_json() == {"type": "pong"}

    assert error["type"] == "error"
    assert error["data"]["id"] == 9999


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "subscribe"},
        {"type": "mark_as_read"},
        {"type": "mark_as_read", "id": "abc"},
        {"type": "delete_notification", "id": -3},
    ],
)
def test_malformed_messages_produce_an_error(client, agent, token_for, payload):
    with _connect(client, token_for(agent)) as websocket:
        websocket.receive_json()
        websocket.send_json(payload)

        assert websocket.receive_json()["type"] == "error"


def test_invalid_json_produces_an_error(client, agent, token_for):
    with _connect(client, token_for(agent)) as websocket:
        websocket.receive_json()
        websocket.send_text("{not json")

        assert websocket.receive_json()["type"] == "error"


def test_binary_frame_produces_an_error_and_keeps_the_channel(client, agent, token_for):
    with _connect(client, token_for(agent)) as websocket:
        websocket.receive_json()
        websocket.send_bytes(b'{"type": "ping"}')

        assert websocket.receive_json() == {
            "type": "error",
            "data": {"message": "Mensaje inválido"},
        }

        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}


def test_rest_read_all_is_pushed_to_open_channels(
    client, db_session, agent, token_for, auth_headers
):
    _store(db_session, agent.id)
    _store(db_session, agent.id)

    with _connect(client, token_for(agent)) as websocket:
        websocket.receive_json()
        client.post("/notifications/read-all", headers=auth_headers(agent))

        assert websocket.receive_json() == {
            "type": "notifications_read_all",
            "data": {"updated": 2},
        }


def test_disconnect_unregisters_the_channel(client, app, agent, token_for):
    with _connect(client, token_for(agent)) as websocket:
        websocket.receive_json()
        assert app.state.channel_registry.connection_count() == 1

    # A follow-up request gives the server time to process the close.
    client.get("/health")
    assert app.state.channel_registry.channels_for(agent.id) == frozenset()
