"""Login, refresh and password recovery endpoints."""

from __future__ import annotations

from datetime import timedelta

from crm_api.infrastructure import email as email_module
from crm_api.infrastructure.repositories import UserRepository
from crm_api.infrastructure.security import create_access_token, decode_token


def _login(client, email="agent@example.com", password="Secret123"):
    return client.post("/auth/login", json={"email": email, "password": password})


def test_login_returns_tokens_and_user(client, agent, db_session):
    response = _login(client)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["user"]["email"] == "agent@example.com"
    assert body["data"]["user"]["role"]["alias"] == "agent"
    assert "password" not in body["data"]["user"]

    claims = decode_token(body["data"]["token"])
    assert claims["sub"] == "agent@example.com"
    assert claims["uid"] == agent.id
    assert claims["role"] == "agent"
    assert UserRepository(db_session).get(agent.id).last_login is not None


def test_login_with_wrong_password_is_rejected(client, agent):
    response = _login(client, password="WrongPass1")

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Credenciales incorrectas"}


def test_login_of_inactive_user_is_forbidden(client, agent, db_session):
    from dataclasses import replace

    repository = UserRepository(db_session)
    repository.update(replace(repository.get(agent.id), is_active=False))

    assert _login(client).status_code == 403


def test_me_returns_the_current_user(client, agent):
    token = _login(client).json()["data"]["token"]

    response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["data"]["id"] == agent.id


def test_refresh_issues_a_new_access_token(client, agent):
    refresh_token = _login(client).json()["data"]["refresh_token"]

    response = client.post("/auth/refresh", json={"refresh_token": refresh_token})

    assert response.status_code == 200
    new_token = response.json()["data"]["token"]
    assert decode_token(new_token)["uid"] == agent.id


def test_access_token_cannot_be_used_to_refresh(client, agent):
    access_token = _login(client).json()["data"]["token"]

    response = client.post("/auth/refresh", json={"refresh_token": access_token})

    assert response.status_code == 401


def test_expired_token_is_rejected(client, agent):
    expired = create_access_token({"sub": agent.email}, expires_delta=timedelta(minutes=-1))

    response = client.get("/auth/me", headers={"Authorization": f"Bearer {expired}"})

    assert response.status_code == 401
    assert response.json()["success"] is False


def test_forgot_password_resets_and_mails_a_temporary_password(
    client, agent, db_session, monkeypatch
):
    sent = {}

    def _fake_send(email, password, *, name=None):
        sent.update(email=email, password=password, name=name)
        return True

    monkeypatch.setattr("crm_api.interfaces.api.routes.auth.send_password_reset_email", _fake_send)
    old_token = _login(client).json()["data"]["token"]

    response = client.post("/auth/forgot-password", json={"email": "AGENT@example.com"})

    assert response.status_code == 202
    assert sent["email"] == "agent@example.com"
    assert _login(client, password=sent["password"]).status_code == 200
    assert _login(client).status_code == 401
    assert UserRepository(db_session).get(agent.id).must_change_password is True
    # Tokens issued before the reset no longer authenticate.
    stale = client.get("/auth/me", headers={"Authorization": f"Bearer {old_token}"})
    assert stale.status_code == 401


def test_forgot_password_for_unknown_email_gives_the_same_answer(client, agent, monkeypatch):
    calls = []
    monkeypatch.setattr(
        "crm_api.interfaces.api.routes.auth.send_password_reset_email",
        lambda *args, **kwargs: calls.append(args),
    )

    known = client.post("/auth/forgot-password", json={"email": "agent@example.com"})
    unknown = client.post("/auth/forgot-password", json={"email": "nobody@example.com"})

    assert unknown.status_code == 202
    assert unknown.json() == known.json()
    assert len(calls) == 1


def test_email_helper_is_not_called_without_configuration():
    assert email_module.send_email("Asunto", "<p>Hola</p>", "agent@example.com") is False
