"""Unit tests for the SendGrid email helper utilities."""

from __future__ import annotations

import json

import pytest

from crm_api.config import Settings
from crm_api.infrastructure import email as email_module


class _Response:
    def __init__(self, status_code: int, body=b"") -> None:
        self.status_code = status_code
        self.body = body


class _RecordingClient:
    sent: list = []
    response = _Response(202)

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    def send(self, message):
        type(self).sent.append((self.api_key, message))
        return type(self).response


@pytest.fixture()
def configured(monkeypatch):
    settings = Settings(
        database_url="sqlite://",
        secret_key="secret",
        sendgrid_api_key="SG.test-key",
        sendgrid_sender="crm@example.com",
    )
    monkeypatch.setattr(email_module, "get_settings", lambda: settings)
    _RecordingClient.sent = []
    _RecordingClient.response = _Response(202)
    monkeypatch.setattr(email_module, "SendGridAPIClient", _RecordingClient)
    return settings


def test_send_email_uses_configured_credentials(configured):
    assert email_module.send_email("Asunto", "<p>Hola</p>", "agent@example.com") is True

    api_key, message = _RecordingClient.sent[0]
    payload = message.get()
    assert api_key == "SG.test-key"
    assert payload["from"]["email"] == "crm@example.com"
    assert payload["subject"] == "Asunto"
    assert payload["personalizations"][0]["to"][0]["email"] == "agent@example.com"


def test_password_reset_email_escapes_content(configured):
    assert email_module.send_password_reset_email("agent@example.com", "a<b>c", name="<Ana>")

    _, message = _RecordingClient.sent[0]
    html = message.get()["content"][0]["value"]
    assert "a&lt;b&gt;c" in html
    assert "&lt;Ana&gt;" in html


def test_failed_response_is_logged_with_details(configured, caplog):
    _RecordingClient.response = _Response(
        400, json.dumps({"errors": [{"message": "Invalid sender", "help": "docs"}]}).encode()
    )

    with caplog.at_level("ERROR", logger=email_module.__name__):
        assert email_module.send_email("Asunto", "<p>Hola</p>", "agent@example.com") is False

    assert "Invalid sender (help: docs)" in caplog.text


def test_sendgrid_settings_must_come_in_pairs():
    with pytest.raises(ValueError):
        Settings(database_url="sqlite://", secret_key="secret", sendgrid_api_key="SG.key")
