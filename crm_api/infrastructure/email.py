"""Transactional email delivery through SendGrid.

Only the account recovery flow sends email; failures are logged and reported
as ``False`` so callers can keep their response constant.
"""

from __future__ import annotations

import json
import logging
from html import escape
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from crm_api.config import get_settings

logger = logging.getLogger(__name__)


def _describe_sendgrid_errors(body: Any) -> str | None:
    """Return a readable summary of a SendGrid error payload."""

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None
    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            body = json.loads(body)
        except json.JSONDecodeError:
            return body
    if not body:
        return None

    if isinstance(body, dict):
        messages = [
            f"{item['message']} (help: {item['help']})" if item.get("help") else str(item["message"])
            for item in body.get("errors") or []
            if isinstance(item, dict) and item.get("message")
        ]
        if messages:
            return "; ".join(messages)
        return json.dumps(body, default=str)
    if isinstance(body, list):
        return "; ".join(str(item) for item in body)
    return None


def _log_sendgrid_failure(status_code: Any, body: Any) -> None:
    details = _describe_sendgrid_errors(body)
    if status_code and details:
        logger.error("SendGrid API request failed with status %s: %s", status_code, details)
    elif status_code:
        logger.error("SendGrid API request failed with status %s", status_code)
    elif details:
        logger.error("SendGrid API request failed: %s", details)
    else:
        logger.error("SendGrid API request failed without details")


def send_email(subject: str, html_content: str, recipient: str) -> bool:
    """Send an email using the configured SendGrid credentials."""

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email delivery")
        return False

    message = Mail(
        from_email=(settings.sendgrid_sender, settings.app_name),
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )

    try:
        client = SendGridAPIClient(settings.sendgrid_api_key)
        response = client.send(message)
    except Exception as exc:  # pragma: no cover - network failures depend on environment
        _log_sendgrid_failure(getattr(exc, "status_code", None), getattr(exc, "body", None))
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        _log_sendgrid_failure(status_code, getattr(response, "body", None))
        return False

    return True


def send_password_reset_email(email: str, password: str, *, name: str | None = None) -> bool:
    """Send the temporary password generated by the account recovery flow."""

    settings = get_settings()
    greeting = f"Hola {escape(name)}," if name else "Hola,"
    subject = f"Restablecimiento de contraseña - {settings.app_name}"
    html_content = "".join(
        (
            f"<p>{greeting}</p>",
            "<p>Recibimos una solicitud para restablecer tu contraseña.</p>",
            f"<p><strong>Contraseña temporal:</strong> {escape(password)}</p>",
            "<p>Por seguridad, inicia sesión y actualiza tu contraseña lo antes posible.</p>",
            "<p>Si tú no solicitaste este cambio, comunícate con el administrador.</p>",
        )
    )
    return send_email(subject, html_content, email)


__all__ = ["send_email", "send_password_reset_email"]
