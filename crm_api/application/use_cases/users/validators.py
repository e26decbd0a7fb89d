"""Common validation helpers for user use cases."""

from crm_api.domain.exceptions import ValidationError

MIN_PASSWORD_LENGTH = 8


def normalize_email(email: str) -> str:
    """Return ``email`` trimmed and lower-cased or raise ``ValidationError``."""

    normalized = (email or "").strip().lower()
    if normalized.count("@") != 1:
        raise ValidationError("El correo electrónico no es válido")
    local_part, domain = normalized.split("@", 1)
    if not local_part or "." not in domain:
        raise ValidationError("El correo electrónico no es válido")
    return normalized


def ensure_password_strength(password: str) -> str:
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"La contraseña debe tener al menos {MIN_PASSWORD_LENGTH} caracteres"
        )
    return password
