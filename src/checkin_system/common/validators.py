from __future__ import annotations

from ..core.exceptions import InvalidName, MissingEnrollmentId


def require_full_name(value: str | None) -> str:
    """Trimmed name with at least two whitespace-separated words."""
    cleaned = (value or "").strip()
    if len(cleaned.split()) < 2:
        raise InvalidName("Por favor, insira o nome completo (pelo menos duas palavras).")
    return cleaned


def require_enrollment_id(value: str | None) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise MissingEnrollmentId("O número de matrícula é obrigatório.")
    return cleaned
