from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from ..core.constants import (
    EVENT_DESCRIPTION_MAX_LENGTH,
    EVENT_TITLE_MAX_LENGTH,
    JUSTIFICATION_MAX_LENGTH,
    MEMBER_NAME_MAX_LENGTH,
    MEMBER_NAME_MIN_LENGTH,
)
from ..core.exceptions import ValidationError
from .datetime_utils import ISO_DATE_RE, parse_iso_date

# Letters (including the Latin-1 accented range), spaces, hyphens and apostrophes.
MEMBER_NAME_RE = re.compile(r"^[a-zA-ZÀ-ÿ\s'-]+$")


def require_text(value, message: str) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise ValidationError(message)
    return value


def require_non_empty(value: Optional[str], message: str) -> str:
    value = require_text(value, message)
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_max_length(value: str, max_len: int, message: str) -> str:
    if len(value) > max_len:
        raise ValidationError(message)
    return value


def validate_member_name(name: Optional[str]) -> str:
    name = (require_text(name, "Nome inválido") or "").strip()
    if len(name) < MEMBER_NAME_MIN_LENGTH:
        raise ValidationError(f"O nome deve ter pelo menos {MEMBER_NAME_MIN_LENGTH} caracteres")
    require_max_length(name, MEMBER_NAME_MAX_LENGTH, f"O nome deve ter no máximo {MEMBER_NAME_MAX_LENGTH} caracteres")
    if not MEMBER_NAME_RE.match(name):
        raise ValidationError("O nome deve conter apenas letras, espaços, hífens e apóstrofos")
    return name


def validate_event_title(title: Optional[str]) -> str:
    title = require_non_empty(title, "O título é obrigatório")
    return require_max_length(
        title, EVENT_TITLE_MAX_LENGTH, f"O título deve ter no máximo {EVENT_TITLE_MAX_LENGTH} caracteres"
    )


def validate_event_description(description: Optional[str]) -> Optional[str]:
    """Trimmed description, or None when blank."""
    description = require_text(description, "Descrição inválida")
    if description is None:
        return None
    description = description.strip()
    if not description:
        return None
    return require_max_length(
        description,
        EVENT_DESCRIPTION_MAX_LENGTH,
        f"A descrição deve ter no máximo {EVENT_DESCRIPTION_MAX_LENGTH} caracteres",
    )


def validate_event_date(value) -> date:
    """Accept a date or a YYYY-MM-DD string. Past dates are allowed."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not ISO_DATE_RE.match(value):
        raise ValidationError("Data inválida")
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError("Data inválida")


def validate_justification(text: Optional[str]) -> Optional[str]:
    text = require_text(text, "Justificativa inválida")
    if text is None:
        return None
    text = text.strip()
    if not text:
        return None
    return require_max_length(
        text,
        JUSTIFICATION_MAX_LENGTH,
        f"A justificativa deve ter no máximo {JUSTIFICATION_MAX_LENGTH} caracteres",
    )
