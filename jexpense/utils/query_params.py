"""
Normalización de la query string.

Las rutas leen la query string cruda y la pasan por aquí, así los errores de
parámetros salen como ``ValidationError`` (400) con el mismo formato que el
resto de errores del servicio.
"""

from datetime import date
from typing import Dict, Optional
from urllib.parse import parse_qsl

from jexpense.core.errors import ValidationError
from jexpense.models.enums import TransactionType

MAX_TAG_ID = 2**63 - 1


def normalize_query_string(raw: Optional[str]) -> Dict[str, str]:
    """Query string -> dict plano de strings decodificados; si una clave se repite gana la última."""
    if not raw:
        return {}
    return {
        key.strip(): value.strip()
        for key, value in parse_qsl(raw.lstrip("?"), keep_blank_values=True)
        if key.strip()
    }


def parse_transaction_type(
    params: Dict[str, str], default: TransactionType = TransactionType.income
) -> TransactionType:
    raw = params.get("type")
    if not raw:
        return default
    for member in TransactionType:
        if member.value.lower() == raw.lower():
            return member
    raise ValidationError(f"Invalid type {raw!r}, expected Income or Expense")


def _parse_date(params: Dict[str, str], name: str) -> date:
    raw = params.get(name)
    if not raw:
        raise ValidationError(f"{name} is required")
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise ValidationError(f"{name} must be a date (YYYY-MM-DD), got {raw!r}")


def parse_date_range(params: Dict[str, str]) -> tuple[date, date]:
    start_date = _parse_date(params, "startDate")
    end_date = _parse_date(params, "endDate")
    if start_date > end_date:
        raise ValidationError("startDate must be on or before endDate")
    return start_date, end_date


def parse_tag_id(params: Dict[str, str]) -> int:
    raw = params.get("tagId")
    if not raw:
        raise ValidationError("tagId is required")
    # Solo dígitos ASCII: sin signo, sin "_" y dentro de un BIGINT positivo
    if not (raw.isascii() and raw.isdigit()):
        raise ValidationError(f"tagId must be an integer, got {raw!r}")
    tag_id = int(raw)
    if not 1 <= tag_id <= MAX_TAG_ID:
        raise ValidationError(f"tagId must be between 1 and {MAX_TAG_ID}, got {raw}")
    return tag_id
