from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def resolve_zone(tz: str) -> ZoneInfo:
    """ZoneInfo para un nombre IANA (ej. America/Bogota); ValueError si no existe."""
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown time zone {tz!r}") from exc


def local_today(zone: ZoneInfo) -> date:
    """Fecha de hoy en la zona horaria ``zone``."""
    return datetime.now(zone).date()
