from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.constants import MONTH_KEY_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value, field_name: str = "Date") -> date:
    """Parse YYYY-MM-DD (or a longer ISO timestamp) into a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value or "").strip()
    try:
        return datetime.strptime(text[:10], "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field_name} must be a valid date (YYYY-MM-DD)")


def parse_iso_datetime(value, field_name: str = "Date") -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value or "").strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError(f"{field_name} must be a valid ISO date/time")
    # Stored as naive local time; an explicit offset is converted, not dropped.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def parse_iso_moment(value, field_name: str = "Date") -> datetime:
    """Full instant of a date or timestamp; a bare YYYY-MM-DD means midnight."""
    if isinstance(value, datetime):
        return parse_iso_datetime(value, field_name)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    text = str(value or "").strip()
    if len(text) <= 10:
        return datetime.combine(parse_iso_date(text, field_name), time.min)
    return parse_iso_datetime(text, field_name)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def month_key(moment: date) -> str:
    return moment.strftime(MONTH_KEY_FORMAT)


def isoformat(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None
