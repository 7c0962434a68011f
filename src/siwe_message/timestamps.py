"""
ISO-8601 timestamp helpers for the ``Issued At`` / ``Expiration Time`` /
``Not Before`` lines.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import TypeAdapter, ValidationError

_DATETIME = TypeAdapter(datetime)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render as ``YYYY-MM-DDTHH:MM:SS.sssZ``. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def parse_timestamp(text: str) -> Optional[datetime]:
    try:
        return _DATETIME.validate_python(text)
    except ValidationError:
        return None
