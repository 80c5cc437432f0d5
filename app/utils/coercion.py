"""
Exercise Tracker API - Input Coercion Helpers.

Request fields arrive as loosely typed text (form posts) or JSON values.
These helpers coerce them the way the API has always done: numbers are
read leniently and bad numbers become ``None`` rather than an error.
Dates are stored as naive UTC datetimes.
"""

import math
import re
from datetime import date, datetime, timezone
from typing import Any, Optional

from app.utils.errors import cast_error

# Largest integer MongoDB stores (signed 64-bit)
MAX_INT64 = 2 ** 63 - 1

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# Accepted after ISO 8601, in order.
_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%a %b %d %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
)


def utcnow() -> datetime:
    """Current moment as a naive UTC datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_int(value: Any) -> Optional[int]:
    """
    Read an integer the way ``parseInt`` does.

    Leading whitespace and a sign are allowed and the leading run of digits
    is taken, so ``"30min"`` gives 30 and ``"12.9"`` gives 12. Returns None
    when no digits lead the text.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)

    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def parse_limit(value: Any) -> Optional[int]:
    """
    Read the ``limit`` query parameter.

    Returns a positive cap, or None meaning "return everything". Fractions
    truncate; zero, negatives, unparseable text and values too large for
    MongoDB mean no cap.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    limit = int(number)
    return limit if 0 < limit <= MAX_INT64 else None


def _to_naive_utc(moment: datetime) -> datetime:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def parse_date(value: Any, path: str = "date") -> Optional[datetime]:
    """
    Parse a submitted date into a naive UTC datetime.

    Date-only text is midnight UTC of that day. Numbers are milliseconds
    since the epoch. ``None``, empty text and other falsy values (``0``,
    ``False``) return None so the caller can apply its own default.

    Raises:
        InvalidInputError: If the value is not a recognisable date.
    """
    if value is None or (not isinstance(value, str) and not value):
        return None
    if isinstance(value, datetime):
        return _to_naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not math.isfinite(value):
            raise cast_error("date", value, path)
        try:
            moment = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise cast_error("date", value, path)
        return _to_naive_utc(moment)

    text = str(value).strip()
    if not text:
        return None

    iso = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return _to_naive_utc(datetime.fromisoformat(iso))
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    raise cast_error("date", value, path)


def to_date_string(moment: datetime) -> str:
    """Render a date as a short calendar string, e.g. ``Mon Jan 16 2023``."""
    return moment.strftime("%a %b %d %Y")
