"""Deterministic date and string formatting.

Rules
-----
* Dates are rendered as ``YYYY-MM-DD`` in **local** time.
* Lengths are counted in code points, so CJK text truncates per
  character.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from type_helpers.exceptions import InvalidArgumentError, InvalidDateError
from type_helpers.utils.constants import DEFAULT_TRUNCATE_SUFFIX

DateInput = date | datetime | int | float | str
"""Anything :func:`format_date` accepts."""

TimestampUnit = Literal["s", "ms"]
"""Unit of numeric timestamps: POSIX seconds or JS-style milliseconds."""

_UNIT_DIVISORS: dict[str, int] = {"s": 1, "ms": 1000}


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def _to_local_date(value: DateInput, unit: TimestampUnit = "s") -> date:
    """Resolve *value* to the local calendar date it represents.

    * Aware datetimes are converted to the local timezone first.
    * Naive datetimes and plain dates are taken as already local.
    * Numbers are POSIX timestamps in *unit* (seconds by default).
    * Strings are parsed with :meth:`datetime.fromisoformat`.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        raise InvalidDateError(f"Not a date: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / _UNIT_DIVISORS[unit]).date()
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidDateError(f"Timestamp out of range: {value!r}") from exc
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise InvalidDateError(
                f"Cannot parse date string: {value!r}",
                hint="Use ISO-8601, e.g. 2024-01-05 or 2024-01-05T10:30:00+08:00.",
            ) from exc
        return _to_local_date(parsed)
    raise InvalidDateError(f"Unsupported date value type: {type(value).__name__}")


def format_date(value: DateInput, *, unit: TimestampUnit = "s") -> str:
    """Format *value* as ``YYYY-MM-DD`` using its local calendar date.

    Numeric *value* is a timestamp in *unit*: ``"s"`` (default) for
    POSIX seconds, ``"ms"`` for milliseconds such as
    :attr:`~type_helpers.core.models.ApiResponse.timestamp`.

    Raises
    ------
    InvalidDateError
        If *value* is an unparseable string, an out-of-range timestamp,
        or of an unsupported type.
    InvalidArgumentError
        If *unit* is not ``"s"`` or ``"ms"``.
    """
    if unit not in _UNIT_DIVISORS:
        raise InvalidArgumentError(f"unit must be 's' or 'ms', got {unit!r}")
    day = _to_local_date(value, unit)
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

def truncate(
    text: str,
    max_length: int,
    suffix: str = DEFAULT_TRUNCATE_SUFFIX,
) -> str:
    """Shorten *text* to at most *max_length* characters.

    Text that already fits is returned unchanged.  Otherwise the head of
    *text* is kept and *suffix* appended so the result is exactly
    *max_length* long.  When *max_length* is shorter than *suffix*
    itself, no text is kept and the suffix is cut to *max_length*.

    Raises
    ------
    InvalidArgumentError
        If *max_length* is negative.
    """
    if max_length < 0:
        raise InvalidArgumentError(f"max_length must be >= 0, got {max_length}")
    if len(text) <= max_length:
        return text
    keep = max(max_length - len(suffix), 0)
    return (text[:keep] + suffix)[:max_length]
