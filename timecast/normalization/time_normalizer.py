"""Time-of-day normalizer.

Converts any accepted time-bearing value to the canonical ``HH:MM:SS``
layout (24-hour, zero-padded, no timezone, no date component).

Accepted inputs
---------------
- ``datetime.time`` and ``datetime.datetime``: the wall-clock time is kept,
  any ``tzinfo`` is dropped without conversion.
- ``datetime.date``: midnight.
- ``datetime.timedelta`` in ``[0, 24h)``: offset since midnight, which is
  how several MySQL drivers hand back ``TIME`` columns.
- ``str``: ISO-8601 date-time or time, then ``TIME_INPUT_FORMATS``, then
  any caller-supplied layouts.

Fractional seconds are truncated.  Normalization is idempotent.
"""
from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date, datetime, time, timedelta

from timecast.core.constants import TIME_INPUT_FORMATS, TIME_LAYOUT

_ONE_DAY = timedelta(days=1)
_ISO_DATE_LENGTH = len("YYYY-MM-DD")
_ISO_CLOCK = re.compile(r"\d{2}:")


class TimeParseError(ValueError):
    """Raised when a non-empty value cannot be read as a time of day."""

    def __init__(self, value: object, reason: str | None = None):
        self.value = value
        message = f"could not interpret {value!r} as a time of day"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def normalize_time(raw: object, *, extra_formats: Iterable[str] = ()) -> str | None:
    """Return *raw* as an ``HH:MM:SS`` string, or ``None`` when it is empty.

    Parameters
    ----------
    raw:
        Column value read from the database or supplied by the application.
    extra_formats:
        Additional ``strptime`` layouts tried after the built-in ones.

    Raises
    ------
    TimeParseError
        If *raw* is non-empty but carries no recognisable time of day.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        return _parse_string(text, extra_formats).strftime(TIME_LAYOUT)
    return _from_temporal(raw).strftime(TIME_LAYOUT)


def _from_temporal(raw: object) -> time:
    # datetime is a date subclass, so it has to be checked first
    if isinstance(raw, datetime):
        return raw.time()
    if isinstance(raw, date):
        return time()
    if isinstance(raw, time):
        return raw.replace(tzinfo=None)
    if isinstance(raw, timedelta):
        if raw < timedelta(0) or raw >= _ONE_DAY:
            raise TimeParseError(raw, "offset is outside a single day")
        return (datetime.min + raw).time()
    raise TimeParseError(raw, f"unsupported type {type(raw).__name__}")


def _parse_string(text: str, extra_formats: Iterable[str]) -> time:
    # fromisoformat reads "14.30" as a fractional hour; only trust it when
    # the clock part starts with "HH:"
    if len(text) <= _ISO_DATE_LENGTH or _ISO_CLOCK.match(text, _ISO_DATE_LENGTH + 1):
        try:
            return datetime.fromisoformat(text).time()
        except ValueError:
            pass
    if _ISO_CLOCK.match(text):
        try:
            return time.fromisoformat(text).replace(tzinfo=None)
        except ValueError:
            pass

    for layout in (*TIME_INPUT_FORMATS, *extra_formats):
        try:
            return datetime.strptime(text, layout).time()
        except ValueError:
            continue

    raise TimeParseError(text)
