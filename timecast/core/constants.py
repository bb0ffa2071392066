"""Canonical time layout and the input layouts the normalizer accepts.

Canonical layout
----------------
``HH:MM:SS``: 24-hour clock, zero-padded, no timezone, no date component.
Every value leaving ``timecast.normalization.time_normalizer`` has this shape.

Input layouts
-------------
Strings go through ``datetime.fromisoformat`` first, then
``time.fromisoformat``, then the ``strptime`` layouts below, then any
caller-supplied layouts.  The ISO parsers are only tried when the clock part
starts with ``HH:``; otherwise they would read ``"14.30"`` as a fractional
hour.  The first layout that matches wins.  Where two layouts can both match
(``d/m/Y`` and ``m/d/Y``) they only disagree on the date, which is discarded.
"""
from __future__ import annotations

import re

TIME_LAYOUT = "%H:%M:%S"
TIME_PATTERN = re.compile(r"^\d{2}:\d{2}:\d{2}$")

# Column width of a stored "HH:MM:SS" value
TIME_COLUMN_LENGTH = 8

TIME_INPUT_FORMATS: tuple[str, ...] = (
    # 24-hour clock, non-padded fields ("9:5", "9:05:07")
    "%H:%M",
    "%H:%M:%S",
    "%H:%M:%S.%f",
    # dotted clock ("14.30", "14.30.15")
    "%H.%M",
    "%H.%M.%S",
    # 12-hour clock
    "%I:%M %p",
    "%I:%M:%S %p",
    "%I:%M%p",
    "%I:%M:%S%p",
    "%I %p",
    "%I%p",
    # date-time forms that fromisoformat rejects
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%d-%m-%Y %H:%M",
    "%d-%m-%Y %H:%M:%S",
    "%d/%m/%Y %H:%M",
    "%d/%m/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%Y-%m-%d %I:%M %p",
    "%Y-%m-%d %I:%M:%S %p",
)
