"""Attribute casts: read/write hooks between stored values and model attributes."""
from __future__ import annotations

from timecast.casts.base import AttributeCast
from timecast.casts.time_cast import TimeCast, get_time_cast

__all__ = ["AttributeCast", "TimeCast", "get_time_cast"]
