from __future__ import annotations

from collections.abc import Iterable

from timecast.core.settings import get_settings
from timecast.normalization.time_normalizer import normalize_time


class TimeCast:
    """Cast a time-of-day attribute to and from ``HH:MM:SS``.

    Storage and application use the same string layout, so ``decode`` and
    ``encode`` apply the same normalization.
    """

    def __init__(self, extra_formats: Iterable[str] = ()):
        self.extra_formats = tuple(extra_formats)

    def decode(self, value: object) -> str | None:
        return normalize_time(value, extra_formats=self.extra_formats)

    def encode(self, value: object) -> str | None:
        return normalize_time(value, extra_formats=self.extra_formats)

    def __repr__(self) -> str:
        return f"TimeCast(extra_formats={self.extra_formats!r})"


def get_time_cast() -> TimeCast:
    return TimeCast(extra_formats=get_settings().time_extra_formats)
