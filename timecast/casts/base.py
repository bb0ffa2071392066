"""Contract shared by every attribute cast.

decode : stored column value -> application value (read path)
encode : application value -> column value (write path)

Casts are stateless apart from construction-time options and must not
swallow errors: a value that cannot be cast raises to the caller.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AttributeCast(Protocol):
    def decode(self, value: Any) -> Any:
        """Transform a value read from storage."""
        ...

    def encode(self, value: Any) -> Any:
        """Transform a value before it is persisted."""
        ...
