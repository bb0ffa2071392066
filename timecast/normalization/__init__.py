"""Normalization package.

Each normalizer takes a raw value as handed over by the ORM layer and
returns a canonical form that is safe to store and to display.

All normalizers follow the same contract::

    def normalize(raw: object) -> str | None:
        ...

``None`` and empty strings map to ``None``.  Values that cannot be
interpreted raise a ``ValueError`` subclass; nothing is silently dropped.
"""
