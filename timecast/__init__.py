"""timecast: time-of-day attribute casting for SQLAlchemy models."""

__version__ = "0.1.0"
