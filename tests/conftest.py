import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from timecast.db.base import Base
from timecast.db import models  # noqa: F401


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///:memory:")

    from timecast.core.settings import get_settings
    from timecast.db.session import reset_engine

    get_settings.cache_clear()
    reset_engine()

    yield monkeypatch

    reset_engine()
    get_settings.cache_clear()
    os.environ.pop("DATABASE_URL", None)


@pytest.fixture
def db() -> Session:
    engine = create_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    session_factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    with session_factory() as session:
        yield session

    engine.dispose()
