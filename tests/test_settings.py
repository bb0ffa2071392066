from timecast.core.settings import Settings, get_settings


def test_defaults(settings_env):
    settings_env.delenv("TIME_EXTRA_FORMATS", raising=False)
    settings_env.delenv("LOG_LEVEL", raising=False)

    settings = get_settings()

    assert settings.app_name == "timecast"
    assert settings.log_level == "INFO"
    assert settings.database_url == "sqlite+pysqlite:///:memory:"
    assert settings.time_extra_formats == []


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SQL_LOG_LEVEL", "INFO")
    monkeypatch.setenv("TIME_EXTRA_FORMATS", '["%H.%M", "%Hh%M"]')

    settings = Settings()

    assert settings.log_level == "debug"
    assert settings.sql_log_level == "INFO"
    assert settings.time_extra_formats == ["%H.%M", "%Hh%M"]


def test_get_settings_is_cached(settings_env):
    assert get_settings() is get_settings()
