from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="timecast", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    sql_log_level: str = Field(default="WARNING", alias="SQL_LOG_LEVEL")
    database_url: str = Field(
        default="sqlite+pysqlite:///./timecast.db",
        alias="DATABASE_URL",
    )
    # Extra strptime layouts accepted on top of TIME_INPUT_FORMATS
    time_extra_formats: list[str] = Field(default_factory=list, alias="TIME_EXTRA_FORMATS")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
