import logging.config


def setup_logging() -> None:
    from timecast.core.settings import get_settings

    settings = get_settings()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": settings.log_level.upper(),
                },
                "sqlalchemy.engine": {
                    "handlers": ["console"],
                    "level": settings.sql_log_level.upper(),
                    "propagate": False,
                },
            },
        }
    )
