# jexpense/core/config.py

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()  # Carga las variables de entorno


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(
        self,
        database_url: str,
        sql_echo: bool = False,
        timezone: str = "UTC",
        route_prefix: str = "/jexpense",
        top_categories_limit: int = 5,
        cors_origins: tuple[str, ...] = ("*",),
        log_level: str = "INFO",
    ) -> None:
        if top_categories_limit < 0:
            raise ValueError(
                f"JEXPENSE_TOP_CATEGORIES must be 0 or greater, got {top_categories_limit}"
            )
        self.database_url = database_url
        self.sql_echo = sql_echo
        self.timezone = timezone
        self.route_prefix = route_prefix.rstrip("/")
        self.top_categories_limit = top_categories_limit
        self.cors_origins = cors_origins
        self.log_level = log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.getenv("JEXPENSE_CORS_ORIGINS", "*")
    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./jexpense.db"),
        sql_echo=_env_bool("JEXPENSE_SQL_ECHO"),
        timezone=os.getenv("JEXPENSE_TIMEZONE", "UTC"),
        route_prefix=os.getenv("JEXPENSE_ROUTE_PREFIX", "/jexpense"),
        top_categories_limit=int(os.getenv("JEXPENSE_TOP_CATEGORIES", "5")),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        log_level=os.getenv("JEXPENSE_LOG_LEVEL", "INFO"),
    )
