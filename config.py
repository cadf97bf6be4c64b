import logging
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: str) -> List[str]:
    return [
        item.strip()
        for item in os.getenv(name, default).split(",")
        if item.strip()
    ]


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip().upper()
    # getLevelName maps a known name to its number and anything else to a string
    return raw if isinstance(logging.getLevelName(raw), int) else default


@dataclass
class Settings:
    """Runtime settings for the API process"""
    database_url: str = "sqlite:///./todo.db"
    sql_echo: bool = False
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    session_cookie_name: str = "sid"
    session_ttl_seconds: int = 60 * 60 * 24
    session_cookie_secure: bool = False
    bcrypt_rounds: int = 10
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Build Settings from environment variables (and a local .env file)

    Returns:
        Settings populated from the environment, falling back to defaults
    """
    load_dotenv()

    defaults = Settings()
    return Settings(
        database_url=os.getenv("DATABASE_URL") or defaults.database_url,
        sql_echo=_env_bool("SQL_ECHO", defaults.sql_echo),
        cors_origins=_env_list("CORS_ORIGINS", ",".join(defaults.cors_origins)),
        session_cookie_name=os.getenv("SESSION_COOKIE_NAME") or defaults.session_cookie_name,
        session_ttl_seconds=_env_int("SESSION_TTL_SECONDS", defaults.session_ttl_seconds),
        session_cookie_secure=_env_bool("SESSION_COOKIE_SECURE", defaults.session_cookie_secure),
        bcrypt_rounds=_env_int("BCRYPT_ROUNDS", defaults.bcrypt_rounds),
        log_level=_env_log_level("LOG_LEVEL", defaults.log_level),
    )
