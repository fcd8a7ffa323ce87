"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
PROJECT_ROOT = Path(__file__).parent.parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# Hard ceiling for /search, whatever SEARCH_RESULT_LIMIT says
MAX_SEARCH_RESULTS = 50


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Console logging verbosity
        log_dir: Directory for daily log files
        port: Port the API listens on
        database_url: SQLAlchemy connection string
        db_connect_retries: Connection attempts made at startup
        db_retry_delay_seconds: Pause between startup connection attempts
        seed_sample_data: Insert two sample records into an empty table
        search_result_limit: Maximum number of records returned by /search
        llm_base_url: Base URL of the generative-model server
        llm_model: Model name sent with each generate request
        llm_timeout_seconds: HTTP timeout for generate requests
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_dir: Path
    port: int

    # Database settings
    database_url: str
    db_connect_retries: int
    db_retry_delay_seconds: float
    seed_sample_data: bool
    search_result_limit: int

    # LLM settings
    llm_base_url: str
    llm_model: str
    llm_timeout_seconds: float

    # Observability
    enable_audit_logging: bool

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _get_bool(key: str, default: str) -> bool:
    return _get_env(key, default).strip().lower() in ("1", "true", "yes", "on")


def _build_database_url() -> str:
    """
    Resolve the SQLAlchemy URL.

    Priority:
    1. DATABASE_URL
    2. Local components (DB_HOST, DB_USER, ...) for MySQL via PyMySQL
    """
    database_url = os.environ.get("DATABASE_URL")

    if not database_url:
        host = _get_env("DB_HOST", "localhost")
        port = _get_env("DB_PORT", "3306")
        user = _get_env("DB_USER", "root")
        password = quote_plus(_get_env("DB_PASSWORD", ""))
        name = _get_env("DB_NAME", "recordsdb")
        database_url = f"mysql+pymysql://{user}:{password}@{host}:{port}/{name}"

    # SQLAlchemy only accepts the long dialect names
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)
    if database_url.startswith("mysql://"):
        database_url = database_url.replace("mysql://", "mysql+pymysql://", 1)

    return database_url


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once; call ``get_settings.cache_clear()`` to
    force a reload (tests do this after changing the environment).

    Returns:
        Settings instance with all configuration values
    """
    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "RecordKeeper"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_dir=Path(_get_env("LOG_DIR", str(PROJECT_ROOT / "logs"))),
        port=int(_get_env("PORT", "8000")),

        # Database
        database_url=_build_database_url(),
        db_connect_retries=int(_get_env("DB_CONNECT_RETRIES", "5")),
        db_retry_delay_seconds=float(_get_env("DB_RETRY_DELAY_SECONDS", "5")),
        seed_sample_data=_get_bool("SEED_SAMPLE_DATA", "true"),
        search_result_limit=min(
            max(int(_get_env("SEARCH_RESULT_LIMIT", str(MAX_SEARCH_RESULTS))), 0),
            MAX_SEARCH_RESULTS,
        ),

        # LLM
        llm_base_url=_get_env("LLM_BASE_URL", "http://ollama:11434").rstrip("/"),
        llm_model=_get_env("LLM_MODEL", "mistral"),
        llm_timeout_seconds=float(_get_env("LLM_TIMEOUT_SECONDS", "60")),

        enable_audit_logging=_get_bool("ENABLE_AUDIT_LOGGING", "true"),
    )
