"""
Application configuration using Pydantic Settings.
All environment-specific values are centralized here.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── App ──────────────────────────────────────────────
    app_name: str = "HIPAA Compliance Assessment"
    debug: bool = False

    # ── Catalogs ─────────────────────────────────────────
    # Empty path = use the catalog shipped inside the package
    requirements_catalog_path: str = ""
    questions_catalog_path: str = ""
    strict_catalog: bool = True
    # Empty path = built-in assessment rule set
    rules_config_path: str = ""

    # ── Remediation tasks ────────────────────────────────
    task_lead_days_high: int = 7
    task_lead_days_medium: int = 30
    task_lead_days_low: int = 90

    # ── API ──────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: str = "*"

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
