"""
keysafe Configuration — pydantic-settings based.

All settings are read from environment variables (prefix KEYSAFE_) or a .env file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Scanning ──
    max_units_per_scan: int = Field(
        default=500, description="Max compilation units accepted in one scan request"
    )
    max_expressions_per_unit: int = Field(
        default=50_000, description="Max expressions (including nested) per unit"
    )

    # ── Logging ──
    log_level: str = Field(default="INFO", description="Root log level")

    # ── Server ──
    port: int = Field(default=5001, description="Server port")
    host: str = Field(default="0.0.0.0", description="Server bind host")
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    # ── Audit ──
    audit_enabled: bool = Field(default=True, description="Write an audit entry per scan")
    audit_log_path: str = Field(
        default="audit.jsonl", description="Path to JSON-lines audit log file"
    )

    model_config = {
        "env_prefix": "KEYSAFE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance — imported by other modules
settings = Settings()
