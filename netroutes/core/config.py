"""
Package configuration settings.

Pydantic BaseSettings with environment variable support.
Loads from .env file and environment variables.
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists (python-dotenv)
env_path = Path(".env")
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Escaped spellings accepted for LINE_TERMINATOR in env files
_TERMINATOR_ALIASES = {
    "\\n": "\n",
    "\\r\\n": "\r\n",
    "lf": "\n",
    "crlf": "\r\n",
}


class Settings(BaseSettings):
    """Settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    APP_NAME: str = "netroutes"

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    LOG_FILE: Optional[str] = Field(
        default=None,
        description="Path of a rotating log file. Leave empty to log to stdout only.",
    )

    # Formatting
    LINE_TERMINATOR: str = Field(
        default="\n",
        description="Line terminator written after every formatted route",
    )

    @field_validator("LINE_TERMINATOR")
    @classmethod
    def parse_line_terminator(cls, v):
        """Accept escaped or named forms of the terminator."""
        v = _TERMINATOR_ALIASES.get(v.lower(), v)
        if v not in ("\n", "\r\n"):
            raise ValueError(f"Unsupported line terminator: {v!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
