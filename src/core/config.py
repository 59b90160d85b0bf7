"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- The CLI and the session read the same typed contract.

Settings are only read. The converter never writes them back, so a session
always starts from the configured defaults.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.base import Base


class AppSettings(BaseSettings):
    """Central application configuration (`BASECONV_*` variables or `.env`)."""

    model_config = SettingsConfigDict(
        env_prefix="BASECONV_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_input_base: Base = Field(
        default=Base.HEX,
        description="Input base of a new session (hex/dec/bin).",
    )
    default_output_base: Base = Field(
        default=Base.BIN,
        description="Output base of a new session (hex/dec/bin).",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the welcome banner when the interactive loop starts.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level
