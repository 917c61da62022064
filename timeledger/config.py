# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Every field can be set through a TIMELEDGER_ prefixed environment variable
    or a .env file.
    """

    app_name: str = "TimeLedger"
    log_level: str = "INFO"
    annual_leave_allowance: float = 25.0
    holiday_country: str = "AT"
    holiday_subdivision: str | None = None
    cors_allow_origins: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_prefix="TIMELEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        """Comma separated CORS origins as a list."""
        return [
            origin.strip()
            for origin in self.cors_allow_origins.split(",")
            if origin.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    return Settings()
