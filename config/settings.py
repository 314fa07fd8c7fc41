"""Pydantic BaseSettings — order intake configuration loaded once at startup."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from env / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ── Application ─────────────────────────────────────────────
    APP_ENV: Literal["dev", "staging", "prod"] = "dev"
    APP_NAME: str = "uniswapx-order-intake"
    LOG_LEVEL: str = "INFO"

    # ── Legacy order fallback ───────────────────────────────────
    # Comma-separated reactor addresses accepted for untyped orders that
    # target a non-standard reactor. Empty disables the fallback path.
    CUSTOM_REACTOR_ADDRESS: str = ""

    @property
    def custom_reactor_addresses(self) -> tuple[str, ...]:
        """Allow-listed reactor addresses, whitespace and blanks stripped."""
        return tuple(
            part.strip()
            for part in self.CUSTOM_REACTOR_ADDRESS.split(",")
            if part.strip()
        )


settings = Settings()
