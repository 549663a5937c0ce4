"""
Configuration from environment variables.

Values are read when ``Settings`` is instantiated, so tests can set
environment variables (or pass overrides) before building the app.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value not in (None, "") else None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    app_title: str = field(default_factory=lambda: os.getenv("APP_TITLE", "Player Club Signing Application"))
    app_host: str = field(default_factory=lambda: os.getenv("APP_HOST", "0.0.0.0"))
    app_port: int = field(default_factory=lambda: int(os.getenv("APP_PORT", "8000")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Sample data generated when the app is created
    seed_on_startup: bool = field(default_factory=lambda: _env_bool("SEED_ON_STARTUP", "true"))
    seed_players: int = field(default_factory=lambda: int(os.getenv("SEED_PLAYERS", "90")))
    seed_teams: int = field(default_factory=lambda: int(os.getenv("SEED_TEAMS", "6")))
    seed_team_size: int = field(default_factory=lambda: int(os.getenv("SEED_TEAM_SIZE", "15")))
    seed_random: Optional[int] = field(default_factory=lambda: _env_optional_int("SEED_RANDOM"))

    cors_origins: str = field(default_factory=lambda: os.getenv("CORS_ORIGINS", "*"))

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    return Settings()
