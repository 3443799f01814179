"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse INDIGO_SEED environment variable."""
    seed = os.getenv("INDIGO_SEED", "").strip()
    if not seed:
        return None
    return int(seed)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


@dataclass(frozen=True)
class GameConfig:
    """Game session configuration."""

    seed: int | None = field(default_factory=_parse_seed)
    show_computer_hand: bool = field(
        default_factory=lambda: _env_flag("INDIGO_SHOW_COMPUTER_HAND", "true")
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _env_flag("DEBUG", "false"))

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
