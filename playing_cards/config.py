"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel


class GameConfig(BaseModel):
    """Game configuration."""

    slot_count: int = 12
    seed: int | None = None  # Fixed seed for reproducible deals

    # False keeps a resolved pair face up until MatchSession.resolve()
    resolve_immediately: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_cards: bool = False


class GameLogSettings(BaseModel):
    """Match log configuration."""

    enabled: bool = False
    output_path: str = "logs"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogSettings = GameLogSettings()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
