"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class GameConfig(BaseModel):
    """Table configuration."""

    num_players: int = Field(default=4, ge=1)
    seed: int | None = None  # Shuffle seed, random if unset


class RulesConfig(BaseModel):
    """Rules configuration."""

    hand_size: int = Field(default=11, ge=1)
    foot_size: int = Field(default=11, ge=1)

    # Discards a strategy may propose before the turn is rejected
    max_discard_attempts: int = Field(default=100, ge=1)
    # Discarding a wild card locks the discard pile
    lock_on_wild_discard: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    rules: RulesConfig = RulesConfig()
    logging: LoggingConfig = LoggingConfig()


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
