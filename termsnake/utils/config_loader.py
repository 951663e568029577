"""
Configuration Loader - Load configuration from YAML.

Looks for config.yaml in the working directory, then in the project root.
Missing files or sections fall back to the dataclass defaults; unknown keys
are ignored. The board size is fixed and not configurable.
"""
import logging
import yaml
from pathlib import Path
from typing import Any, Optional
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Game timing and randomness."""
    tick_ms: int = 75
    game_over_hold: float = 3.0
    seed: Optional[int] = None


@dataclass
class DisplayConfig:
    """Display backend and glyphs."""
    backend: str = "terminal"
    snake_glyph: str = "█"
    food_glyph: str = "●"
    border_glyph: str = "‖"
    # Only used by the pygame backend
    window_columns: int = 40
    window_rows: int = 22
    cell_size: int = 24


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: str = "logs/termsnake.log"


@dataclass
class Config:
    """Complete application configuration."""
    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    if not isinstance(data, dict):
        logger.warning("Ignoring %s section that is not a mapping: %r", cls.__name__, data)
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Find config.yaml in common locations."""
    possible_paths = [
        Path("config.yaml"),
        Path(__file__).parent.parent.parent / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path

    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to a discovered config.yaml)

    Returns:
        Config object with all settings
    """
    path = Path(config_path) if config_path is not None else _find_config_file()

    if path is None or not path.exists():
        logger.debug("No config file found, using defaults")
        return Config()

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()

    if not isinstance(data, dict):
        logger.warning("Ignoring %s: top level is not a mapping", path)
        return Config()

    config = Config()

    if 'game' in data:
        config.game = _dict_to_dataclass(data['game'], GameConfig)

    if 'display' in data:
        config.display = _dict_to_dataclass(data['display'], DisplayConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    return config
