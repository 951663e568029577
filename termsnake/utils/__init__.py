"""
Utilities: configuration loading and logging setup.
"""

from .config_loader import Config, GameConfig, DisplayConfig, LoggingConfig, load_config
from .logging_setup import setup_logging

__all__ = [
    'Config',
    'GameConfig',
    'DisplayConfig',
    'LoggingConfig',
    'load_config',
    'setup_logging',
]
