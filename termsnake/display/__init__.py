"""
Screen backends for termsnake.

Backends are imported lazily so the terminal game never needs pygame and
tests can swap in their own screens.
"""

from ..core.screen_interface import Screen
from ..utils.config_loader import DisplayConfig

BACKENDS = ("terminal", "pygame")


def create_screen(config: DisplayConfig) -> Screen:
    """
    Create the screen backend named in the configuration.

    Args:
        config: Display settings

    Returns:
        An initialized screen

    Raises:
        ValueError: If the backend name is unknown
        ScreenInitError: If the backend cannot be acquired
    """
    if config.backend == "terminal":
        from .terminal_screen import TerminalScreen
        return TerminalScreen()

    if config.backend == "pygame":
        from .pygame_screen import PygameScreen
        return PygameScreen(
            columns=config.window_columns,
            rows=config.window_rows,
            cell_size=config.cell_size,
        )

    raise ValueError(f"Unknown display backend: {config.backend!r} (expected one of {', '.join(BACKENDS)})")


__all__ = [
    'BACKENDS',
    'create_screen',
]
