"""
termsnake entry point.

Starts a game immediately; there are no command-line options. Settings come
from config.yaml (see termsnake.utils.config_loader).
"""
import logging
import random
import sys

from rich.console import Console
from rich.markup import escape

from .controls.input_listener import InputListener
from .core.screen_interface import ScreenInitError
from .display import create_screen
from .game.renderer import SnakeRenderer
from .game.snake_game import SnakeGame
from .game_loop import GameLoop
from .utils.config_loader import load_config
from .utils.logging_setup import setup_logging

logger = logging.getLogger("termsnake")


def main() -> int:
    """Main entry point."""
    config = load_config()
    setup_logging(config.logging)
    logger.info("Starting with backend=%s tick=%dms", config.display.backend, config.game.tick_ms)

    try:
        screen = create_screen(config.display)
    except ScreenInitError as e:
        logger.error("Display initialization failed: %s", e)
        Console(stderr=True).print(f"[bold red]Cannot start termsnake:[/] {escape(str(e))}")
        return 1

    game = SnakeGame(
        rng=random.Random(config.game.seed),
        snake_symbol=config.display.snake_glyph,
        food_symbol=config.display.food_glyph,
    )
    renderer = SnakeRenderer(border_symbol=config.display.border_glyph)
    listener = InputListener(screen)

    loop = GameLoop(
        screen,
        game,
        renderer,
        listener,
        tick_seconds=config.game.tick_ms / 1000.0,
        game_over_hold=config.game.game_over_hold,
    )
    exit_code = loop.run()

    Console().print(f"Final score: [bold]{game.get_score()}[/]")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
