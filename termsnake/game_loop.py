"""
Game Loop - ties the input listener, the engine, and the renderer together.

Phases: RUNNING -> OVER -> TERMINATED. A quit command jumps straight from
RUNNING to TERMINATED.
"""
import logging
import time
from enum import Enum
from typing import Any, Callable

from .controls.commands import Command
from .controls.input_listener import InputListener
from .core.game_interface import GameInterface
from .core.renderer_interface import PaintedCells, RendererInterface
from .core.screen_interface import Screen

logger = logging.getLogger(__name__)

TICK_SECONDS = 0.075
GAME_OVER_HOLD_SECONDS = 3.0


class Phase(Enum):
    """Lifecycle of one game session."""
    RUNNING = "running"
    OVER = "over"
    TERMINATED = "terminated"


class GameLoop:
    """
    Fixed-cadence driver loop.

    Owns the session context (screen, game, renderer, listener) and is the
    only code that mutates game state.
    """

    def __init__(
        self,
        screen: Screen,
        game: GameInterface,
        renderer: RendererInterface,
        listener: InputListener,
        tick_seconds: float = TICK_SECONDS,
        game_over_hold: float = GAME_OVER_HOLD_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the loop.

        Args:
            screen: Display surface, released on exit
            game: Game engine
            renderer: Renderer for frames and the summary
            listener: Source of commands
            tick_seconds: Sleep between ticks
            game_over_hold: How long the game-over message stays up
            sleep: Sleep function (injectable for tests)
        """
        self.screen = screen
        self.game = game
        self.renderer = renderer
        self.listener = listener
        self.tick_seconds = tick_seconds
        self.game_over_hold = game_over_hold
        self._sleep = sleep

        self.phase = Phase.RUNNING
        self.ticks = 0
        self._painted: PaintedCells = frozenset()
        self._state: Any = None

    def run(self) -> int:
        """
        Play one game until it ends or the player quits.

        Returns:
            Process exit code
        """
        logger.info("Game started")
        self.listener.start()
        try:
            while self.phase is Phase.RUNNING:
                self.tick()
                if self.phase is not Phase.TERMINATED:
                    self._sleep(self.tick_seconds)

            if self.phase is Phase.OVER:
                self._present_game_over()
        finally:
            self._teardown()

        return 0

    def tick(self) -> None:
        """Read at most one command, advance the game, and draw it."""
        self.screen.pump_events()
        command = self.listener.read_command()

        if command is Command.QUIT:
            logger.info("Quit requested at score %d", self.game.get_score())
            self.phase = Phase.TERMINATED
            return

        state = self._state = self.game.step(command)
        self.ticks += 1

        if not state.paused:
            self._painted = self.renderer.render(state, self.screen, self._painted)

        if self.game.is_over:
            self.phase = Phase.OVER

    def _present_game_over(self) -> None:
        self.renderer.render_game_over(self._state, self.screen)

        # Hold in tick-sized slices so window backends keep handling events
        slices = 1
        if self.tick_seconds > 0:
            slices = max(1, round(self.game_over_hold / self.tick_seconds))
        for _ in range(slices):
            self.screen.pump_events()
            self._sleep(self.game_over_hold / slices)
        self.phase = Phase.TERMINATED

    def _teardown(self) -> None:
        self.listener.stop()
        self.screen.fini()
        self.phase = Phase.TERMINATED
        logger.info("Session ended after %d ticks, score %d", self.ticks, self.game.get_score())
