"""
Terminal Screen - curses backend for the character-cell display.

curses is not thread-safe, so every call into it goes through one lock.
Keys are read from a separate 1x1 window so that polling never refreshes
a half-painted frame.
"""
import curses
import locale
import logging
import sys
import threading
import time
from typing import Dict, Optional, Tuple

from ..core.screen_interface import Screen, ScreenInitError, Style

logger = logging.getLogger(__name__)

STYLE_COLORS = {
    Style.BORDER: curses.COLOR_CYAN,
    Style.SNAKE: curses.COLOR_GREEN,
    Style.FOOD: curses.COLOR_RED,
    Style.TEXT: curses.COLOR_WHITE,
}


class TerminalScreen(Screen):
    """Screen implementation on top of curses."""

    def __init__(self, poll_interval: float = 0.01):
        """
        Acquire the terminal.

        Args:
            poll_interval: Seconds between key checks while polling

        Raises:
            ScreenInitError: If the terminal cannot be acquired
        """
        if not sys.stdout.isatty():
            raise ScreenInitError("stdout is not a terminal")

        self.poll_interval = poll_interval
        self._lock = threading.Lock()
        self._closed = False

        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error:
            logger.warning("Could not apply the environment locale; wide glyphs may not draw")
        try:
            self._stdscr = curses.initscr()
        except curses.error as e:
            raise ScreenInitError(f"Could not initialize terminal: {e}") from e

        try:
            curses.noecho()
            curses.cbreak()
            self._stdscr.keypad(True)
            self._input = curses.newwin(1, 1, 0, 0)
            self._input.keypad(True)
            self._input.nodelay(True)
            self._attrs = self._init_colors()
        except curses.error as e:
            curses.endwin()
            raise ScreenInitError(f"Could not configure terminal: {e}") from e

        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")

        height, width = self._stdscr.getmaxyx()
        logger.info("Terminal screen ready (%dx%d)", width, height)

    def _init_colors(self) -> Dict[Style, int]:
        """Create one color pair per style, if the terminal has colors."""
        if not curses.has_colors():
            return {}

        curses.start_color()
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            background = curses.COLOR_BLACK

        attrs = {}
        for pair, (style, color) in enumerate(STYLE_COLORS.items(), start=1):
            curses.init_pair(pair, color, background)
            attrs[style] = curses.color_pair(pair)
        return attrs

    def size(self) -> Tuple[int, int]:
        with self._lock:
            height, width = self._stdscr.getmaxyx()
        return (width, height)

    def set_cell(self, x: int, y: int, glyph: str, style: Style = Style.DEFAULT) -> None:
        with self._lock:
            try:
                self._stdscr.addstr(y, x, glyph, self._attrs.get(style, curses.A_NORMAL))
            except curses.error:
                # Writing the bottom-right cell moves the cursor off-screen and
                # raises after the cell has been drawn; off-screen cells are clipped.
                pass

    def show(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._stdscr.noutrefresh()
            curses.doupdate()

    def poll_event(self, timeout: Optional[float] = None) -> Optional[str]:
        deadline = None if timeout is None else time.monotonic() + timeout

        while True:
            with self._lock:
                if self._closed:
                    return None
                ch = self._input.getch()

            if ch != -1:
                return curses.keyname(ch).decode("utf-8", "replace")

            if deadline is not None and time.monotonic() >= deadline:
                return None
            time.sleep(self.poll_interval)

    def fini(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._stdscr.keypad(False)
            curses.nocbreak()
            curses.echo()
            curses.endwin()
        logger.info("Terminal restored")
