"""
Input Listener - decouples keyboard events from the tick cadence.

A background thread owns the blocking poll on the screen and pushes decoded
commands onto a queue; the driver loop drains it without ever blocking.
"""
import logging
import queue
import threading
from typing import Dict, Optional

from ..core.screen_interface import Screen
from .commands import DEFAULT_KEY_MAP, Command, decode_key

logger = logging.getLogger(__name__)


class InputListener:
    """
    Reads raw key events from a screen in a background thread.

    The listener never touches game state; it only enqueues commands.
    """

    def __init__(
        self,
        screen: Screen,
        key_map: Optional[Dict[str, Command]] = None,
        poll_timeout: float = 0.1,
    ):
        """
        Initialize the listener.

        Args:
            screen: Screen whose events are polled
            key_map: Raw key name to command bindings
            poll_timeout: Seconds per poll, bounds how long stop() waits
        """
        self.screen = screen
        self.key_map = dict(key_map if key_map is not None else DEFAULT_KEY_MAP)
        self.poll_timeout = poll_timeout
        self.running = False
        self.thread: Optional[threading.Thread] = None

        self._commands: "queue.Queue[Command]" = queue.Queue()

    def start(self):
        """Start the listener thread."""
        if self.thread is not None and self.thread.is_alive():
            return

        self.running = True
        self.thread = threading.Thread(target=self._listen_loop, name="input-listener", daemon=True)
        self.thread.start()

    def stop(self):
        """Stop the listener thread."""
        self.running = False
        if self.thread is not None:
            self.thread.join(timeout=2.0)
            self.thread = None

    def _listen_loop(self):
        """Main polling loop (runs in background thread)."""
        while self.running:
            try:
                key = self.screen.poll_event(self.poll_timeout)
            except Exception:
                logger.exception("Input polling failed, listener stopping")
                self.running = False
                return

            if key is not None:
                self.push_key(key)

    def push_key(self, key: str) -> Optional[Command]:
        """
        Decode a raw key and enqueue the resulting command.

        Args:
            key: Raw key name

        Returns:
            The enqueued command, or None if the key is unbound
        """
        command = decode_key(key, self.key_map)
        if command is None:
            logger.debug("Ignoring unbound key %r", key)
            return None

        self._commands.put(command)
        return command

    def read_command(self) -> Optional[Command]:
        """
        Non-blocking read of the pending input.

        Drains the queue and returns the most recent command, except that a
        pending QUIT always wins.

        Returns:
            A command, or None when nothing arrived since the last read
        """
        latest: Optional[Command] = None
        while True:
            try:
                command = self._commands.get_nowait()
            except queue.Empty:
                break

            if command is Command.QUIT:
                return command
            latest = command

        return latest
