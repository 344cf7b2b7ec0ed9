"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import sys
import termios
from collections import deque
from typing import Optional

import blessed

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Raw-mode terminal driver: setup/cleanup, key reads and raw blits."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self._pending: deque[str] = deque()
        self._old_settings = None

    def setup(self):
        """Enter fullscreen raw mode.

        If any step fails, whatever was already set up is undone before
        the error propagates.
        """
        try:
            print(self.term.enter_fullscreen, end='')
            print(self.term.clear, end='', flush=True)
            self.is_fullscreen = True
            from curtsies import Input  # type: ignore
            self._curtsies_input = Input(keynames='curtsies')
            self._curtsies_input.__enter__()
            self._disable_flow_control()
        except Exception:
            self.cleanup()
            raise

    def _disable_flow_control(self):
        """Let Ctrl-S and Ctrl-Q reach the editor instead of the tty."""
        try:
            self._old_settings = termios.tcgetattr(sys.stdin)
            new_settings = list(self._old_settings)
            new_settings[0] &= ~(termios.IXON | termios.IXOFF)
            termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
        except (termios.error, AttributeError, OSError) as e:
            # Not a tty; Ctrl-S/Ctrl-Q may be swallowed by flow control
            logger.warning("Could not disable flow control: %s", e)
            self._old_settings = None

    def cleanup(self):
        """Leave raw mode and fullscreen, restoring the terminal."""
        if self._old_settings is not None:
            try:
                termios.tcsetattr(sys.stdin, termios.TCSANOW, self._old_settings)
            except (termios.error, OSError) as e:
                logger.warning("Could not restore terminal settings: %s", e)
            self._old_settings = None
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)  # type: ignore
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            print(self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False
        self._pending.clear()

    def blit(self, row: int, col: int, data: bytes):
        """Write raw bytes at a screen position."""
        print(self.term.move(row, col) + data.decode('ascii', errors='replace'), end='')

    def refresh(self, row: int, col: int):
        """Place the hardware cursor and flush everything drawn so far."""
        print(self.term.move(row, col) + self.term.normal_cursor, end='', flush=True)

    def get_key(self, timeout=None) -> Optional[str]:
        """Get a single keypress from the user.

        Args:
            timeout: Seconds to wait; None blocks until a key arrives.

        Returns:
            A curtsies key token, or None if the timeout expired or input
            is not set up. A pasted burst is returned one key at a time.
        """
        if self._pending:
            return self._pending.popleft()
        if self._curtsies_input is None:
            return None
        if timeout is None:
            evt = next(self._curtsies_input)  # blocks
        else:
            evt = self._curtsies_input.send(timeout)
            if evt is None:
                return None
        from curtsies.events import PasteEvent  # type: ignore
        if isinstance(evt, PasteEvent):
            self._pending.extend(str(e) for e in evt.events)
            return self._pending.popleft() if self._pending else None
        return str(evt)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - 1  # Reserve one line for status
