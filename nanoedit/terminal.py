"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from typing import Optional
import logging
import sys
import select
import termios

from curtsies import Input
from curtsies.events import PasteEvent

from .constants import EditorConstants

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        # Virtual screen state for minimal updates
        self._last_rows: list[str] | None = None
        self._pending_keys: list[str] = []

    def setup(self):
        """Enter fullscreen mode and put the keyboard in raw mode."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        self._last_rows = None
        if self._curtsies_input is None:
            try:
                # Raw mode so Ctrl-O / Ctrl-X reach us instead of the tty driver
                self._curtsies_input = Input(keynames='curtsies', sigint_event=False)
                self._curtsies_input.__enter__()
            except (OSError, termios.error) as e:
                logger.warning(f"Keyboard input unavailable: {e}")
                self._curtsies_input = None

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            except (OSError, termios.error) as e:
                logger.warning(f"Could not restore terminal mode: {e}")
            finally:
                self._curtsies_input = None

    def invalidate_frame(self) -> None:
        """Forget the last painted frame so the next update repaints everything."""
        self._last_rows = None

    def update_frame(
        self,
        lines: list[str],
        cursor_y: int,
        cursor_x: int,
        status_bar: str,
        message: Optional[str] = None,
    ) -> None:
        """Paint text rows and the three status rows, writing only changed rows.

        Layout from the top: the text rows, a reverse-video status bar, the
        latest status message and the help line.
        """
        width = self.width
        rows = [line[:width].ljust(width) for line in lines]
        rows.append(self.term.reverse + status_bar[:width].ljust(width) + self.term.normal)
        msg = message or ""
        if msg:
            rows.append(self.term.reverse + msg[:width] + self.term.normal + " " * max(0, width - len(msg)))
        else:
            rows.append(" " * width)
        rows.append(EditorConstants.HELP_LINE[:width].ljust(width))
        # Rows past the bottom of a very short terminal are dropped
        rows = rows[:max(0, self.height)]

        if self._last_rows is None or len(self._last_rows) != len(rows):
            print(self.term.home + self.term.clear, end='')
            self._last_rows = [""] * len(rows)

        for y, row in enumerate(rows):
            if row != self._last_rows[y]:
                print(self.term.move(y, 0) + row, end='')
                self._last_rows[y] = row

        print(self.term.move(cursor_y, cursor_x) + self.term.normal_cursor, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None if nothing arrived.
        """
        if self._pending_keys:
            return self._pending_keys.pop(0)
        if self._curtsies_input is None:
            return None
        if timeout is not None:
            r, _, _ = select.select([sys.stdin], [], [], float(timeout))
            if not r:
                return None
        evt = next(self._curtsies_input)
        if isinstance(evt, PasteEvent):
            # A burst of input arrives as one event; replay it key by key
            keys = [str(e) for e in evt.events]
            if not keys:
                return None
            self._pending_keys.extend(keys[1:])
            return keys[0]
        return str(evt)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows, including the status rows."""
        return self.term.height

    @property
    def has_input(self) -> bool:
        """Whether keys can be read (raw-mode input was set up)."""
        return self._curtsies_input is not None or bool(self._pending_keys)
