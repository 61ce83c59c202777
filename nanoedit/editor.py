"""Main editor controller: one editing session on one document."""

import logging
import sys
import termios
from typing import Optional

from . import fileio
from .commands import CommandRegistry
from .constants import EditorConstants
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .model import LineBuffer
from .settings_persistence import SettingsPersistence
from .terminal import TerminalInterface
from .view import Viewport, format_status_bar

logger = logging.getLogger(__name__)


class Editor:
    """Editor session: owns the document, the viewport and the status line.

    Args:
        terminal: Terminal driver to draw on and read keys from.
        settings: Where to remember the cursor position per document. When
            None, nothing is remembered.
    """

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 settings: Optional[SettingsPersistence] = None):
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.settings = settings
        # Screen size is taken once; resizing is not tracked
        self.viewport = Viewport.for_terminal(self.terminal.height, self.terminal.width)
        self.buffer = LineBuffer.load([])
        self.command_registry = CommandRegistry()
        self.filename: Optional[str] = None
        self.status_message: Optional[str] = EditorConstants.STARTUP_MESSAGE
        self.prompt_mode: Optional[str] = None  # None or 'exit_confirm'
        self.running = False

    @property
    def modified(self) -> bool:
        return self.buffer.modified

    def load_file(self, filename: str):
        """Load a file into the editor.

        A file that cannot be read leaves an empty document and a status
        message; the session carries on either way.
        """
        self.filename = filename
        result = fileio.load_file(filename)
        self.buffer = LineBuffer.load(result.lines)
        if result.message:
            self.status_message = result.message
        if self.settings is not None:
            position = self.settings.load_cursor(filename)
            if position is not None:
                self.buffer.set_cursor(*position)

    def save_file(self) -> bool:
        """Save the document to its file, naming it first if it has no name.

        Returns:
            True if save succeeded, False otherwise
        """
        if self.filename is None:
            self.filename = EditorConstants.DEFAULT_FILENAME
        try:
            fileio.save_file(self.filename, self.buffer.lines)
        except fileio.SaveError as e:
            logger.error(f"Save failed: {e}")
            self.status_message = EditorConstants.SAVE_FAILURE_MESSAGE
            return False
        self.buffer.modified = False
        self.status_message = EditorConstants.SAVE_SUCCESS_MESSAGE
        self._remember_cursor()
        return True

    def request_exit(self):
        """Stop the session, asking for confirmation when there are unsaved changes."""
        if self.buffer.modified:
            self.prompt_mode = 'exit_confirm'
            self.status_message = EditorConstants.EXIT_CONFIRM_MESSAGE
        else:
            self.running = False

    def handle_key_event(self, key_event: KeyEvent):
        """Apply one key event to the session."""
        if self.prompt_mode == 'exit_confirm':
            self._handle_exit_confirm(key_event)
            return
        self.command_registry.execute(self, key_event)

    def _handle_exit_confirm(self, key_event: KeyEvent):
        # The key answering the prompt is consumed whatever it is
        self.prompt_mode = None
        if key_event.key_type == KeyType.CTRL and key_event.value == EditorConstants.EXIT_KEY:
            logger.info("Exiting without saving changes")
            self.running = False

    def _remember_cursor(self):
        if self.settings is not None and self.filename is not None:
            cursor = self.buffer.cursor
            self.settings.save_cursor(self.filename, cursor.row, cursor.col)

    def _draw(self):
        """Draw the current editor state to terminal."""
        self.viewport.render(self.buffer)
        self.terminal.update_frame(
            self.viewport.lines,
            self.viewport.visual_cursor_y,
            self.viewport.visual_cursor_x,
            status_bar=format_status_bar(self.filename, self.buffer.modified, self.terminal.width),
            message=self.status_message,
        )

    def run(self):
        """Run the main editor loop until the user exits."""
        self.terminal.setup()
        self.running = True
        old_settings = None
        try:
            try:
                old_settings = termios.tcgetattr(sys.stdin)
                new_settings = list(old_settings)
                # Let Ctrl-O, Ctrl-S/Q and Ctrl-C through as ordinary keys
                new_settings[0] &= ~(termios.IXON | termios.IXOFF)
                new_settings[3] &= ~(termios.ISIG | termios.IEXTEN)
                termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
            except (termios.error, OSError, ValueError) as e:
                logger.debug(f"Could not adjust terminal flags: {e}")
                old_settings = None

            while self.running:
                self._draw()
                key_event = self.keyboard.get_key_event()
                if key_event is None:
                    # No keyboard at all; nothing can ever end the session
                    if not self.terminal.has_input:
                        break
                    continue
                self.handle_key_event(key_event)
        finally:
            if old_settings is not None:
                try:
                    termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
                except (termios.error, OSError) as e:
                    logger.debug(f"Could not restore terminal flags: {e}")
            self._remember_cursor()
            self.terminal.cleanup()
