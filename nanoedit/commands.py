"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .constants import EditorConstants
from .keyboard import KeyType
from .model import Direction

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Execute the command against the editor session.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command
        """
        pass


class MoveCommand(EditorCommand):
    """Moves the cursor one step in a fixed direction."""

    def __init__(self, direction: Direction):
        self.direction = direction

    def execute(self, editor, key_event):
        editor.buffer.move_cursor(self.direction)


class BackspaceCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.buffer.delete_char()


class InsertNewlineCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.buffer.insert_newline()


class InsertTextCommand(EditorCommand):
    def execute(self, editor, key_event):
        char = key_event.value
        # Only printable single characters go into the document
        if len(char) == 1 and char.isprintable():
            editor.buffer.insert_char(char)


class SaveCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.save_file()


class ExitCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.request_exit()


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), MoveCommand(Direction.LEFT))
        self.register((KeyType.SPECIAL, 'right'), MoveCommand(Direction.RIGHT))
        self.register((KeyType.SPECIAL, 'up'), MoveCommand(Direction.UP))
        self.register((KeyType.SPECIAL, 'down'), MoveCommand(Direction.DOWN))

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())

        # System commands
        self.register((KeyType.CTRL, EditorConstants.SAVE_KEY), SaveCommand())
        self.register((KeyType.CTRL, EditorConstants.EXIT_KEY), ExitCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if a command ran, False if the key was ignored
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None and key_event.key_type == KeyType.REGULAR:
            command = InsertTextCommand()
        if command is None:
            return False
        command.execute(editor, key_event)
        return True
