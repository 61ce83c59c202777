from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


@dataclass
class CursorPosition:
    row: int = 0
    col: int = 0


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class LineBuffer:
    """An ordered list of text lines plus the logical cursor.

    The buffer always holds at least one line, and every operation leaves
    the cursor inside the document: ``0 <= row < num_lines`` and
    ``0 <= col <= len(lines[row])``. Requests that would break this are
    clamped or ignored rather than raised.
    """

    _lines: list[str]
    cursor: CursorPosition
    modified: bool

    def __init__(self, lines: Optional[Iterable[str]] = None):
        self._lines = list(lines) if lines is not None else []
        if not self._lines:
            self._lines.append("")
        self.cursor = CursorPosition()
        self.modified = False

    @classmethod
    def load(cls, lines: Iterable[str]) -> "LineBuffer":
        """Build an editing document by appending each line in turn.

        Every line goes through ``insert_line``, so the result is marked
        modified, as is an empty document that only gets its blank line.
        """
        buf = cls()
        buf._lines = []
        for line in lines:
            buf.insert_line(buf.num_lines, line)
        if not buf._lines:
            buf.insert_line(0, "")
        return buf

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def num_lines(self) -> int:
        return len(self._lines)

    @property
    def current_line(self) -> str:
        return self._lines[self.cursor.row]

    def set_cursor(self, row: int, col: int):
        """Place the cursor, clamping both coordinates into the document."""
        row = max(0, min(row, len(self._lines) - 1))
        col = max(0, min(col, len(self._lines[row])))
        self.cursor = CursorPosition(row, col)

    # --- Line-level edits ---

    def insert_line(self, at: int, text: str):
        if at < 0 or at > len(self._lines):
            return
        self._lines.insert(at, text)
        self.modified = True

    def delete_line(self, at: int):
        if at < 0 or at >= len(self._lines):
            return
        del self._lines[at]
        self.modified = True
        if not self._lines:
            self._lines.append("")
        # Keep the cursor on a line that still exists
        self.set_cursor(self.cursor.row, self.cursor.col)

    # --- Character-level edits ---

    def insert_char(self, ch: str):
        """Insert a single character at the cursor and advance past it."""
        if len(ch) != 1:
            return
        row = self.cursor.row
        if row < 0 or row >= len(self._lines):
            return
        line = self._lines[row]
        col = max(0, min(self.cursor.col, len(line)))
        self._lines[row] = line[:col] + ch + line[col:]
        self.cursor.col = col + 1
        self.modified = True

    def delete_char(self):
        """Backspace: remove the character before the cursor.

        At the start of a line the line is appended to the previous one and
        the cursor lands at the join point. At the start of the document
        nothing happens.
        """
        row, col = self.cursor.row, self.cursor.col
        if row < 0 or row >= len(self._lines):
            return
        if row == 0 and col == 0:
            return

        if col > 0:
            line = self._lines[row]
            self._lines[row] = line[:col - 1] + line[col:]
            self.cursor.col = col - 1
        else:
            prev = self._lines[row - 1]
            self._lines[row - 1] = prev + self._lines[row]
            del self._lines[row]
            self.cursor = CursorPosition(row - 1, len(prev))
        self.modified = True

    def insert_newline(self):
        """Handle Enter.

        Enter does not split the line. Below the last line it only moves
        down (clamping the column); on the last line it appends an empty
        line and moves to its start.
        """
        if self.cursor.row < len(self._lines) - 1:
            self.cursor.row += 1
            self.cursor.col = min(self.cursor.col, len(self._lines[self.cursor.row]))
        else:
            self.insert_line(len(self._lines), "")
            self.cursor = CursorPosition(len(self._lines) - 1, 0)

    # --- Navigation ---

    def move_cursor(self, direction: Direction):
        row, col = self.cursor.row, self.cursor.col
        last = len(self._lines) - 1

        if direction == Direction.UP:
            if row > 0:
                row -= 1
            col = min(col, len(self._lines[row]))
        elif direction == Direction.DOWN:
            if row < last:
                row += 1
            col = min(col, len(self._lines[row]))
        elif direction == Direction.LEFT:
            if col > 0:
                col -= 1
            elif row > 0:
                row -= 1
                col = len(self._lines[row])
        elif direction == Direction.RIGHT:
            if col < len(self._lines[row]):
                col += 1
            elif row < last:
                row += 1
                col = 0

        self.cursor = CursorPosition(row, col)
