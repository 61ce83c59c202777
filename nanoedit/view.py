from typing import Sequence

from .constants import EditorConstants
from .model import CursorPosition, LineBuffer


class Viewport:
    """The visible window into a document.

    ``top_line``/``left_col`` give the document cell shown at the top-left
    of the screen; ``screen_rows``/``screen_cols`` give the size of the text
    area. After ``scroll`` the cursor is always inside the window.
    """

    top_line: int
    left_col: int
    screen_rows: int
    screen_cols: int

    def __init__(self, screen_rows: int, screen_cols: int):
        self.top_line = 0
        self.left_col = 0
        self.screen_rows = max(EditorConstants.MIN_SCREEN_ROWS, screen_rows)
        self.screen_cols = max(EditorConstants.MIN_SCREEN_COLS, screen_cols)
        # Filled in by render()
        self.lines: list[str] = []
        self.visual_cursor_y = 0
        self.visual_cursor_x = 0

    @classmethod
    def for_terminal(cls, height: int, width: int) -> "Viewport":
        """Size a viewport for a terminal, leaving room for the status rows."""
        return cls(height - EditorConstants.STATUS_ROWS, width)

    def scroll(self, cursor: CursorPosition):
        """Shift the window by the smallest amount that shows the cursor."""
        if cursor.row < self.top_line:
            self.top_line = cursor.row
        if cursor.row >= self.top_line + self.screen_rows:
            self.top_line = cursor.row - self.screen_rows + 1

        if cursor.col < self.left_col:
            self.left_col = cursor.col
        if cursor.col >= self.left_col + self.screen_cols:
            self.left_col = cursor.col - self.screen_cols + 1

    def visible_slice(self, lines: Sequence[str]) -> list[str]:
        """Return the text of each screen row, blank past the end of the document."""
        rows = []
        for y in range(self.screen_rows):
            file_row = self.top_line + y
            if file_row < len(lines):
                rows.append(lines[file_row][self.left_col:self.left_col + self.screen_cols])
            else:
                rows.append("")
        return rows

    def cursor_screen_position(self, cursor: CursorPosition) -> tuple[int, int]:
        return (cursor.row - self.top_line, cursor.col - self.left_col)

    def render(self, buffer: LineBuffer):
        """Recompute the visible rows and the on-screen cursor for ``buffer``."""
        self.scroll(buffer.cursor)
        self.lines = self.visible_slice(buffer.lines)
        self.visual_cursor_y, self.visual_cursor_x = self.cursor_screen_position(buffer.cursor)


def format_status_bar(filename, modified: bool, width: int) -> str:
    """Build the status bar text, padded or cut to ``width`` columns."""
    name = filename if filename else EditorConstants.NO_NAME_LABEL
    flag = EditorConstants.MODIFIED_LABEL if modified else ""
    status = f"File: {name} {flag}"
    return status[:width].ljust(width)
