"""nanoedit - A minimal screen-oriented text editor."""

import logging

from .model import LineBuffer, CursorPosition, Direction
from .view import Viewport

# Nothing is logged to the screen unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'LineBuffer',
    'CursorPosition',
    'Direction',
    'Viewport',
]
