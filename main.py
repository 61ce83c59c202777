#!/usr/bin/env python3
"""nanoedit - A minimal text editor.

Usage:
    python main.py [filename]

Controls:
    Arrow keys: Move cursor
    Ctrl-O: Save file
    Ctrl-X: Exit (press twice to discard unsaved changes)
    Type to insert text
    Backspace: Delete character (joins lines at line start)
    Enter: Move to next line (adds a line at the end of the file)
"""

from nanoedit.__main__ import main


if __name__ == "__main__":
    main()
