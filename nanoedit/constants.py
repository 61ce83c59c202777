"""Constants and configuration for the nanoedit editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Screen layout: status bar, message line and help line sit below the text
    STATUS_ROWS = 3
    MIN_SCREEN_ROWS = 1
    MIN_SCREEN_COLS = 1

    # Key bindings (Ctrl-<letter>)
    SAVE_KEY = 'o'
    EXIT_KEY = 'x'

    # File operations
    DEFAULT_FILENAME = "untitled.txt"
    FILE_ENCODING = "utf-8"
    FILE_ERRORS = "surrogateescape"  # Undecodable bytes survive a load/save round trip

    # Status bar
    NO_NAME_LABEL = "(No Name)"
    MODIFIED_LABEL = "(modified)"
    HELP_LINE = "^X Exit  ^O Save"

    # Status messages
    STARTUP_MESSAGE = "HELP: Ctrl+O = Save | Ctrl+X = Exit"
    SAVE_SUCCESS_MESSAGE = "File saved successfully!"
    SAVE_FAILURE_MESSAGE = "Error: Cannot open file for writing!"
    LOAD_FAILURE_MESSAGE = "Error opening file."
    EXIT_CONFIRM_MESSAGE = "File modified. Ctrl+O to save, Ctrl+X to exit without saving."

    # Per-document settings
    SETTINGS_APP_NAME = "nanoedit"
    SETTINGS_FILE_NAME = "settings.json"
