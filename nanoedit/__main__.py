"""nanoedit CLI entry point.

Allows running via `python -m nanoedit` and provides the console script
defined in `pyproject.toml`.

Usage:
    nanoedit [--version] [--keytest] [--log-file PATH] [FILE]
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .version import get_version_string


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Print each decoded key event until ESC is pressed."""
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyType

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    try:
        while term.has_input:
            ev = kb.get_key_event()
            if not ev:
                continue
            if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                break
            parts = [f"type={ev.key_type.value}", f"value={ev.value}", f"raw='{_escape_bytes(ev.raw)}'"]
            if ev.is_ctrl:
                parts.append("flags=ctrl")
            print(' '.join(parts) + '\r')
    finally:
        term.cleanup()
    print("Exiting keyboard test.")


def _configure_logging(log_file: Optional[str]) -> None:
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def parse_args(args: list[str]) -> tuple[dict, Optional[str]]:
    """Split argv into options and the optional file to open.

    Raises:
        ValueError: on an unknown option or a missing option value.
    """
    options = {"version": False, "keytest": False, "log_file": None}
    filename = None
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--version", "-V"):
            options["version"] = True
        elif arg in ("--keytest", "--keyboard-test"):
            options["keytest"] = True
        elif arg == "--log-file":
            if i + 1 >= len(args):
                raise ValueError("--log-file needs a path")
            options["log_file"] = args[i + 1]
            i += 1
        elif arg.startswith("-"):
            raise ValueError(f"unknown option: {arg}")
        elif filename is None:
            filename = arg
        else:
            raise ValueError("only one file can be opened")
        i += 1
    return options, filename


def main() -> None:
    try:
        options, filename = parse_args(sys.argv[1:])
    except ValueError as e:
        print(f"nanoedit: {e}", file=sys.stderr)
        print(__doc__.strip().splitlines()[-1].strip(), file=sys.stderr)
        sys.exit(2)

    if options["version"]:
        print(get_version_string())
        return
    _configure_logging(options["log_file"])
    if options["keytest"]:
        run_keyboard_test()
        return

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .settings_persistence import SettingsPersistence
    editor = Editor(settings=SettingsPersistence())
    if filename:
        editor.load_file(filename)
    editor.run()


if __name__ == "__main__":  # pragma: no cover
    main()
