"""Reading and writing documents as plain newline-terminated text.

Lines are split on ``\\n`` only. Each line loses a single trailing ``\\n`` or
``\\r`` (never both), so a CRLF file keeps its ``\\r`` characters on load and
writes them back unchanged on save.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
import tempfile
from typing import BinaryIO, Iterable, NamedTuple, Optional

from .constants import EditorConstants

logger = logging.getLogger(__name__)


class LoadResult(NamedTuple):
    lines: list[str]
    message: Optional[str]


class SaveError(Exception):
    """Raised when a document cannot be written to its target path."""

    def __init__(self, filename: str, cause: OSError):
        super().__init__(f"Cannot save to {filename}: {cause}")
        self.filename = filename
        self.cause = cause


def _decode(raw: bytes) -> str:
    return raw.decode(EditorConstants.FILE_ENCODING, EditorConstants.FILE_ERRORS)


def _encode(text: str) -> bytes:
    return text.encode(EditorConstants.FILE_ENCODING, EditorConstants.FILE_ERRORS)


def read_lines(stream: BinaryIO) -> list[str]:
    """Read every line of a binary stream into a list of strings.

    An empty stream yields a single empty line.
    """
    lines = []
    for raw in stream:
        if raw.endswith((b'\n', b'\r')):
            raw = raw[:-1]
        lines.append(_decode(raw))
    if not lines:
        lines.append("")
    return lines


def write_lines(stream: BinaryIO, lines: Iterable[str]) -> None:
    """Write each line followed by a newline."""
    for line in lines:
        stream.write(_encode(line) + b'\n')


def load_file(filename: str) -> LoadResult:
    """Load a document from disk.

    A missing file is a new document. Any other read failure also gives an
    empty document, plus a message for the status line.
    """
    try:
        with open(filename, 'rb') as f:
            lines = read_lines(f)
    except FileNotFoundError:
        logger.info(f"{filename} does not exist, starting with an empty document")
        return LoadResult([""], None)
    except OSError as e:
        logger.warning(f"Could not read {filename}: {e}")
        return LoadResult([""], EditorConstants.LOAD_FAILURE_MESSAGE)
    logger.debug(f"Loaded {len(lines)} lines from {filename}")
    return LoadResult(lines, None)


def save_file(filename: str, lines: Iterable[str]) -> None:
    """Write a document to disk atomically.

    The content goes to a temporary file in the target's directory, which
    then replaces the target. Permission bits of an existing target are
    kept.

    Raises:
        SaveError: if the file cannot be written.
    """
    dir_name = os.path.dirname(filename) or '.'
    suffix = os.path.splitext(filename)[1]
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(mode='wb', dir=dir_name, suffix=suffix,
                                         delete=False) as temp_file:
            temp_filename = temp_file.name
            write_lines(temp_file, lines)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        if os.path.exists(filename):
            shutil.copymode(filename, temp_filename)
        else:
            # NamedTemporaryFile creates 0600; use the umask default instead
            umask = os.umask(0)
            os.umask(umask)
            os.chmod(temp_filename, (stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP
                                     | stat.S_IWGRP | stat.S_IROTH | stat.S_IWOTH) & ~umask)

        os.replace(temp_filename, filename)
    except OSError as e:
        logger.warning(f"Save to {filename} failed: {e}")
        if temp_filename is not None and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError:
                pass
        raise SaveError(filename, e) from e
    logger.info(f"Saved {filename}")
