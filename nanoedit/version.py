from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import Optional


def _git_commit() -> Optional[str]:
    """Short commit hash when running from a git checkout."""
    here = Path(__file__).resolve().parent
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short=7", "HEAD"],
            cwd=str(here),
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None
    return out.decode().strip() or None


def get_version() -> str:
    try:
        return importlib.metadata.version("nanoedit")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_version_string() -> str:
    commit = _git_commit()
    if commit:
        return f"nanoedit {get_version()} ({commit})"
    return f"nanoedit {get_version()}"
