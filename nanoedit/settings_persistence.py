"""Per-document settings that survive restarts.

Currently this remembers where the cursor was in each document, so that
reopening a file puts the cursor back where editing stopped. Settings are
stored as JSON in an OS-appropriate config directory, indexed by the
absolute path of the document.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

CURSOR_ROW = "cursor_row"
CURSOR_COL = "cursor_col"


class SettingsPersistence:
    """Manages persistent storage of per-document settings."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = config_dir or Path(platformdirs.user_config_dir(EditorConstants.SETTINGS_APP_NAME))
        self._settings_file = self._config_dir / EditorConstants.SETTINGS_FILE_NAME
        self._settings_cache: Optional[Dict[str, Dict[str, Any]]] = None

    def _load_all_settings(self) -> Dict[str, Dict[str, Any]]:
        """Load all settings from disk, or an empty dict if there are none."""
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            data = {}

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}
        self._settings_cache = data
        return self._settings_cache

    def _save_all_settings(self, settings: Dict[str, Dict[str, Any]]) -> bool:
        """Write all settings to disk (temp file + rename)."""
        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False
        self._settings_cache = settings
        return True

    def load_settings(self, document_path: Optional[str]) -> Dict[str, Any]:
        """Return the stored settings for a document (empty if none)."""
        if document_path is None:
            return {}
        abs_path = os.path.abspath(document_path)
        doc_settings = self._load_all_settings().get(abs_path, {})
        if not isinstance(doc_settings, dict):
            logger.warning(f"Settings for {abs_path} are not a dict, ignoring")
            return {}
        return {k: v for k, v in doc_settings.items() if self.validate_setting(k, v)}

    def save_settings(self, document_path: Optional[str], settings: Dict[str, Any]) -> bool:
        """Store settings for a document, replacing what was there."""
        if document_path is None:
            return False
        abs_path = os.path.abspath(document_path)
        all_settings = dict(self._load_all_settings())
        all_settings[abs_path] = settings
        return self._save_all_settings(all_settings)

    def load_cursor(self, document_path: Optional[str]) -> Optional[tuple[int, int]]:
        """Return the remembered (row, col) for a document, if any."""
        settings = self.load_settings(document_path)
        if CURSOR_ROW in settings and CURSOR_COL in settings:
            return settings[CURSOR_ROW], settings[CURSOR_COL]
        return None

    def save_cursor(self, document_path: Optional[str], row: int, col: int) -> bool:
        settings = self.load_settings(document_path)
        settings[CURSOR_ROW] = row
        settings[CURSOR_COL] = col
        return self.save_settings(document_path, settings)

    def validate_setting(self, key: str, value: Any) -> bool:
        if key in (CURSOR_ROW, CURSOR_COL):
            # bool is an int subclass; a cursor coordinate is never a bool
            return isinstance(value, int) and not isinstance(value, bool) and value >= 0
        # Unknown settings are considered valid (forward compatibility)
        return True
