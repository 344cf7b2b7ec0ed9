"""User settings for the editor.

Settings live in a JSON file in the OS-appropriate config directory. Missing
or invalid values fall back to the defaults with a warning, so a broken
settings file never stops the editor from starting.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants
from .errors import SettingsError

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class EditorSettings:
    total_pages: int = EditorConstants.TOTAL_PAGES
    tab_width: int = EditorConstants.TAB_WIDTH
    backup_suffix: str = EditorConstants.BACKUP_SUFFIX
    log_file: Optional[str] = None
    log_level: str = "INFO"
    show_key_codes: bool = False


def default_settings_path() -> Path:
    """Path of the settings file in the user's config directory."""
    config_dir = Path(platformdirs.user_config_dir(EditorConstants.CONFIG_APP_NAME))
    return config_dir / EditorConstants.SETTINGS_FILENAME


def validate_setting(key: str, value: Any) -> Any:
    """Check a single setting value.

    Args:
        key: Setting name.
        value: Value read from the settings file.

    Returns:
        The value, normalized where needed.

    Raises:
        SettingsError: The value is not acceptable for this key.
    """
    if key in ('total_pages', 'tab_width'):
        limit = 64 if key == 'total_pages' else 32
        if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= limit:
            raise SettingsError(f"{key} must be an integer from 1 to {limit}, got {value!r}")
        return value
    if key == 'backup_suffix':
        if not isinstance(value, str) or not value:
            raise SettingsError(f"backup_suffix must be a non-empty string, got {value!r}")
        return value
    if key == 'log_file':
        if value is not None and not isinstance(value, str):
            raise SettingsError(f"log_file must be a string or null, got {value!r}")
        return value
    if key == 'log_level':
        if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
            raise SettingsError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return value.upper()
    if key == 'show_key_codes':
        if not isinstance(value, bool):
            raise SettingsError(f"show_key_codes must be true or false, got {value!r}")
        return value
    raise SettingsError(f"Unknown setting {key!r}")


def _read_settings_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return {}
    return data


def load_settings(path: Optional[Path] = None) -> EditorSettings:
    """Load settings, using defaults for anything missing or invalid.

    Args:
        path: Settings file to read. Defaults to the user config location.

    Returns:
        The effective settings.
    """
    path = path or default_settings_path()
    data = _read_settings_file(path)
    known = {f.name for f in fields(EditorSettings)}
    values = {}
    for key, value in data.items():
        if key not in known:
            logger.debug(f"Ignoring unknown setting {key!r}")
            continue
        try:
            values[key] = validate_setting(key, value)
        except SettingsError as e:
            logger.warning(f"{e}; using default")
    return EditorSettings(**values)
