"""
Mushaf UI Configuration.

Handles persistence of UI preferences including theme selection and the
grid breakpoints. Config is stored in ~/.config/mushaf/ui_config.json
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .constants import TERMINAL_BREAKPOINTS
from .settings import get_config_dir

logger = logging.getLogger(__name__)

DEFAULT_THEME = "mushaf-dark"

DEFAULT_CONFIG: dict[str, Any] = {
    "theme": DEFAULT_THEME,
    "breakpoints": list(TERMINAL_BREAKPOINTS),
}


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to ~/.config/mushaf/ui_config.json
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / "ui_config.json"


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
            if isinstance(config, dict):
                return {**DEFAULT_CONFIG, **config}
            logger.warning("Ignoring UI config that is not an object: %s", path)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Failed to read UI config %s: %s", path, e)
    return DEFAULT_CONFIG.copy()


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2, ensure_ascii=False) + "\n")
    except OSError as e:
        # Preferences are non-critical
        logger.warning("Failed to save UI config %s: %s", path, e)


def get_theme() -> str:
    """Get current theme name from config."""
    return str(load_ui_config().get("theme", DEFAULT_THEME))


def set_theme(theme_name: str) -> None:
    """Set and persist theme preference."""
    config = load_ui_config()
    config["theme"] = theme_name
    save_ui_config(config)


def get_breakpoints() -> tuple[int, int]:
    """Get the (narrow_max, medium_max) grid breakpoints in terminal cells.

    Falls back to the defaults when the stored value is malformed or not
    strictly increasing.
    """
    raw = load_ui_config().get("breakpoints")
    try:
        narrow, medium = (int(v) for v in raw)  # type: ignore[union-attr]
    except (TypeError, ValueError):
        return TERMINAL_BREAKPOINTS
    if not 0 < narrow < medium:
        return TERMINAL_BREAKPOINTS
    return narrow, medium
