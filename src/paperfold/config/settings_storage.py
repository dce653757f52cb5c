"""
Settings persistence layer.

Handles save/load of editor settings to ~/.config/paperfold/settings.json
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..model.orientation import Orientation
from .settings import EditorSettings

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """
    Get the directory for storing editor settings.

    Returns:
        Path to ~/.config/paperfold/
        Creates the directory if it doesn't exist.
    """
    config_dir = Path.home() / ".config" / "paperfold"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_settings_path() -> Path:
    return get_config_dir() / "settings.json"


def _settings_to_dict(settings: EditorSettings) -> Dict[str, Any]:
    """Convert EditorSettings to a JSON-serializable dictionary."""
    return {
        "grid_size": settings.grid_size,
        "cell_size": settings.cell_size,
        "paper_thickness": settings.paper_thickness,
        "center_orientation": settings.center_orientation.value,
        "default_orientation": settings.default_orientation.value,
    }


def _dict_to_settings(data: Dict[str, Any]) -> EditorSettings:
    """Create EditorSettings from a dictionary.

    Unknown keys are ignored; missing keys take their defaults.
    """
    defaults = EditorSettings()
    return EditorSettings(
        grid_size=int(data.get("grid_size", defaults.grid_size)),
        cell_size=float(data.get("cell_size", defaults.cell_size)),
        paper_thickness=float(data.get("paper_thickness", defaults.paper_thickness)),
        center_orientation=Orientation(data.get("center_orientation", defaults.center_orientation.value)),
        default_orientation=Orientation(data.get("default_orientation", defaults.default_orientation.value)),
    )


def load_settings(path: Optional[Path] = None) -> EditorSettings:
    """
    Load editor settings.

    Args:
        path: Settings file. Defaults to ~/.config/paperfold/settings.json

    Returns:
        The stored settings, or defaults if the file is missing or invalid.
    """
    path = Path(path) if path is not None else get_settings_path()
    if not path.exists():
        return EditorSettings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("settings file must contain a JSON object")
        return _dict_to_settings(data)
    except (json.JSONDecodeError, ValueError, TypeError) as e:
        logger.warning(f"Invalid settings file {path}, using defaults: {e}")
        return EditorSettings()


def save_settings(settings: EditorSettings, path: Optional[Path] = None) -> Path:
    """
    Save editor settings.

    Args:
        settings: The settings to save
        path: Target file. Defaults to ~/.config/paperfold/settings.json

    Returns:
        Path to the saved file
    """
    path = Path(path) if path is not None else get_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(_settings_to_dict(settings), f, indent=2)
    logger.info(f"Saved settings to {path}")
    return path
