"""
Editor configuration.

Public API:
    - EditorSettings: Grid extent, cell size and square defaults
    - load_settings() / save_settings(): JSON storage under ~/.config/paperfold/
"""

from .settings import EditorSettings
from .settings_storage import get_config_dir, get_settings_path, load_settings, save_settings

__all__ = [
    'EditorSettings',
    'get_config_dir',
    'get_settings_path',
    'load_settings',
    'save_settings',
]
