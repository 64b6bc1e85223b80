from .manager import SettingsManager, default_settings_path
from .schema import DEFAULT_SETTINGS, merge_with_defaults

__all__ = [
    "DEFAULT_SETTINGS",
    "SettingsManager",
    "default_settings_path",
    "merge_with_defaults",
]
