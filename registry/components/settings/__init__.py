"""
Settings component - Site content settings and their cache.
"""

from .component import SETTINGS_KEYS, SettingsStore, settings_from_rows
from .ports import SettingsSourcePort

__all__ = [
    "settings_from_rows",
    "SettingsStore",
    "SETTINGS_KEYS",
    "SettingsSourcePort",
]
