"""
Services for file access and configuration.
"""

from checker.services.file_io import FileIOService, FileContent
from checker.services.settings import (
    CheckerSettings,
    ColorSettings,
    DisplayMode,
    SettingsManager,
)

__all__ = [
    'FileIOService',
    'FileContent',
    'CheckerSettings',
    'ColorSettings',
    'DisplayMode',
    'SettingsManager',
]
