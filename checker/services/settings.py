"""
Checker settings management.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, asdict
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from checker.core.exceptions import InvalidSelection


class DisplayMode(Enum):
    """How the differences of a file pair are shown."""
    INLINE = 1
    SIDE_BY_SIDE = 2

    @classmethod
    def from_string(cls, value: str) -> 'DisplayMode':
        """
        Parse operator input ('1', '2' or a mode name).

        Raises:
            InvalidSelection: The value names no display mode.
        """
        text = value.strip()
        try:
            number: Optional[int] = int(text)
        except ValueError:
            number = None

        if number is not None:
            for mode in cls:
                if mode.value == number:
                    return mode
        else:
            try:
                return cls[text.upper().replace('-', '_')]
            except KeyError:
                pass
        raise InvalidSelection(f"Invalid display type: {value!r}")


@dataclass
class ColorSettings:
    """ANSI SGR codes for diff highlighting."""
    inline_added: str = "32"           # Green text
    inline_removed: str = "31"         # Red text
    side_by_side_added: str = "42"     # Green background
    side_by_side_removed: str = "41"   # Red background
    success: str = "32"
    failure: str = "31"


@dataclass
class CheckerSettings:
    """Main settings container."""
    reference_dir: str = "./LastRef"
    output_dir: str = "./OutputData"
    file_pattern: str = "data*.out"
    name_template: str = "data{n}.out"
    encoding: str = "utf-8"
    normalize_line_endings: bool = False
    use_color: bool = True
    colors: ColorSettings = field(default_factory=ColorSettings)


class SettingsManager:
    """Manager for loading/saving checker settings."""

    def __init__(self, settings_path: Optional[Path] = None):
        self.settings_path = settings_path
        self._settings: Optional[CheckerSettings] = None

    @property
    def settings(self) -> CheckerSettings:
        """Get current settings, loading from disk if needed."""
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    def load(self) -> CheckerSettings:
        """Load settings from disk, falling back to defaults."""
        if self.settings_path is None or not self.settings_path.exists():
            return CheckerSettings()

        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logging.warning(f"SettingsManager - Could not load {self.settings_path}: {e}")
            return CheckerSettings()

        if not isinstance(data, dict):
            logging.warning(f"SettingsManager - Ignoring {self.settings_path}: expected an object")
            return CheckerSettings()

        return self._from_dict(data)

    def save(self, settings: Optional[CheckerSettings] = None) -> bool:
        """Save settings to disk."""
        settings = settings or self._settings
        if settings is None or self.settings_path is None:
            return False

        try:
            self.settings_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.settings_path, 'w', encoding='utf-8') as f:
                json.dump(self._to_dict(settings), f, indent=2)

            self._settings = settings
            return True

        except OSError as e:
            logging.error(f"SettingsManager - Could not save {self.settings_path}: {e}")
            return False

    def _to_dict(self, settings: CheckerSettings) -> dict:
        """Convert settings to dictionary for JSON serialization."""
        def convert(obj: Any) -> Any:
            if isinstance(obj, Enum):
                return obj.name
            elif hasattr(obj, '__dataclass_fields__'):
                return {k: convert(v) for k, v in asdict(obj).items()}
            elif isinstance(obj, dict):
                return {k: convert(v) for k, v in obj.items()}
            else:
                return obj

        return convert(settings)

    def _from_dict(self, data: dict) -> CheckerSettings:
        """Convert dictionary back to settings objects."""
        defaults = CheckerSettings()
        colors_data = data.get('colors')
        if not isinstance(colors_data, dict):
            if colors_data is not None:
                logging.warning(f"SettingsManager - Ignoring colors in {self.settings_path}: expected an object")
            colors_data = {}

        colors = ColorSettings(
            inline_added=colors_data.get('inline_added', defaults.colors.inline_added),
            inline_removed=colors_data.get('inline_removed', defaults.colors.inline_removed),
            side_by_side_added=colors_data.get('side_by_side_added', defaults.colors.side_by_side_added),
            side_by_side_removed=colors_data.get('side_by_side_removed', defaults.colors.side_by_side_removed),
            success=colors_data.get('success', defaults.colors.success),
            failure=colors_data.get('failure', defaults.colors.failure),
        )

        return CheckerSettings(
            reference_dir=data.get('reference_dir', defaults.reference_dir),
            output_dir=data.get('output_dir', defaults.output_dir),
            file_pattern=data.get('file_pattern', defaults.file_pattern),
            name_template=data.get('name_template', defaults.name_template),
            encoding=data.get('encoding', defaults.encoding),
            normalize_line_endings=data.get('normalize_line_endings', defaults.normalize_line_endings),
            use_color=data.get('use_color', defaults.use_color),
            colors=colors,
        )
