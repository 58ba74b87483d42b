"""
Scanner for numbered test case files.

Counts the files of a folder that follow the numbered naming scheme
(data1.out, data2.out, ...) and derives the name of case N.
"""

from __future__ import annotations

import fnmatch
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from checker.core.exceptions import EnumerationError


DEFAULT_PATTERN = "data*.out"
DEFAULT_NAME_TEMPLATE = "data{n}.out"


@dataclass
class ScanOptions:
    """Options for numbered file scanning."""
    pattern: str = DEFAULT_PATTERN              # Shell-style pattern for counting
    name_template: str = DEFAULT_NAME_TEMPLATE  # Name of case N, "{n}" is the number

    def file_name(self, number: int) -> str:
        """Get the file name of a numbered case."""
        return self.name_template.format(n=number)


class NumberedFileScanner:
    """
    Counts numbered files in a single folder.

    Only regular files directly inside the folder are counted; nested
    directories are not traversed.
    """

    def __init__(self, options: Optional[ScanOptions] = None):
        self.options = options or ScanOptions()

    def count(self, folder: Path | str) -> int:
        """
        Count the files in `folder` matching the configured pattern.

        Raises:
            EnumerationError: The pattern is invalid or the folder
                cannot be listed.
        """
        pattern = self.options.pattern
        folder = Path(folder)
        self._validate_pattern(pattern, folder)

        try:
            with os.scandir(folder) as entries:
                count = sum(
                    1 for entry in entries
                    if entry.is_file() and fnmatch.fnmatchcase(entry.name, pattern)
                )
        except FileNotFoundError:
            logging.error(f"NumberedFileScanner - Folder not found: {folder}")
            raise EnumerationError(folder, "folder not found")
        except NotADirectoryError:
            logging.error(f"NumberedFileScanner - Not a directory: {folder}")
            raise EnumerationError(folder, "not a directory")
        except PermissionError:
            logging.error(f"NumberedFileScanner - Permission denied: {folder}")
            raise EnumerationError(folder, "permission denied")
        except OSError as e:
            logging.error(f"NumberedFileScanner - Could not list {folder}: {e}")
            raise EnumerationError(folder, str(e))

        logging.debug(f"NumberedFileScanner - {count} files matching {pattern} in {folder}")
        return count

    def path_for(self, folder: Path | str, number: int) -> Path:
        """Get the path of a numbered case inside a folder."""
        return Path(folder) / self.options.file_name(number)

    @staticmethod
    def _validate_pattern(pattern: str, folder: Path) -> None:
        if not pattern:
            raise EnumerationError(folder, "empty file pattern")
        if '/' in pattern or os.sep in pattern:
            raise EnumerationError(folder, f"pattern must be a file name: {pattern!r}")

        # Unterminated character class, e.g. "data[0-9.out"
        depth = 0
        for char in pattern:
            if char == '[':
                depth += 1
            elif char == ']' and depth:
                depth -= 1
        if depth:
            raise EnumerationError(folder, f"malformed pattern: {pattern!r}")


def count_numbered_files(folder: Path | str, pattern: str = DEFAULT_PATTERN) -> int:
    """Count files in `folder` matching `pattern`."""
    return NumberedFileScanner(ScanOptions(pattern=pattern)).count(folder)
