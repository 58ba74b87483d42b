"""
Folder module for numbered test case batches.

Provides functionality for:
- Counting numbered case files
- Batch comparison of reference and candidate folders
"""

from checker.core.folder.scanner import (
    NumberedFileScanner,
    ScanOptions,
    count_numbered_files,
)
from checker.core.folder.comparer import (
    BatchRunner,
    BatchProgress,
)

__all__ = [
    # Scanner
    'NumberedFileScanner',
    'ScanOptions',
    'count_numbered_files',
    # Comparer
    'BatchRunner',
    'BatchProgress',
]
