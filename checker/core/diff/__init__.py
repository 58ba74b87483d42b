"""
Diff module for comparing reference and candidate output.

Provides:
- The character-level text diff engine
- Inline and side-by-side renderers
"""

from checker.core.diff.text_diff import (
    TextDiffEngine,
    TextCompareOptions,
)
from checker.core.diff.formatters import (
    Highlighter,
    AnsiHighlighter,
    PlainHighlighter,
    InlineFormatter,
    SideBySideFormatter,
    visible_lines,
    NEWLINE_GLYPH,
)

__all__ = [
    # Text diff
    'TextDiffEngine',
    'TextCompareOptions',
    # Rendering
    'Highlighter',
    'AnsiHighlighter',
    'PlainHighlighter',
    'InlineFormatter',
    'SideBySideFormatter',
    'visible_lines',
    'NEWLINE_GLYPH',
]
