"""
Renderers that turn a segment sequence into displayable text.

Provides:
- Highlighters that mark inserted/deleted text (ANSI or plain markers)
- Inline rendering (single interleaved stream)
- Side-by-side rendering (reference and candidate column texts)
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from checker.core.models import DiffTag, Segment, SideBySideText


ANSI_RESET = '\033[0m'
NEWLINE_GLYPH = '\u23ce'


class Highlighter:
    """
    Marks inserted and deleted fragments.

    Marks are applied to each line piece of a fragment separately, so a
    marker never spans a newline. A line break with no text before it
    on its line is shown as NEWLINE_GLYPH, so changes made only of
    newlines stay visible.
    """

    insert_open = ''
    insert_close = ''
    delete_open = ''
    delete_close = ''

    def inserted(self, text: str) -> str:
        return self._wrap(text, self.insert_open, self.insert_close)

    def deleted(self, text: str) -> str:
        return self._wrap(text, self.delete_open, self.delete_close)

    def mark(self, segment: Segment) -> str:
        """Return the segment text with the marker for its tag."""
        if segment.tag == DiffTag.INSERT:
            return self.inserted(segment.text)
        if segment.tag == DiffTag.DELETE:
            return self.deleted(segment.text)
        return segment.text

    @staticmethod
    def _wrap(text: str, opener: str, closer: str) -> str:
        if not opener and not closer:
            return text
        pieces = text.split('\n')
        last = len(pieces) - 1
        marked = []
        for index, piece in enumerate(pieces):
            if not piece and index < last:
                piece = NEWLINE_GLYPH
            marked.append(f"{opener}{piece}{closer}" if piece else piece)
        return '\n'.join(marked)


class AnsiHighlighter(Highlighter):
    """Highlighter using ANSI SGR escape codes."""

    def __init__(self, insert_code: str = '32', delete_code: str = '31'):
        self.insert_open = f'\033[{insert_code}m'
        self.delete_open = f'\033[{delete_code}m'
        self.insert_close = ANSI_RESET
        self.delete_close = ANSI_RESET


class PlainHighlighter(Highlighter):
    """Highlighter using visible text markers, for terminals without color."""

    insert_open = '{+'
    insert_close = '+}'
    delete_open = '[-'
    delete_close = '-]'


class InlineFormatter:
    """Format a diff as a single interleaved stream."""

    def __init__(self, highlighter: Optional[Highlighter] = None):
        self.highlighter = highlighter or AnsiHighlighter()

    def format(self, segments: Iterable[Segment]) -> str:
        """
        Concatenate all fragments in order.

        Inserted text is shown in place and deleted text is marked
        rather than omitted.
        """
        return ''.join(self.highlighter.mark(s) for s in segments)


class SideBySideFormatter:
    """Format a diff as two independent column texts."""

    def __init__(self, highlighter: Optional[Highlighter] = None):
        self.highlighter = highlighter or AnsiHighlighter('42', '41')

    def format(self, segments: Iterable[Segment]) -> SideBySideText:
        """
        Build the reference and candidate texts.

        Equal text goes unmarked to both sides, deleted text marked to
        the reference side only, inserted text marked to the candidate
        side only. Each side is then split on newlines.
        """
        ref_parts: list[str] = []
        out_parts: list[str] = []

        for segment in segments:
            if segment.tag == DiffTag.EQUAL:
                ref_parts.append(segment.text)
                out_parts.append(segment.text)
            elif segment.tag == DiffTag.DELETE:
                ref_parts.append(self.highlighter.deleted(segment.text))
            elif segment.tag == DiffTag.INSERT:
                out_parts.append(self.highlighter.inserted(segment.text))

        return SideBySideText(
            reference=tuple(''.join(ref_parts).split('\n')),
            candidate=tuple(''.join(out_parts).split('\n')),
        )


def visible_lines(lines: Sequence[str]) -> Iterator[str]:
    """Yield the lines worth printing (blank lines are suppressed)."""
    for line in lines:
        if line != "":
            yield line
