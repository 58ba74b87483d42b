"""
Text diff engine.

Provides character-level comparison of two texts with support for:
- Segment extraction (equal / inserted / deleted spans)
- Exact match classification
- Optional line ending normalization
- Eager side-by-side rendering of the result
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import Optional

from checker.core.diff.formatters import SideBySideFormatter
from checker.core.models import (
    ComparisonResult,
    DiffStatistics,
    DiffTag,
    Segment,
)


@dataclass
class TextCompareOptions:
    """Options for text comparison."""
    normalize_line_endings: bool = False  # Treat \r\n and \r as \n
    autojunk: bool = False                # SequenceMatcher popularity heuristic

    def normalize(self, text: str) -> str:
        """Normalize a text according to options."""
        if self.normalize_line_endings:
            return text.replace('\r\n', '\n').replace('\r', '\n')
        return text


class TextDiffEngine:
    """
    Engine for comparing reference and candidate texts.

    The diff runs on characters, so a single changed byte shows up as
    a single changed character rather than a changed line.
    """

    def __init__(
        self,
        options: Optional[TextCompareOptions] = None,
        formatter: Optional[SideBySideFormatter] = None
    ):
        self.options = options or TextCompareOptions()
        self.formatter = formatter or SideBySideFormatter()

    def compare(
        self,
        reference: str,
        candidate: str,
        identifier: int = 0
    ) -> ComparisonResult:
        """
        Compare two texts.

        Args:
            reference: Expected text
            candidate: Produced text
            identifier: Number of the file pair being compared

        Returns:
            ComparisonResult with the segments and side-by-side lines
        """
        segments = tuple(self.diff(
            self.options.normalize(reference),
            self.options.normalize(candidate)
        ))

        return ComparisonResult(
            identifier=identifier,
            matched=self.is_match(segments),
            segments=segments,
            side_by_side=self.formatter.format(segments),
            statistics=self._calculate_statistics(segments),
        )

    def diff(self, left: str, right: str) -> list[Segment]:
        """
        Split two texts into an ordered list of tagged segments.

        A 'replace' opcode becomes a DELETE followed by an INSERT.
        Empty fragments are never emitted, so two empty texts give an
        empty list.
        """
        matcher = difflib.SequenceMatcher(
            None, left, right, autojunk=self.options.autojunk
        )

        segments: list[Segment] = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == 'equal':
                segments.append(Segment(DiffTag.EQUAL, left[i1:i2]))
            elif tag == 'delete':
                segments.append(Segment(DiffTag.DELETE, left[i1:i2]))
            elif tag == 'insert':
                segments.append(Segment(DiffTag.INSERT, right[j1:j2]))
            elif tag == 'replace':
                segments.append(Segment(DiffTag.DELETE, left[i1:i2]))
                segments.append(Segment(DiffTag.INSERT, right[j1:j2]))

        return [s for s in segments if s.text]

    @staticmethod
    def is_match(segments: tuple[Segment, ...] | list[Segment]) -> bool:
        """
        A pair matches when the diff is one EQUAL segment.

        No segments at all only happens for two empty texts, which
        also match.
        """
        if not segments:
            return True
        return len(segments) == 1 and segments[0].tag == DiffTag.EQUAL

    def _calculate_statistics(self, segments: tuple[Segment, ...]) -> DiffStatistics:
        """Calculate diff statistics from segments."""
        counts = {DiffTag.EQUAL: 0, DiffTag.INSERT: 0, DiffTag.DELETE: 0}
        for segment in segments:
            counts[segment.tag] += len(segment.text)

        return DiffStatistics(
            inserted_chars=counts[DiffTag.INSERT],
            deleted_chars=counts[DiffTag.DELETE],
            unchanged_chars=counts[DiffTag.EQUAL],
        )
