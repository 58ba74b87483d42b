"""
Core data models for the output checker.

This module defines the data structures shared across the application:
- Diff segment models
- Per-pair comparison results
- Batch summary

All models are:
- UI-agnostic (can be used with any frontend)
- Immutable once produced (write-once, read-many within a run)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Mapping, Optional


# =============================================================================
# Enumerations
# =============================================================================

class DiffTag(Enum):
    """Tag of a segment in a diff result."""
    EQUAL = auto()   # Text present in both reference and candidate
    INSERT = auto()  # Text present only in the candidate
    DELETE = auto()  # Text present only in the reference


# =============================================================================
# Segment Models
# =============================================================================

@dataclass(frozen=True)
class Segment:
    """
    A tagged span of text in a diff result.

    Concatenating the EQUAL and DELETE fragments of a segment sequence
    reconstructs the reference text; EQUAL and INSERT reconstruct the
    candidate text.
    """
    tag: DiffTag
    text: str

    @property
    def is_change(self) -> bool:
        return self.tag != DiffTag.EQUAL

    @property
    def in_reference(self) -> bool:
        """Whether the fragment belongs to the reference text."""
        return self.tag in (DiffTag.EQUAL, DiffTag.DELETE)

    @property
    def in_candidate(self) -> bool:
        """Whether the fragment belongs to the candidate text."""
        return self.tag in (DiffTag.EQUAL, DiffTag.INSERT)


def reference_text(segments: tuple[Segment, ...] | list[Segment]) -> str:
    """Rebuild the reference text from a segment sequence."""
    return ''.join(s.text for s in segments if s.in_reference)


def candidate_text(segments: tuple[Segment, ...] | list[Segment]) -> str:
    """Rebuild the candidate text from a segment sequence."""
    return ''.join(s.text for s in segments if s.in_candidate)


@dataclass(frozen=True)
class SideBySideText:
    """
    Two parallel renderings for side-by-side display.

    Each side is the marked text split on newline characters. Blank
    lines are kept here and only filtered at display time.
    """
    reference: tuple[str, ...] = ()
    candidate: tuple[str, ...] = ()


@dataclass(frozen=True)
class DiffStatistics:
    """Character statistics about a diff result."""
    inserted_chars: int = 0
    deleted_chars: int = 0
    unchanged_chars: int = 0

    @property
    def total_changes(self) -> int:
        """Total number of changed characters."""
        return self.inserted_chars + self.deleted_chars

    @property
    def similarity_ratio(self) -> float:
        """
        Calculate similarity ratio (0.0 to 1.0).

        1.0 means identical, 0.0 means nothing in common.
        """
        total = 2 * self.unchanged_chars + self.total_changes
        if total == 0:
            return 1.0
        return 2 * self.unchanged_chars / total

    def __str__(self) -> str:
        return (f"+{self.inserted_chars} -{self.deleted_chars} "
                f"={self.unchanged_chars}")


# =============================================================================
# Comparison Models
# =============================================================================

@dataclass(frozen=True)
class ComparisonResult:
    """
    Result of comparing one reference/candidate pair.

    Carries the segment sequence and the precomputed side-by-side
    rendering, so displaying it never re-runs the diff.
    """
    identifier: int
    matched: bool
    segments: tuple[Segment, ...]
    side_by_side: SideBySideText
    statistics: DiffStatistics = field(default_factory=DiffStatistics)

    @property
    def reference_text(self) -> str:
        return reference_text(self.segments)

    @property
    def candidate_text(self) -> str:
        return candidate_text(self.segments)

    @property
    def change_count(self) -> int:
        """Number of non-equal segments."""
        return sum(1 for s in self.segments if s.is_change)

    def iter_changes(self) -> Iterator[Segment]:
        """Iterate over only the inserted/deleted segments."""
        for segment in self.segments:
            if segment.is_change:
                yield segment


@dataclass(frozen=True)
class BatchSummary:
    """
    Aggregated results of one batch run.

    `results` is keyed by file identifier and carries no ordering
    guarantee; every ordered view sorts identifiers explicitly.
    """
    total: int
    matched: int
    results: Mapping[int, ComparisonResult]
    reference_dir: str = ""
    candidate_dir: str = ""
    elapsed: float = 0.0

    @property
    def unmatched(self) -> tuple[int, ...]:
        """Identifiers of mismatched pairs, ascending."""
        return tuple(sorted(
            identifier for identifier, result in self.results.items()
            if not result.matched
        ))

    @property
    def all_matched(self) -> bool:
        return self.matched == self.total

    def get(self, identifier: int) -> Optional[ComparisonResult]:
        return self.results.get(identifier)

    def summary(self) -> str:
        """Get a one-line summary string."""
        return f"Matched files: {self.matched}/{self.total}"
