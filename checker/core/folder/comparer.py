"""
Batch comparison engine.

Compares every numbered reference file against the candidate file of
the same number and aggregates the results into a BatchSummary.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from checker.core.diff.text_diff import TextDiffEngine
from checker.core.exceptions import ReadError
from checker.core.folder.scanner import NumberedFileScanner, ScanOptions
from checker.core.models import BatchSummary, ComparisonResult
from checker.services.file_io import FileIOService


@dataclass
class BatchProgress:
    """Progress of a batch run."""
    identifier: int
    file_name: str
    items_processed: int
    total_items: int
    percent: float


class BatchRunner:
    """
    Runs the comparison over files 1..count.

    Pairs are processed one at a time in increasing order. Any file that
    cannot be read aborts the whole batch; there is no partial summary.
    """

    def __init__(
        self,
        engine: Optional[TextDiffEngine] = None,
        file_io: Optional[FileIOService] = None,
        scan_options: Optional[ScanOptions] = None
    ):
        self.engine = engine or TextDiffEngine()
        self.file_io = file_io or FileIOService()
        self.scanner = NumberedFileScanner(scan_options)
        self._progress_callback: Optional[Callable[[BatchProgress], None]] = None

    def run(
        self,
        reference_dir: Path | str,
        candidate_dir: Path | str,
        count: int,
        progress_callback: Optional[Callable[[BatchProgress], None]] = None
    ) -> BatchSummary:
        """
        Compare `count` numbered pairs.

        Args:
            reference_dir: Folder holding the expected files
            candidate_dir: Folder holding the produced files
            count: Number of pairs, taken from the reference folder
            progress_callback: Called once per compared pair

        Returns:
            BatchSummary of all pairs

        Raises:
            ReadError: A reference or candidate file could not be read.
        """
        start_time = time.time()
        self._progress_callback = progress_callback

        results: dict[int, ComparisonResult] = {}
        matched_count = 0

        for number in range(1, count + 1):
            result = self.compare_pair(reference_dir, candidate_dir, number)
            if result.matched:
                matched_count += 1
            results[number] = result

            self._report_progress(number, count)

        elapsed = time.time() - start_time
        logging.info(
            f"BatchRunner - Matched {matched_count}/{count} files in {elapsed:.2f}s"
        )

        return BatchSummary(
            total=count,
            matched=matched_count,
            results=results,
            reference_dir=str(reference_dir),
            candidate_dir=str(candidate_dir),
            elapsed=elapsed,
        )

    def compare_pair(
        self,
        reference_dir: Path | str,
        candidate_dir: Path | str,
        number: int
    ) -> ComparisonResult:
        """
        Read and compare a single numbered pair.

        Both files are decoded with one shared encoding, so the verdict
        follows the bytes on disk.
        """
        reference_path = self.scanner.path_for(reference_dir, number)
        candidate_path = self.scanner.path_for(candidate_dir, number)

        try:
            reference, candidate = self.file_io.read_pair(reference_path, candidate_path)
        except ReadError as e:
            logging.error(f"BatchRunner - Aborting batch at case {number}: {e}")
            raise

        result = self.engine.compare(
            reference.content, candidate.content, identifier=number
        )
        logging.debug(
            f"BatchRunner - {reference_path.name}: "
            f"{'match' if result.matched else 'differs'} ({result.statistics})"
        )
        return result

    def _report_progress(self, number: int, total: int) -> None:
        """Report progress to callback."""
        if self._progress_callback:
            progress = BatchProgress(
                identifier=number,
                file_name=self.scanner.options.file_name(number),
                items_processed=number,
                total_items=total,
                percent=100.0 * number / total if total else 100.0,
            )
            self._progress_callback(progress)
