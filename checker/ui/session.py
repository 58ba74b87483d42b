"""
Interactive review session.

Runs the batch once, prints the summary, then lets the operator pick
mismatched files and view their differences inline or side by side.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from checker.core.diff.formatters import (
    ANSI_RESET,
    AnsiHighlighter,
    Highlighter,
    InlineFormatter,
    PlainHighlighter,
    SideBySideFormatter,
    visible_lines,
)
from checker.core.diff.text_diff import TextCompareOptions, TextDiffEngine
from checker.core.exceptions import (
    CheckerError,
    EmptyBatchError,
    EnumerationError,
    InvalidSelection,
)
from checker.core.folder.comparer import BatchRunner
from checker.core.folder.scanner import ScanOptions
from checker.core.models import BatchSummary, ComparisonResult
from checker.services.file_io import FileIOService
from checker.services.settings import CheckerSettings, DisplayMode


@dataclass
class SessionState:
    """Mutable state of the interactive loop."""
    should_continue: bool = True
    requests: int = 0


def build_runner(settings: CheckerSettings) -> BatchRunner:
    """Create a BatchRunner configured from settings."""
    colors = settings.colors
    if settings.use_color:
        highlighter: Highlighter = AnsiHighlighter(
            colors.side_by_side_added, colors.side_by_side_removed
        )
    else:
        highlighter = PlainHighlighter()

    engine = TextDiffEngine(
        options=TextCompareOptions(normalize_line_endings=settings.normalize_line_endings),
        formatter=SideBySideFormatter(highlighter),
    )
    return BatchRunner(
        engine=engine,
        file_io=FileIOService(default_encoding=settings.encoding),
        scan_options=ScanOptions(
            pattern=settings.file_pattern,
            name_template=settings.name_template,
        ),
    )


class ReviewSession:
    """
    Console session over one batch run.

    Input and output are injected so the loop can be driven by a
    scripted sequence of answers.
    """

    def __init__(
        self,
        settings: Optional[CheckerSettings] = None,
        runner: Optional[BatchRunner] = None,
        input_func: Callable[[], str] = input,
        output: Optional[TextIO] = None
    ):
        self.settings = settings or CheckerSettings()
        self.runner = runner or build_runner(self.settings)
        self.input_func = input_func
        self.output = output or sys.stdout

        colors = self.settings.colors
        if self.settings.use_color:
            inline_highlighter: Highlighter = AnsiHighlighter(
                colors.inline_added, colors.inline_removed
            )
        else:
            inline_highlighter = PlainHighlighter()
        self.inline_formatter = InlineFormatter(inline_highlighter)

    # -------------------------------------------------------------------------
    # Phases
    # -------------------------------------------------------------------------

    def run(self) -> int:
        """
        Run both phases.

        Returns:
            Exit code: 0 on normal completion, 1 on a setup error.
        """
        try:
            summary = self.run_batch()
        except CheckerError as e:
            logging.error(f"ReviewSession - Batch aborted: {e}")
            self._print(self._describe_setup_error(e))
            return 1

        self.print_summary(summary)
        state = self.interact(summary)
        logging.info(f"ReviewSession - Answered {state.requests} display requests")
        self._print("Program finished. Goodbye!")
        return 0

    def run_batch(self) -> BatchSummary:
        """
        Count the reference files and compare every pair.

        Raises:
            EnumerationError: The reference folder cannot be listed.
            EmptyBatchError: The reference folder holds no numbered files.
            ReadError: A file of the batch cannot be read.
        """
        reference_dir = self.settings.reference_dir
        count = self.runner.scanner.count(reference_dir)
        if count == 0:
            raise EmptyBatchError(reference_dir)

        logging.info(f"ReviewSession - Comparing {count} files from {reference_dir}")
        return self.runner.run(reference_dir, self.settings.output_dir, count)

    def print_summary(self, summary: BatchSummary) -> None:
        """Print the matched count and the list of mismatched files."""
        self._print(summary.summary())

        if summary.all_matched:
            self._print(self._paint("SUCCESS! - All tasks tested!", self.settings.colors.success))
            return

        self._print(self._paint("Some files have differences!", self.settings.colors.failure))
        self._print("\nIncorrect files:")
        self._print("---------------")
        for identifier in summary.unmatched:
            self._print(f"- {self._file_name(identifier)}")
        self._print()

    def interact(
        self,
        summary: BatchSummary,
        state: Optional[SessionState] = None
    ) -> SessionState:
        """
        Prompt loop for viewing differences.

        The loop ends only when the operator declines to continue (or
        the input is closed). Invalid selections are reported and the
        loop starts over.
        """
        state = state or SessionState()

        while state.should_continue:
            answer = self._ask("\nWould you like to see differences for a file? (y/n): ")
            if answer not in ("y", "Y"):
                state.should_continue = False
                continue

            try:
                identifier = self._read_identifier(summary.total)
                mode = self._read_mode()
            except InvalidSelection as e:
                logging.debug(f"ReviewSession - Invalid selection: {e}")
                self._print(str(e))
                continue

            state.requests += 1

            result = summary.get(identifier)
            if result is not None:
                self.show_differences(result, mode)

        return state

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def show_differences(self, result: ComparisonResult, mode: DisplayMode) -> None:
        """Print the differences of one file pair."""
        file_name = self._file_name(result.identifier)
        colors = self.settings.colors

        if result.matched:
            self._print(self._paint(f"File {file_name}: Files are identical", colors.success))
            return

        self._print(self._paint(f"File {file_name}: Files are different", colors.failure))

        if mode == DisplayMode.INLINE:
            self._print(self.inline_formatter.format(result.segments), end="")
        elif mode == DisplayMode.SIDE_BY_SIDE:
            self._print("\nReference:")
            self._print("----------")
            for line in visible_lines(result.side_by_side.reference):
                self._print(line)

            self._print("\nOutput:")
            self._print("-------")
            for line in visible_lines(result.side_by_side.candidate):
                self._print(line)
        self._print()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _read_identifier(self, total: int) -> int:
        answer = self._ask(f"Enter file number (1-{total}): ")
        try:
            identifier = int((answer or "").strip())
        except ValueError:
            identifier = 0

        if identifier < 1 or identifier > total:
            raise InvalidSelection(
                f"Invalid file number. Please enter a number between 1 and {total}"
            )
        return identifier

    def _read_mode(self) -> DisplayMode:
        answer = self._ask("Enter display type (1 for inline, 2 for side by side): ")
        return DisplayMode.from_string(answer or "")

    def _ask(self, prompt: str) -> Optional[str]:
        """Show a prompt and read one line; None when input is closed."""
        self.output.write(prompt)
        self.output.flush()
        try:
            return self.input_func().strip()
        except EOFError:
            self._print()
            return None

    def _file_name(self, identifier: int) -> str:
        return self.runner.scanner.options.file_name(identifier)

    def _describe_setup_error(self, error: CheckerError) -> str:
        if isinstance(error, EnumerationError):
            return f"Error counting files: {error.reason} ({error.folder})"
        if isinstance(error, EmptyBatchError):
            return "No files found in reference folder"
        return f"Error comparing files: {error}"

    def _paint(self, text: str, code: str) -> str:
        if not self.settings.use_color:
            return text
        return f"\033[{code}m{text}{ANSI_RESET}"

    def _print(self, text: str = "", end: str = "\n") -> None:
        self.output.write(text + end)
