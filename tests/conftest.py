"""Pytest configuration and shared fixtures for checker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest

from checker.services.settings import CheckerSettings


def write_cases(folder: Path, cases: dict[int, str]) -> None:
    """Helper to write numbered case files, byte for byte."""
    folder.mkdir(parents=True, exist_ok=True)
    for number, text in cases.items():
        (folder / f"data{number}.out").write_bytes(text.encode("utf-8"))


def scripted_input(answers: Iterable[str]) -> Callable[[], str]:
    """Return an input function replaying `answers`, then raising EOFError."""
    it = iter(answers)

    def read() -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


@pytest.fixture
def reference_dir(tmp_path: Path) -> Path:
    """Return path of an (initially missing) reference folder."""
    return tmp_path / "LastRef"


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Return path of an (initially missing) output folder."""
    return tmp_path / "OutputData"


@pytest.fixture
def identical_batch(reference_dir: Path, output_dir: Path) -> tuple[Path, Path]:
    """Three pairs that all match."""
    cases = {1: "1 2 3\n", 2: "abc", 3: "hello\nworld\n"}
    write_cases(reference_dir, cases)
    write_cases(output_dir, cases)
    return reference_dir, output_dir


@pytest.fixture
def mismatched_batch(reference_dir: Path, output_dir: Path) -> tuple[Path, Path]:
    """Three pairs where data2.out differs ("abc" vs "abd")."""
    write_cases(reference_dir, {1: "1 2 3\n", 2: "abc", 3: "hello\nworld\n"})
    write_cases(output_dir, {1: "1 2 3\n", 2: "abd", 3: "hello\nworld\n"})
    return reference_dir, output_dir


@pytest.fixture
def plain_settings(reference_dir: Path, output_dir: Path) -> CheckerSettings:
    """Settings pointing at the test folders, without ANSI colors."""
    return CheckerSettings(
        reference_dir=str(reference_dir),
        output_dir=str(output_dir),
        use_color=False,
    )
