"""Tests for the command line entry point."""

from __future__ import annotations

import io
import json
import logging
import sys

import pytest

import main
from checker.services.settings import CheckerSettings


@pytest.fixture(autouse=True)
def restore_globals(monkeypatch):
    """main() installs an excepthook and reconfigures the root logger."""
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseArguments:
    """Tests for parse_arguments()."""

    def test_defaults(self):
        args = main.parse_arguments([])
        assert args.reference_dir is None
        assert args.output_dir is None
        assert args.config_file is None
        assert not args.no_color
        assert args.log_level == "WARNING"

    def test_verbose_enables_debug(self):
        assert main.parse_arguments(["-v"]).log_level == "DEBUG"

    def test_log_level(self):
        assert main.parse_arguments(["--log-level", "INFO"]).log_level == "INFO"


class TestSetupSettings:
    """Tests for setup_settings()."""

    def test_defaults(self):
        assert main.setup_settings(main.CommandLineArgs()) == CheckerSettings()

    def test_overrides(self, tmp_path):
        config = tmp_path / "checker.json"
        config.write_text(json.dumps({"reference_dir": "from-file", "output_dir": "out"}))

        args = main.parse_arguments([
            "-c", str(config), "--reference", "ref", "--no-color",
        ])
        settings = main.setup_settings(args)
        assert settings.reference_dir == "ref"
        assert settings.output_dir == "out"
        assert not settings.use_color


class TestMain:
    """Tests for main()."""

    def test_missing_reference_folder(self, tmp_path, capsys):
        code = main.main(["--reference", str(tmp_path / "missing"), "--no-color"])
        assert code == 1
        assert "Error counting files" in capsys.readouterr().out

    def test_identical_folders(self, identical_batch, monkeypatch, capsys):
        reference_dir, output_dir = identical_batch
        monkeypatch.setattr(sys, "stdin", io.StringIO("n\n"))

        code = main.main([
            "--reference", str(reference_dir),
            "--output", str(output_dir),
            "--no-color",
        ])
        assert code == 0
        out = capsys.readouterr().out
        assert "Matched files: 3/3" in out
        assert "Program finished. Goodbye!" in out
