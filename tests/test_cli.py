"""Tests for the numerlo command-line interface."""

import logging

import pytest

from numerlo.api import cli
from numerlo.api.cli import create_parser, log_level, main


class TestParser:
    """Test argument parsing."""

    def test_encode_defaults(self):
        """encode defaults to the configured target and no separator."""
        args = create_parser().parse_args(["encode", "42"])
        assert args.numbers == [42]
        assert args.to == cli.DEFAULT_SYSTEM
        assert args.sep is None

    def test_decode_defaults(self):
        """decode defaults to auto-detect and integer output."""
        args = create_parser().parse_args(["decode", "MMXXVI"])
        assert args.source == "auto"
        assert args.to == "integer"

    def test_command_required(self):
        """A subcommand is required."""
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_encode_rejects_non_integer(self):
        """encode arguments must be integers."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["encode", "twelve"])


class TestLogLevel:
    """Test resolving NUMERLO_LOG_LEVEL."""

    def test_known_names(self):
        """Standard level names resolve case-insensitively."""
        assert log_level("debug") == logging.DEBUG
        assert log_level("ERROR") == logging.ERROR

    def test_unknown_name_falls_back(self):
        """Unknown names fall back to WARNING."""
        assert log_level("verbose") == logging.WARNING
        assert log_level("") == logging.WARNING

    def test_main_runs_with_bad_level(self, monkeypatch, capsys):
        """A bad level does not stop a command from running."""
        monkeypatch.setattr(cli, "LOG_LEVEL", "verbose")
        assert main(["encode", "7", "--to", "roman"]) == 0
        assert capsys.readouterr().out == "VII\n"


class TestCommands:
    """Test each subcommand end to end."""

    def test_encode(self, capsys):
        """encode prints the encoded value."""
        assert main(["encode", "2026", "--to", "roman"]) == 0
        assert capsys.readouterr().out == "MMXXVI\n"

    def test_encode_negative_argument(self, capsys):
        """Negative numbers can follow '--'."""
        assert main(["encode", "--to", "thai", "--", "-45"]) == 0
        assert capsys.readouterr().out == "-๔๕\n"

    def test_encode_many(self, capsys):
        """Several numbers print one per line."""
        assert main(["encode", "1", "2", "3", "--to", "roman"]) == 0
        assert capsys.readouterr().out == "I\nII\nIII\n"

    def test_encode_error(self, capsys):
        """Errors go to stderr with exit status 1."""
        assert main(["encode", "0", "--to", "roman"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "ERROR: not_positive\n"

    def test_decode(self, capsys):
        """decode prints the integer value."""
        assert main(["decode", "MMXXVI"]) == 0
        assert capsys.readouterr().out == "2026\n"

    def test_decode_and_reencode(self, capsys):
        """decode with --to re-encodes, keeping the separator."""
        assert main(["decode", "1,234,567", "--from", "arabic", "--to", "thai", "--sep", ","]) == 0
        assert capsys.readouterr().out == "๑,๒๓๔,๕๖๗\n"

    def test_decode_unknown_system(self, capsys):
        """An unknown --from system is reported."""
        assert main(["decode", "123", "--from", "klingon"]) == 1
        assert "unknown_system" in capsys.readouterr().err

    def test_detect(self, capsys):
        """detect prints the system name."""
        assert main(["detect", "๑๒๓"]) == 0
        assert capsys.readouterr().out == "thai\n"

    def test_detect_nothing(self, capsys):
        """detect reports unclaimed strings."""
        assert main(["detect", "abc"]) == 1
        assert capsys.readouterr().err == "ERROR: unknown_system\n"

    def test_systems(self, capsys):
        """systems prints one line per system."""
        assert main(["systems"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 70
        assert any(line.startswith("roman ") and "MMXXVI" in line for line in lines)

    def test_systems_verbose(self, capsys):
        """-v adds descriptions."""
        assert main(["-v", "systems"]) == 0
        out = capsys.readouterr().out
        assert "Roman numerals with subtractive pairs" in out
