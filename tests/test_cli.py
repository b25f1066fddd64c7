"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from io import StringIO
from pathlib import Path
from unittest.mock import patch

import pytest

from temperature_fusion.cli import cmd_fuse, cmd_info, cmd_report, create_parser, main
from temperature_fusion.errors import ConversionError
from temperature_fusion.schemas import TemperatureUnit


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "temperature-fusion"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        parser = create_parser()
        args = parser.parse_args(["--debug", "info"])
        assert args.debug is True

    def test_parser_fuse_command(self) -> None:
        """Parser accepts fuse with --unit, case-insensitively."""
        parser = create_parser()
        args = parser.parse_args(["fuse", "--unit", "Celsius"])
        assert args.command == "fuse"
        assert args.unit == "celsius"

    def test_parser_fuse_default_unit(self) -> None:
        """Fuse leaves the unit to settings by default."""
        parser = create_parser()
        args = parser.parse_args(["fuse"])
        assert args.unit is None

    def test_parser_rejects_unknown_unit(self) -> None:
        """Only supported units are accepted."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["fuse", "--unit", "kelvin"])

    def test_parser_report_command(self) -> None:
        """Parser accepts report with --unit and --output."""
        parser = create_parser()
        args = parser.parse_args(["report", "--unit", "fahrenheit", "--output", "out"])
        assert args.command == "report"
        assert args.unit == "fahrenheit"
        assert args.output == Path("out")


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_returns_zero(self) -> None:
        """Info command returns exit code 0."""
        assert cmd_info(argparse.Namespace()) == 0

    def test_prints_app_info(self) -> None:
        """Info command prints application information."""
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_info(argparse.Namespace())
            output = mock_stdout.getvalue()
            assert "Application" in output
            assert "Target unit" in output


class TestCmdFuse:
    """Tests for cmd_fuse function."""

    def test_prints_fused_table(self) -> None:
        """Fuse prints 24 rows, all in the requested unit."""
        args = argparse.Namespace(unit="fahrenheit")

        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            exit_code = cmd_fuse(args)
            output = mock_stdout.getvalue()

        assert exit_code == 0
        lines = output.strip().splitlines()
        assert len(lines) == 25  # header + 24 rows
        assert "61.16" in output
        assert "celsius" not in output

    def test_uses_settings_unit_when_none(self) -> None:
        """Fuse falls back to target_unit from settings."""
        args = argparse.Namespace(unit=None)

        with (
            patch("temperature_fusion.cli.get_settings") as mock_settings,
            patch("temperature_fusion.cli.fuse_many") as mock_fuse,
            patch("sys.stdout", new=StringIO()),
        ):
            mock_settings.return_value.target_unit = TemperatureUnit.CELSIUS
            cmd_fuse(args)
            assert mock_fuse.call_args[0][1] == TemperatureUnit.CELSIUS

    def test_conversion_error_returns_one(self) -> None:
        """A conversion failure is reported on stderr with exit code 1."""
        args = argparse.Namespace(unit="celsius")

        with (
            patch("temperature_fusion.cli.fuse_many", side_effect=ConversionError("bad unit")),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            exit_code = cmd_fuse(args)
            assert exit_code == 1
            assert "temperature conversion could not be applied" in mock_stderr.getvalue()


class TestCmdReport:
    """Tests for cmd_report function."""

    def test_passes_arguments_to_flow(self) -> None:
        """Report passes unit and output directory to the flow."""
        args = argparse.Namespace(unit="celsius", output=Path("out"))

        with (
            patch("temperature_fusion.cli.build_report") as mock_flow,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            mock_flow.return_value = {"rows": 24, "unit": "celsius", "output": "out/index.html"}
            exit_code = cmd_report(args)

            assert exit_code == 0
            mock_flow.assert_called_once_with(target_unit="celsius", output_dir=Path("out"))
            assert "out/index.html" in mock_stdout.getvalue()

    def test_conversion_error_returns_one(self) -> None:
        """A conversion failure in the flow returns exit code 1."""
        args = argparse.Namespace(unit="celsius", output=None)

        with (
            patch("temperature_fusion.cli.build_report", side_effect=ConversionError()),
            patch("sys.stderr", new=StringIO()),
        ):
            assert cmd_report(args) == 1


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        """No command shows help and exits 0."""
        with patch("sys.argv", ["temperature-fusion"]):
            assert main() == 0

    def test_info_command_executes(self) -> None:
        """Info command executes successfully."""
        with (
            patch("sys.argv", ["temperature-fusion", "info"]),
            patch("temperature_fusion.cli.cmd_info") as mock_cmd,
        ):
            mock_cmd.return_value = 0
            assert main() == 0
            mock_cmd.assert_called_once()

    def test_fuse_command_executes(self) -> None:
        """Fuse command executes successfully."""
        with (
            patch("sys.argv", ["temperature-fusion", "fuse"]),
            patch("temperature_fusion.cli.cmd_fuse") as mock_cmd,
        ):
            mock_cmd.return_value = 0
            assert main() == 0
            mock_cmd.assert_called_once()

    def test_report_command_executes(self) -> None:
        """Report command executes successfully."""
        with (
            patch("sys.argv", ["temperature-fusion", "report"]),
            patch("temperature_fusion.cli.cmd_report") as mock_cmd,
        ):
            mock_cmd.return_value = 0
            assert main() == 0
            mock_cmd.assert_called_once()

    def test_debug_configures_logging(self) -> None:
        """--debug turns on debug logging."""
        with (
            patch("sys.argv", ["temperature-fusion", "--debug", "info"]),
            patch("temperature_fusion.cli.cmd_info", return_value=0),
            patch("temperature_fusion.cli.configure_logging") as mock_logging,
        ):
            main()
            mock_logging.assert_called_once_with(True)

    def test_unknown_command_shows_help(self) -> None:
        """Unknown command shows help and returns 1."""
        with (
            patch("sys.argv", ["temperature-fusion", "info"]),
            patch("temperature_fusion.cli.create_parser") as mock_parser,
        ):
            mock_parser.return_value.parse_args.return_value = argparse.Namespace(command="unknown")
            assert main() == 1
