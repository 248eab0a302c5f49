"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from io import StringIO
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from dexbuild.cli import cmd_build, cmd_info, create_parser, main, positive_int
from dexbuild.exceptions import DexbuildError
from dexbuild.schemas import SpeciesRecord
from dexbuild.store import DatasetStore

if TYPE_CHECKING:
    from pathlib import Path


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "dexbuild"

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

    def test_parser_build_defaults(self) -> None:
        """Build command defaults to settings for range and generations."""
        parser = create_parser()
        args = parser.parse_args(["build"])
        assert args.command == "build"
        assert args.max_id is None
        assert args.generations is None

    def test_parser_build_options(self) -> None:
        """Build command accepts --max-id and repeated --generation."""
        parser = create_parser()
        args = parser.parse_args(
            ["build", "--max-id", "151", "--generation", "gen6", "--generation", "gen9"]
        )
        assert args.max_id == 151
        assert args.generations == ["gen6", "gen9"]

    @pytest.mark.parametrize("value", ["0", "-3", "ten"])
    def test_parser_build_rejects_bad_max_id(self, value: str) -> None:
        """--max-id must be a positive integer."""
        parser = create_parser()
        with patch("sys.stderr", new=StringIO()), pytest.raises(SystemExit):
            parser.parse_args(["build", "--max-id", value])

    def test_parser_info_command(self) -> None:
        """Parser accepts info command."""
        parser = create_parser()
        args = parser.parse_args(["info"])
        assert args.command == "info"


class TestCmdBuild:
    """Tests for cmd_build function."""

    def test_success_returns_zero(self) -> None:
        """Successful build returns exit code 0."""
        args = argparse.Namespace(max_id=3, generations=["gen9"], debug=False)

        with patch("dexbuild.cli.build_all") as mock_build:
            mock_build.return_value = {"gen9": 3}
            with patch("sys.stdout", new=StringIO()) as mock_stdout:
                exit_code = cmd_build(args)
                assert "gen9" in mock_stdout.getvalue()

        assert exit_code == 0
        mock_build.assert_called_once_with(max_id=3, generations=["gen9"])

    def test_failure_returns_one(self) -> None:
        """A build abort (e.g. unwritable output) returns exit code 1."""
        args = argparse.Namespace(max_id=None, generations=None, debug=False)

        with (
            patch("dexbuild.cli.build_all", side_effect=PermissionError("read-only")),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            exit_code = cmd_build(args)
            assert "read-only" in mock_stderr.getvalue()

        assert exit_code == 1

    def test_dexbuild_error_returns_one(self) -> None:
        """Pipeline errors are reported, not raised."""
        args = argparse.Namespace(max_id=None, generations=None, debug=False)

        with (
            patch("dexbuild.cli.build_all", side_effect=DexbuildError("boom")),
            patch("sys.stderr", new=StringIO()),
        ):
            assert cmd_build(args) == 1

    def test_debug_mode_prints_settings(self) -> None:
        """Debug mode prints settings."""
        args = argparse.Namespace(max_id=None, generations=None, debug=True)

        with patch("dexbuild.cli.build_all", return_value={}):
            with patch("sys.stdout", new=StringIO()) as mock_stdout:
                cmd_build(args)
                output = mock_stdout.getvalue()
                assert "Settings" in output or "Debug" in output


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_returns_zero(self, tmp_path: Path) -> None:
        """Info command returns exit code 0."""
        args = argparse.Namespace()
        with patch("dexbuild.cli.store", DatasetStore(tmp_path)):
            assert cmd_info(args) == 0

    def test_prints_app_info(self, tmp_path: Path) -> None:
        """Info command prints application information."""
        args = argparse.Namespace()

        with (
            patch("dexbuild.cli.store", DatasetStore(tmp_path)),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            cmd_info(args)
            output = mock_stdout.getvalue()

        assert "Application: dexbuild" in output
        assert "pokeapi.co" in output
        assert "gen9: not built" in output

    def test_reports_built_generations(self, tmp_path: Path) -> None:
        """Info shows record counts for datasets already written."""
        ds = DatasetStore(tmp_path)
        record = SpeciesRecord.model_validate(
            {
                "id": "bulbasaur",
                "dexNo": 1,
                "koName": "이상해씨",
                "enName": "Bulbasaur",
                "jpName": "フシギダネ",
                "types": ["풀", "독"],
            }
        )
        ds.write_dataset("gen9", [record])

        with (
            patch("dexbuild.cli.store", ds),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            cmd_info(argparse.Namespace())
            output = mock_stdout.getvalue()

        assert "gen9: 1 species" in output


class TestMain:
    """Tests for main entry point."""

    def test_no_command_prints_help(self) -> None:
        """No subcommand prints help and exits cleanly."""
        with (
            patch("sys.argv", ["dexbuild"]),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            assert main() == 0
            assert "usage" in mock_stdout.getvalue()

    def test_dispatches_build(self) -> None:
        """The build subcommand reaches build_all."""
        with (
            patch("sys.argv", ["dexbuild", "build", "--max-id", "5"]),
            patch("dexbuild.cli.build_all", return_value={"gen9": 5}) as mock_build,
            patch("sys.stdout", new=StringIO()),
        ):
            assert main() == 0
            mock_build.assert_called_once_with(max_id=5, generations=None)

    def test_dispatches_info(self, tmp_path: Path) -> None:
        """The info subcommand runs."""
        with (
            patch("sys.argv", ["dexbuild", "info"]),
            patch("dexbuild.cli.store", DatasetStore(tmp_path)),
            patch("sys.stdout", new=StringIO()),
        ):
            assert main() == 0


class TestPositiveInt:
    """Tests for the --max-id argument type."""

    def test_accepts_positive(self) -> None:
        assert positive_int("151") == 151

    @pytest.mark.parametrize("value", ["0", "-1", "1.5", ""])
    def test_rejects_others(self, value: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            positive_int(value)
