"""Tests for CLI argument handling."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from vodarr.interfaces.cli import cli


class TestCliOverrides:
    def test_no_flags_no_overrides(self) -> None:
        args = cli._parse_args([])
        assert cli.build_cli_overrides(args) == {}

    def test_flags_map_to_config_keys(self) -> None:
        args = cli._parse_args(
            ["--max-pages", "3", "--log-level", "DEBUG", "--log-format", "json"]
        )
        assert cli.build_cli_overrides(args) == {
            "search_max_pages": 3,
            "log_level": "DEBUG",
            "log_format": "json",
        }


class TestStart:
    def test_start_wires_config_logging_and_uvicorn(self) -> None:
        with (
            patch.object(cli, "configure_logging", return_value={"version": 1}),
            patch.object(cli, "create_app", return_value=MagicMock()) as create_app,
            patch.object(cli.uvicorn, "run") as run,
        ):
            cli.start(["--port", "9999", "--host", "127.0.0.1", "--max-pages", "2"])

        config = create_app.call_args.args[0]
        assert config.search_max_pages == 2
        run.assert_called_once()
        assert run.call_args.kwargs["port"] == 9999
        assert run.call_args.kwargs["host"] == "127.0.0.1"
        assert run.call_args.kwargs["log_config"] == {"version": 1}
