"""
Tests for main.py - Main Entry Point

Tests for:
- Logging configuration (dictConfig with basicConfig fallback)
- Server start-up wiring (settings -> container -> app -> uvicorn)
- Exit codes on interrupt and failure
"""

import json
import logging
from pathlib import Path
from unittest.mock import MagicMock, mock_open, patch

import pytest

import moodtune
from moodtune.main import _LOGGING_CONFIG_PATH, cli, main, setup_logging


class TestLoggingSetup:
    """Tests for logging configuration."""

    def _make_valid_config(self) -> dict:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {},
            "loggers": {
                "aiosqlite": {"level": "WARNING"},
                "httpx": {"level": "WARNING"},
                "httpcore": {"level": "WARNING"},
            },
            "root": {"level": "INFO", "handlers": []},
        }

    def test_dictconfig_called_when_json_exists(self):
        config = self._make_valid_config()
        with (
            patch("builtins.open", mock_open(read_data=json.dumps(config))),
            patch("logging.config.dictConfig") as mock_dc,
        ):
            setup_logging()

            mock_dc.assert_called_once_with(config)

    def test_fallback_to_basicconfig_when_json_missing(self):
        with (
            patch("builtins.open", side_effect=FileNotFoundError),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging("DEBUG")

            mock_bc.assert_called_once()
            assert mock_bc.call_args.kwargs["level"] == logging.DEBUG

    def test_fallback_when_json_malformed(self):
        with (
            patch("builtins.open", mock_open(read_data="{invalid json")),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging()

            mock_bc.assert_called_once()

    def test_root_level_overridden(self):
        with (
            patch("builtins.open", mock_open(read_data=json.dumps(self._make_valid_config()))),
            patch("logging.config.dictConfig"),
            patch("logging.getLogger") as mock_get_logger,
        ):
            mock_root = MagicMock()
            mock_get_logger.return_value = mock_root

            setup_logging("WARNING")

            mock_root.setLevel.assert_called_once_with(logging.WARNING)

    def test_config_ships_inside_the_package(self):
        assert _LOGGING_CONFIG_PATH.parent == Path(moodtune.__file__).resolve().parent
        assert _LOGGING_CONFIG_PATH.is_file()

    def test_shipped_config_uses_colored_formatter(self):
        config = json.loads(_LOGGING_CONFIG_PATH.read_text())

        assert config["formatters"]["colored"]["()"] == "moodtune.utils.logging.ColoredFormatter"
        for name in ("aiosqlite", "httpx", "httpcore"):
            assert config["loggers"][name]["level"] == "WARNING"


def _mock_settings() -> MagicMock:
    settings = MagicMock()
    settings.log_level = "INFO"
    settings.environment = "test"
    settings.server.host = "127.0.0.1"
    settings.server.port = 5055
    return settings


class TestMainFunction:
    """Tests for the main entry point function."""

    def _run_main(self, settings, run_side_effect=None):
        mock_container = MagicMock()
        mock_app = MagicMock()
        with (
            patch("moodtune.config.settings.get_settings", return_value=settings),
            patch("moodtune.main.setup_logging") as mock_setup,
            patch(
                "moodtune.config.container.create_container", return_value=mock_container
            ) as mock_create_container,
            patch(
                "moodtune.infrastructure.web.app.create_app", return_value=mock_app
            ) as mock_create_app,
            patch("uvicorn.run", side_effect=run_side_effect) as mock_run,
        ):
            exit_code = main()

        return exit_code, {
            "setup": mock_setup,
            "create_container": mock_create_container,
            "create_app": mock_create_app,
            "run": mock_run,
            "container": mock_container,
            "app": mock_app,
        }

    def test_successful_run(self):
        settings = _mock_settings()

        exit_code, mocks = self._run_main(settings)

        assert exit_code == 0
        mocks["setup"].assert_called_once_with("INFO")
        mocks["create_container"].assert_called_once_with(settings)
        mocks["create_app"].assert_called_once_with(mocks["container"])
        mocks["run"].assert_called_once_with(
            mocks["app"], host="127.0.0.1", port=5055, log_config=None
        )

    def test_keyboard_interrupt_exits_cleanly(self):
        exit_code, _ = self._run_main(_mock_settings(), KeyboardInterrupt())
        assert exit_code == 0

    def test_unhandled_exception_returns_error(self):
        exit_code, _ = self._run_main(_mock_settings(), RuntimeError("port in use"))
        assert exit_code == 1

    def test_cli_exits_with_main_status(self):
        with patch("moodtune.main.main", return_value=3):
            with pytest.raises(SystemExit) as exc_info:
                cli()

        assert exc_info.value.code == 3
