"""
Tests for configuration loading and the command line entry point.

Run with: pytest tests/test_cli.py -v
"""

import logging
from pathlib import Path
from unittest.mock import Mock, patch

import httpx
import pytest

from clip_renamer import cli
from clip_renamer.config import (
    TWITCH_CLIPS_URL,
    DayField,
    Settings,
    get_settings_from_env,
    setup_logging,
)
from clip_renamer.core.exceptions import ConsistencyError, TokenRequestError


class TestSettings:
    def test_default_paths_follow_clips_dir(self, tmp_path):
        settings = Settings(clips_dir=tmp_path)
        assert settings.client_id_path == tmp_path / "client_id.txt"
        assert settings.client_secret_path == tmp_path / "client_secret.txt"
        assert settings.rename_log_path == tmp_path / "renamed.log"
        assert settings.debug_log_path == tmp_path / "debug.log"

    def test_explicit_paths_win(self, tmp_path):
        settings = Settings(clips_dir=tmp_path, rename_log_file=Path("/var/log/r.log"))
        assert settings.rename_log_path == Path("/var/log/r.log")

    def test_defaults(self):
        settings = Settings()
        assert settings.extension == ".mp4"
        assert settings.day_field == DayField.MONTH
        assert settings.http_timeout is None
        assert settings.clips_url == TWITCH_CLIPS_URL


class TestSettingsFromEnv:
    def test_reads_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CLIPS_DIR", str(tmp_path))
        monkeypatch.setenv("CLIP_EXTENSION", ".mkv")
        monkeypatch.setenv("TWITCH_HTTP_TIMEOUT", "12.5")
        monkeypatch.setenv("CLIP_DAY_FIELD", "WEEKDAY")
        monkeypatch.setenv("DEBUG_LOG_FILE", str(tmp_path / "dump.log"))

        settings = get_settings_from_env()

        assert settings.clips_dir == tmp_path
        assert settings.extension == ".mkv"
        assert settings.http_timeout == 12.5
        assert settings.day_field == DayField.WEEKDAY
        assert settings.debug_log_path == tmp_path / "dump.log"

    def test_invalid_values_keep_defaults(self, monkeypatch):
        monkeypatch.setenv("TWITCH_HTTP_TIMEOUT", "soon")
        monkeypatch.setenv("CLIP_DAY_FIELD", "fortnight")

        settings = get_settings_from_env()

        assert settings.http_timeout is None
        assert settings.day_field == DayField.MONTH

    @pytest.mark.parametrize("timeout", ["-5", "0"])
    def test_non_positive_timeout_keeps_default(self, monkeypatch, timeout):
        monkeypatch.setenv("TWITCH_HTTP_TIMEOUT", timeout)

        assert get_settings_from_env().http_timeout is None

    def test_assignment_is_validated(self):
        settings = Settings()
        with pytest.raises(ValueError):
            settings.extension = ""
        assert settings.extension == ".mp4"


class TestSetupLogging:
    def test_writes_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        logger = logging.getLogger("clip_renamer")
        root = logging.getLogger()
        root_handlers, root_level = list(root.handlers), root.level
        try:
            setup_logging("DEBUG", str(log_file))
            logging.getLogger("clip_renamer.core.scanner").info("hello from the scanner")
            for handler in logger.handlers:
                handler.flush()

            assert "[INFO] clip_renamer.core.scanner - hello from the scanner" in log_file.read_text()
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
            logger.propagate = True
            logger.setLevel(logging.NOTSET)
            root.handlers[:] = root_handlers
            root.setLevel(root_level)


@pytest.fixture
def cli_env():
    with patch.object(cli, "setup_logging"), \
            patch.object(cli, "ConsolePrompter") as prompter_cls, \
            patch.object(cli, "run_pipeline") as run:
        yield prompter_cls.return_value, run


class TestMain:
    def test_success(self, cli_env, tmp_path):
        prompter, run = cli_env

        code = cli.main(["--clips-dir", str(tmp_path), "--day-field", "weekday", "--dry-run"])

        assert code == 0
        settings = run.call_args.args[0]
        assert settings.clips_dir == tmp_path
        assert settings.day_field == DayField.WEEKDAY
        assert settings.dry_run is True
        prompter.pause.assert_called_once()

    def test_no_pause(self, cli_env):
        prompter, _ = cli_env
        assert cli.main(["--no-pause"]) == 0
        prompter.pause.assert_not_called()

    def test_api_error_exit_code(self, cli_env):
        prompter, run = cli_env
        run.side_effect = TokenRequestError("Token request failed", 401, "Unauthorized")

        assert cli.main(["--no-pause"]) == 1
        message = prompter.status.call_args.args[0]
        assert "401" in message

    def test_consistency_error_exit_code(self, cli_env):
        prompter, run = cli_env
        run.side_effect = ConsistencyError("abc")

        assert cli.main([]) == 1
        prompter.pause.assert_called_once()

    def test_network_error_exit_code(self, cli_env):
        _, run = cli_env
        run.side_effect = httpx.ConnectError("unreachable")

        assert cli.main(["--no-pause"]) == 1

    def test_empty_extension_is_rejected(self, cli_env):
        _, run = cli_env

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--extension", "", "--no-pause"])

        assert exc_info.value.code == 2
        run.assert_not_called()

    def test_interrupt(self, cli_env):
        _, run = cli_env
        run.side_effect = KeyboardInterrupt

        assert cli.main(["--no-pause"]) == 130

    def test_pause_tolerates_closed_stdin(self, cli_env):
        prompter, _ = cli_env
        prompter.pause = Mock(side_effect=EOFError)

        assert cli.main([]) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
