import os
import logging
import logging.config
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Twitch endpoints
TWITCH_TOKEN_URL = "https://id.twitch.tv/oauth2/token"
TWITCH_CLIPS_URL = "https://api.twitch.tv/helix/clips"

# Local files, relative to the clips directory unless overridden
CLIENT_ID_FILENAME = "client_id.txt"
CLIENT_SECRET_FILENAME = "client_secret.txt"
RENAME_LOG_FILENAME = "renamed.log"
DEBUG_LOG_FILENAME = "debug.log"

DEFAULT_EXTENSION = ".mp4"

# Logging Setup
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
LOGGER_NAME = "clip_renamer"

logger = logging.getLogger(LOGGER_NAME)


class DayField(str, Enum):
    """Calendar field used for the day part of new file names."""

    MONTH = "month"  # Day of month (1-31)
    WEEKDAY = "weekday"  # Day of week, 0 = Sunday (legacy naming)


class Settings(BaseModel):
    """Configuration for a single renaming run."""

    model_config = ConfigDict(validate_assignment=True)

    clips_dir: Path = Field(default_factory=Path.cwd)
    extension: str = Field(default=DEFAULT_EXTENSION, min_length=1)
    client_id_file: Optional[Path] = None
    client_secret_file: Optional[Path] = None
    rename_log_file: Optional[Path] = None
    debug_log_file: Optional[Path] = None
    token_url: str = TWITCH_TOKEN_URL
    clips_url: str = TWITCH_CLIPS_URL
    http_timeout: Optional[float] = Field(
        default=None, gt=0, description="Seconds; None blocks indefinitely"
    )
    day_field: DayField = DayField.MONTH
    dry_run: bool = False

    @property
    def client_id_path(self) -> Path:
        return self.client_id_file or self.clips_dir / CLIENT_ID_FILENAME

    @property
    def client_secret_path(self) -> Path:
        return self.client_secret_file or self.clips_dir / CLIENT_SECRET_FILENAME

    @property
    def rename_log_path(self) -> Path:
        return self.rename_log_file or self.clips_dir / RENAME_LOG_FILENAME

    @property
    def debug_log_path(self) -> Path:
        return self.debug_log_file or self.clips_dir / DEBUG_LOG_FILENAME


def _env_path(name: str) -> Optional[Path]:
    value = os.getenv(name)
    return Path(value) if value else None


def get_settings_from_env() -> Settings:
    """
    Build settings from environment variables.

    Environment variables:
        CLIPS_DIR: Directory to scan (default: current directory)
        CLIP_EXTENSION: Video extension (default: .mp4)
        TWITCH_CLIENT_ID_FILE / TWITCH_CLIENT_SECRET_FILE: Credential files
        RENAME_LOG_FILE / DEBUG_LOG_FILE: Log files
        TWITCH_TOKEN_URL / TWITCH_CLIPS_URL: API endpoints
        TWITCH_HTTP_TIMEOUT: Request timeout in seconds (float)
        CLIP_DAY_FIELD: "month" or "weekday"

    Returns:
        Configured Settings instance.
    """
    settings = Settings()

    if clips_dir := _env_path("CLIPS_DIR"):
        settings.clips_dir = clips_dir

    if extension := os.getenv("CLIP_EXTENSION"):
        try:
            settings.extension = extension
        except ValueError:
            logger.warning(f"Invalid CLIP_EXTENSION: {extension}")

    settings.client_id_file = _env_path("TWITCH_CLIENT_ID_FILE")
    settings.client_secret_file = _env_path("TWITCH_CLIENT_SECRET_FILE")
    settings.rename_log_file = _env_path("RENAME_LOG_FILE")
    settings.debug_log_file = _env_path("DEBUG_LOG_FILE")

    settings.token_url = os.getenv("TWITCH_TOKEN_URL", TWITCH_TOKEN_URL)
    settings.clips_url = os.getenv("TWITCH_CLIPS_URL", TWITCH_CLIPS_URL)

    if timeout := os.getenv("TWITCH_HTTP_TIMEOUT"):
        try:
            settings.http_timeout = float(timeout)
        except ValueError:
            logger.warning(f"Invalid TWITCH_HTTP_TIMEOUT: {timeout}")

    if day_field := os.getenv("CLIP_DAY_FIELD"):
        try:
            settings.day_field = DayField(day_field.lower())
        except ValueError:
            logger.warning(f"Invalid CLIP_DAY_FIELD: {day_field}")

    return settings


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure the application logger (console, plus a rotating file if set)."""
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_file = log_file or os.getenv("LOG_FILE_PATH")

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    }
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "standard",
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10 MB
            "backupCount": 5,
            "encoding": "utf8",
        }

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": LOG_FORMAT,
            }
        },
        "handlers": handlers,
        "loggers": {
            LOGGER_NAME: {
                "handlers": list(handlers),
                "level": level,
                "propagate": False,
            },
            "httpx": {"level": "WARNING"},
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    })
