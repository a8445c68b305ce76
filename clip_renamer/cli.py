#!/usr/bin/env python3
"""
CLI interface for renaming downloaded Twitch clips.

Usage:
    clip-renamer --clips-dir ~/Videos/clips

    # Or using Python module:
    python -m clip_renamer.cli --clips-dir ~/Videos/clips --dry-run
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import httpx

from clip_renamer.config import DayField, get_settings_from_env, setup_logging
from clip_renamer.core.exceptions import ClipRenamerError, TwitchAPIError
from clip_renamer.core.prompts import ConsolePrompter
from clip_renamer.core.workflow import run_pipeline


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Rename downloaded Twitch clips after their title and creation time",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rename clips in the current directory
  %(prog)s

  # Rename clips in another directory
  %(prog)s --clips-dir ~/Videos/clips

  # Show the new names without touching any file
  %(prog)s --dry-run --no-pause
        """,
    )

    parser.add_argument(
        "--clips-dir", "-d",
        help="Directory containing the clips (default: $CLIPS_DIR or current directory)",
    )
    parser.add_argument(
        "--extension", "-e",
        help="Video file extension (default: .mp4)",
    )
    parser.add_argument(
        "--day-field",
        choices=[field.value for field in DayField],
        help="Day part of new names: day of month, or legacy day of week (default: month)",
    )
    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Print new names without renaming",
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Exit without waiting for Enter",
    )

    # Logging
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress all log output except errors",
    )

    parsed = parser.parse_args(args)

    if parsed.quiet:
        setup_logging("ERROR")
    else:
        setup_logging("DEBUG" if parsed.verbose else None)

    logger = logging.getLogger("clip_renamer.cli")

    settings = get_settings_from_env()
    if parsed.clips_dir is not None:
        settings.clips_dir = Path(parsed.clips_dir).expanduser()
    if parsed.extension is not None:
        try:
            settings.extension = parsed.extension
        except ValueError:
            parser.error(f"invalid extension: {parsed.extension!r}")
    if parsed.day_field is not None:
        settings.day_field = DayField(parsed.day_field)
    settings.dry_run = parsed.dry_run

    prompter = ConsolePrompter()
    exit_code = 0
    try:
        run_pipeline(settings, prompter)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except TwitchAPIError as e:
        logger.error(f"Twitch API error: {e}")
        prompter.status(f"Twitch API error ({e.status_code} {e.reason})", style="bold red")
        exit_code = 1
    except ClipRenamerError as e:
        logger.error(f"Error: {e}")
        prompter.status(str(e), style="bold red")
        exit_code = 1
    except httpx.HTTPError as e:
        logger.error(f"HTTP error: {e}")
        prompter.status(f"Network error: {e}", style="bold red")
        exit_code = 1

    if not parsed.no_pause:
        try:
            prompter.pause()
        except (EOFError, KeyboardInterrupt):
            pass
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
