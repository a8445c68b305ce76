"""Append-only text logs kept next to the clips."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Sequence

from clip_renamer.core.models import ClipFileRef, ClipMetadata

logger = logging.getLogger(__name__)


def append_line(path: Path, text: str) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(text + "\n")


def write_batch_marker(path: Path, label: str) -> None:
    append_line(path, f"[{datetime.now().isoformat(timespec='seconds')}] {label}")


def write_rename_entry(path: Path, old_name: str, new_name: str) -> None:
    append_line(path, f"- {old_name}\n  => {new_name}")


def write_debug_dump(
    path: Path,
    refs: Sequence[ClipFileRef],
    metadata: Sequence[ClipMetadata],
) -> None:
    """Dump both sides of a failed join. Errors are logged, never raised."""
    dump = {
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "files": [ref.model_dump(mode="json") for ref in refs],
        "metadata": [clip.model_dump(mode="json") for clip in metadata],
    }
    try:
        append_line(path, json.dumps(dump, indent=2, ensure_ascii=False))
    except OSError as exc:
        logger.error(f"Failed to write debug dump to {path}: {exc}")
    else:
        logger.info(f"Wrote debug dump to {path}")
