"""
Renaming of clip files from their Twitch metadata.

New names look like ``2023-06-15 14.05 - Cool Play.mp4``.
"""

import logging
import re
from datetime import tzinfo
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from clip_renamer.config import DayField
from clip_renamer.core import audit_log
from clip_renamer.core.exceptions import ConsistencyError, FileRenameError
from clip_renamer.core.models import ClipFileRef, ClipMetadata, RenameResult

logger = logging.getLogger(__name__)

INVALID_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def sanitize_title(title: str) -> str:
    """Replace characters that can't appear in a file name."""
    return INVALID_FILENAME_CHARS.sub("_", title)


def build_clip_filename(
    clip: ClipMetadata,
    extension: str,
    day_field: DayField = DayField.MONTH,
    tz: Optional[tzinfo] = None,
) -> str:
    """
    Compute the new file name for a clip.

    Args:
        clip: Clip metadata
        extension: File extension including the dot
        day_field: Day of month, or legacy day of week (0 = Sunday)
        tz: Timezone for the timestamp (default: local time)
    """
    created = clip.created_at.astimezone(tz)
    if day_field == DayField.WEEKDAY:
        day = created.isoweekday() % 7
    else:
        day = created.day
    stamp = f"{created.year:04d}-{created.month:02d}-{day:02d} {created.hour:02d}.{created.minute:02d}"
    return f"{stamp} - {sanitize_title(clip.title)}{extension}"


def _index_by_id(metadata: Sequence[ClipMetadata]) -> Dict[str, ClipMetadata]:
    index: Dict[str, ClipMetadata] = {}
    for clip in metadata:
        index.setdefault(clip.id, clip)
    return index


def rename_clips(
    refs: Sequence[ClipFileRef],
    metadata: Sequence[ClipMetadata],
    rename_log: Path,
    debug_log: Path,
    day_field: DayField = DayField.MONTH,
    tz: Optional[tzinfo] = None,
    dry_run: bool = False,
) -> List[RenameResult]:
    """
    Rename every scanned file after its clip metadata.

    Stops at the first file without metadata. Files renamed before that stay
    renamed and the batch end marker is not written.

    Raises:
        ConsistencyError: If a file's id has no metadata record
        FileRenameError: If the target name is taken or the OS rename fails
    """
    index = _index_by_id(metadata)
    results: List[RenameResult] = []

    if not dry_run:
        audit_log.write_batch_marker(rename_log, "batch start")

    for ref in refs:
        clip = index.get(ref.id)
        if clip is None:
            audit_log.write_debug_dump(debug_log, refs, metadata)
            raise ConsistencyError(ref.id, ref.path)

        new_path = ref.path.with_name(
            build_clip_filename(clip, ref.path.suffix, day_field=day_field, tz=tz)
        )
        if dry_run:
            logger.info(f"[dry run] {ref.name} => {new_path.name}")
        else:
            if new_path.exists():
                raise FileRenameError(
                    ref.path, new_path, FileExistsError(f"{new_path.name} already exists")
                )
            try:
                ref.path.rename(new_path)
            except OSError as exc:
                raise FileRenameError(ref.path, new_path, exc) from exc
            audit_log.write_rename_entry(rename_log, ref.name, new_path.name)
            logger.info(f"Renamed {ref.name} => {new_path.name}")
        results.append(RenameResult(old_path=ref.path, new_path=new_path))

    if not dry_run:
        audit_log.write_batch_marker(rename_log, "batch end")
    return results
