"""
Discovery of downloaded clip files in a directory.

Clip files are named ``<YYYYMMDD><anything>_<clip id>_source<anything><ext>``.
"""

import logging
import os
import re
from pathlib import Path
from typing import List, Optional

from clip_renamer.config import DEFAULT_EXTENSION
from clip_renamer.core.models import ClipFileRef

logger = logging.getLogger(__name__)

CLIP_NAME_PATTERN = re.compile(r"^\d{8}.*?_(.*)_source.*")


def extract_clip_id(filename: str) -> Optional[str]:
    """Return the clip id embedded in a filename, or None if it doesn't match."""
    match = CLIP_NAME_PATTERN.match(filename)
    if match is None:
        return None
    return match.group(1)


def scan_clips(directory: Path, extension: str = DEFAULT_EXTENSION) -> List[ClipFileRef]:
    """
    List clip files in a directory, in directory listing order.

    Files whose name matches but carries no id are kept with an empty id so
    the metadata join fails loudly later.
    """
    refs: List[ClipFileRef] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if not entry.is_file() or not entry.name.endswith(extension):
                continue
            clip_id = extract_clip_id(entry.name)
            if clip_id is None:
                continue
            if not clip_id:
                logger.error(f"Could not extract clip id from {entry.name}")
            refs.append(ClipFileRef(id=clip_id, path=Path(entry.path)))

    logger.info(f"Found {len(refs)} clip file(s) in {directory}")
    return refs
