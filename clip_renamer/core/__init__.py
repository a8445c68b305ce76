"""
Clip renaming pipeline.

Usage:
    from clip_renamer.config import get_settings_from_env
    from clip_renamer.core import ConsolePrompter, run_pipeline

    results = run_pipeline(get_settings_from_env(), ConsolePrompter())
"""

from clip_renamer.core.exceptions import (
    ClipRenamerError,
    ConsistencyError,
    CredentialReadError,
    CredentialWriteError,
    FileRenameError,
    MetadataRequestError,
    TokenRequestError,
    TwitchAPIError,
)
from clip_renamer.core.models import (
    AccessToken,
    ClipFileRef,
    ClipMetadata,
    ClipsPage,
    Credentials,
    RenameResult,
)
from clip_renamer.core.prompts import ConsolePrompter, Prompter
from clip_renamer.core.workflow import Session, open_session, run_pipeline

__all__ = [
    # Pipeline
    "run_pipeline",
    "open_session",
    "Session",
    "Prompter",
    "ConsolePrompter",
    # Data models
    "Credentials",
    "AccessToken",
    "ClipFileRef",
    "ClipMetadata",
    "ClipsPage",
    "RenameResult",
    # Errors
    "ClipRenamerError",
    "CredentialReadError",
    "CredentialWriteError",
    "TwitchAPIError",
    "TokenRequestError",
    "MetadataRequestError",
    "ConsistencyError",
    "FileRenameError",
]
