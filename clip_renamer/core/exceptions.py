"""
Exceptions raised by the clip renaming pipeline.

Every error is fatal to the run; the CLI is the only place that catches them.
"""

from pathlib import Path
from typing import Optional


class ClipRenamerError(Exception):
    """Base exception for all pipeline errors."""
    pass


class CredentialError(ClipRenamerError):
    """Base exception for credential storage errors."""
    pass


class CredentialReadError(CredentialError):
    """Raised when an existing credential file cannot be read."""
    pass


class CredentialWriteError(CredentialError):
    """Raised when credentials cannot be persisted."""
    pass


class TwitchAPIError(ClipRenamerError):
    """Raised when the Twitch API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int, reason: str = ""):
        super().__init__(f"{message}: {status_code} {reason}".rstrip())
        self.status_code = status_code
        self.reason = reason


class TokenRequestError(TwitchAPIError):
    """Raised when the OAuth token exchange fails."""
    pass


class MetadataRequestError(TwitchAPIError):
    """Raised when the clip metadata lookup fails."""
    pass


class ConsistencyError(ClipRenamerError):
    """Raised when a scanned file has no matching clip metadata."""

    def __init__(self, clip_id: str, path: Optional[Path] = None):
        where = f" (file: {path.name})" if path is not None else ""
        super().__init__(f"No clip metadata found for id '{clip_id}'{where}")
        self.clip_id = clip_id
        self.path = path


class FileRenameError(ClipRenamerError):
    """Raised when the OS refuses to rename a clip file."""

    def __init__(self, source: Path, target: Path, cause: OSError):
        super().__init__(f"Failed to rename {source.name} -> {target.name}: {cause}")
        self.source = source
        self.target = target
        self.cause = cause
