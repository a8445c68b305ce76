"""
Data models for the clip renaming pipeline.

All models use Pydantic for parsing API payloads and validation.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """Twitch application credentials, kept exactly as stored or typed."""

    client_id: str = Field(..., description="Application client id")
    client_secret: str = Field(..., description="Application client secret")

    def __repr__(self) -> str:
        return f"Credentials(client_id={self.client_id!r}, client_secret='***')"


class AccessToken(BaseModel):
    """App access token from the client-credentials exchange."""

    access_token: str
    expires_in: int = Field(..., description="Lifetime in seconds")
    token_type: str

    @property
    def authorization(self) -> str:
        """Value for the Authorization header."""
        return f"Bearer {self.access_token}"


class ClipFileRef(BaseModel):
    """A local clip file and the clip id parsed from its name."""

    id: str = Field(..., description="Clip id, empty when the name had none")
    path: Path

    @property
    def name(self) -> str:
        return self.path.name


class ClipMetadata(BaseModel):
    """Clip record returned by the Helix clips endpoint."""

    model_config = ConfigDict(extra="allow")

    id: str
    title: str
    created_at: datetime


class ClipsPage(BaseModel):
    """One page of the Helix clips response."""

    data: List[ClipMetadata] = Field(default_factory=list)
    pagination: Dict[str, Any] = Field(default_factory=dict)

    @property
    def has_more(self) -> bool:
        return bool(self.pagination.get("cursor"))


class RenameResult(BaseModel):
    """Outcome of renaming a single file."""

    old_path: Path
    new_path: Path
