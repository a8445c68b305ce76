"""
Credential storage for the Twitch application id and secret.

Values are stored as raw text, one file each, and read back verbatim.
"""

import logging
from pathlib import Path
from typing import Tuple

from clip_renamer.core.exceptions import CredentialReadError, CredentialWriteError
from clip_renamer.core.models import Credentials
from clip_renamer.core.prompts import Prompter

logger = logging.getLogger(__name__)


def credentials_exist(id_path: Path, secret_path: Path) -> bool:
    return id_path.exists() and secret_path.exists()


def load_credentials(id_path: Path, secret_path: Path) -> Credentials:
    """
    Read both credential files without trimming.

    Raises:
        CredentialReadError: If either file cannot be read
    """
    try:
        client_id = id_path.read_text(encoding="utf-8")
        client_secret = secret_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CredentialReadError(f"Failed to read credentials: {exc}") from exc
    logger.debug(f"Loaded credentials from {id_path} and {secret_path}")
    return Credentials(client_id=client_id, client_secret=client_secret)


def save_credentials(credentials: Credentials, id_path: Path, secret_path: Path) -> None:
    """
    Write both credential files, creating parent directories.

    Raises:
        CredentialWriteError: If either file cannot be written
    """
    try:
        for path, value in (
            (id_path, credentials.client_id),
            (secret_path, credentials.client_secret),
        ):
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(value, encoding="utf-8")
    except OSError as exc:
        raise CredentialWriteError(f"Failed to save credentials: {exc}") from exc
    logger.info(f"Saved credentials to {id_path} and {secret_path}")


def resolve_credentials(
    id_path: Path,
    secret_path: Path,
    prompter: Prompter,
) -> Tuple[Credentials, bool]:
    """
    Load stored credentials or ask for them.

    Returns:
        The credentials and whether the user asked to save them. Saving is
        left to the caller so a write failure can be handled separately.
    """
    if credentials_exist(id_path, secret_path):
        return load_credentials(id_path, secret_path), False

    prompter.status("No stored credentials found.", style="yellow")
    client_id = prompter.ask("Client ID")
    client_secret = prompter.ask("Client secret", password=True)
    credentials = Credentials(client_id=client_id, client_secret=client_secret)
    save = prompter.confirm("Save credentials for next time?", default=False)
    return credentials, save
