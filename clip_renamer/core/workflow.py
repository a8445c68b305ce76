"""
The clip renaming pipeline.

Stages run strictly in order: credentials, token, scan, metadata lookup,
rename. Any error aborts the run.
"""

import logging
from dataclasses import dataclass
from datetime import tzinfo
from typing import List, Optional

import httpx

from clip_renamer.config import Settings
from clip_renamer.core import credentials as credential_store
from clip_renamer.core.exceptions import CredentialWriteError
from clip_renamer.core.models import AccessToken, Credentials, RenameResult
from clip_renamer.core.prompts import Prompter
from clip_renamer.core.renamer import rename_clips
from clip_renamer.core.scanner import scan_clips
from clip_renamer.core.twitch_client import fetch_clip_metadata, request_access_token

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """State shared by the pipeline stages for one run."""

    settings: Settings
    credentials: Credentials
    token: AccessToken


def open_session(
    settings: Settings,
    prompter: Prompter,
    client: httpx.Client,
) -> Session:
    """Resolve credentials and obtain an access token."""
    id_path = settings.client_id_path
    secret_path = settings.client_secret_path

    credentials, save = credential_store.resolve_credentials(id_path, secret_path, prompter)
    if save:
        try:
            credential_store.save_credentials(credentials, id_path, secret_path)
        except CredentialWriteError as exc:
            # Credentials are already usable for this run
            logger.warning(str(exc))
            prompter.status(f"Could not save credentials: {exc}", style="yellow")

    prompter.status("Requesting access token...")
    token = request_access_token(client, credentials, url=settings.token_url)
    return Session(settings=settings, credentials=credentials, token=token)


def run_pipeline(
    settings: Settings,
    prompter: Prompter,
    client: Optional[httpx.Client] = None,
    tz: Optional[tzinfo] = None,
) -> List[RenameResult]:
    """
    Run the whole pipeline once.

    Args:
        settings: Run configuration
        prompter: Console input/output
        client: HTTP client to use (default: a new one for this run)
        tz: Timezone for new file names (default: local time)

    Returns:
        One result per renamed file, in scan order.
    """
    if client is None:
        with httpx.Client(timeout=settings.http_timeout) as own_client:
            return run_pipeline(settings, prompter, client=own_client, tz=tz)

    session = open_session(settings, prompter, client)

    refs = scan_clips(settings.clips_dir, settings.extension)
    prompter.status(f"Found {len(refs)} clip file(s).")

    metadata = fetch_clip_metadata(
        client,
        session.token,
        session.credentials.client_id,
        refs,
        url=settings.clips_url,
    )

    results = rename_clips(
        refs,
        metadata,
        settings.rename_log_path,
        settings.debug_log_path,
        day_field=settings.day_field,
        tz=tz,
        dry_run=settings.dry_run,
    )
    prompter.status(f"Renamed {len(results)} file(s).", style="green")
    return results
