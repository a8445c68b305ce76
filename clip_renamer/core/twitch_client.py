import logging
from typing import List, Sequence

import httpx

from clip_renamer.config import TWITCH_CLIPS_URL, TWITCH_TOKEN_URL
from clip_renamer.core.exceptions import MetadataRequestError, TokenRequestError
from clip_renamer.core.models import (
    AccessToken,
    ClipFileRef,
    ClipMetadata,
    ClipsPage,
    Credentials,
)

logger = logging.getLogger(__name__)


def request_access_token(
    client: httpx.Client,
    credentials: Credentials,
    url: str = TWITCH_TOKEN_URL,
) -> AccessToken:
    """Exchange the client id and secret for an app access token."""
    response = client.post(
        url,
        data={
            "client_id": credentials.client_id,
            "client_secret": credentials.client_secret,
            "grant_type": "client_credentials",
        },
    )
    if not response.is_success:
        raise TokenRequestError(
            "Token request failed", response.status_code, response.reason_phrase
        )
    token = AccessToken.model_validate(response.json())
    logger.info(f"Obtained {token.token_type} access token (expires in {token.expires_in}s)")
    return token


def fetch_clip_metadata(
    client: httpx.Client,
    token: AccessToken,
    client_id: str,
    refs: Sequence[ClipFileRef],
    url: str = TWITCH_CLIPS_URL,
) -> List[ClipMetadata]:
    """
    Look up all clips in a single request.

    Ids are sent in scan order, duplicates included. Only the first page of
    results is used.
    """
    if not refs:
        return []

    params = [("id", ref.id) for ref in refs]
    headers = {
        "Authorization": token.authorization,
        "Client-Id": client_id,
    }
    response = client.get(url, params=params, headers=headers)
    if not response.is_success:
        raise MetadataRequestError(
            "Clip metadata request failed", response.status_code, response.reason_phrase
        )

    page = ClipsPage.model_validate(response.json())
    if page.has_more:
        logger.warning("Clip lookup returned more pages; only the first page is used")
    logger.info(f"Fetched metadata for {len(page.data)} of {len(refs)} clips")
    return page.data
