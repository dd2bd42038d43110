from fastapi import APIRouter, Depends, Query

from eighty_twenty.config import AppConfig
from eighty_twenty.spotify import SpotifyClient

from ..deps import get_config

router = APIRouter()


@router.get("/url")
def get_auth_url(
    scopes: str | None = Query(default=None),
    config: AppConfig = Depends(get_config),
) -> dict:
    """
    Return the Spotify consent URL for the configured redirect URI.

    `scopes` is a space-separated list; the configured scopes are used when
    it is omitted.
    """
    scope_list = scopes.split() if scopes else list(config.spotify.scopes)
    with SpotifyClient(config.spotify) as client:
        auth_url = client.build_authorization_url(scope_list)
    return {"auth_url": auth_url}
