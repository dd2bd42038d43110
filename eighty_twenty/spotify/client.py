"""REST adapter for the Spotify Web API.

Each method issues a single logical HTTP call (listing calls follow `next`
links, bulk mutations are chunked at the API's per-request limit). There is
no retry: transport failures surface as CatalogError, and a missing field in
an otherwise successful response is reported as None.
"""

from typing import Any, Dict, Iterator, List, Optional, Protocol, Sequence
from urllib.parse import quote, urlencode

import requests

from eighty_twenty.config import SpotifyConfig
from eighty_twenty.core import PlaylistHandle

from .errors import CatalogError

PLAYLIST_DESCRIPTION = "Playlist generated by Gemini for running training."

# Spotify accepts at most 100 items per add/remove request
MAX_ITEMS_PER_REQUEST = 100


def track_uri(track_id: str) -> str:
    return f"spotify:track:{track_id}"


def _chunks(items: Sequence[Any], size: int = MAX_ITEMS_PER_REQUEST) -> Iterator[List[Any]]:
    for i in range(0, len(items), size):
        yield list(items[i : i + size])


class CatalogClient(Protocol):
    """Operations the authorization flow and the reconciler need."""

    def build_authorization_url(
        self, scopes: Sequence[str], redirect_uri: Optional[str] = None
    ) -> str: ...

    def get_client_credentials_token(self) -> Optional[str]: ...

    def exchange_authorization_code(
        self, code: str, redirect_uri: Optional[str] = None
    ) -> Optional[str]: ...

    def search_track(self, title: str, artist: str, token: str) -> Optional[str]: ...

    def get_current_user_id(self, token: str) -> Optional[str]: ...

    def find_playlist_by_name(
        self, name: str, token: str
    ) -> Optional[PlaylistHandle]: ...

    def create_playlist(
        self, name: str, token: str, user_id: str
    ) -> Optional[PlaylistHandle]: ...

    def get_playlist_track_uris(self, playlist_id: str, token: str) -> List[str]: ...

    def remove_tracks(
        self, playlist_id: str, uris: Sequence[str], token: str
    ) -> None: ...

    def add_tracks(
        self, playlist_id: str, track_ids: Sequence[str], token: str
    ) -> None: ...


def bearer_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class SpotifyClient:
    """
    CatalogClient implementation backed by requests.

    Tokens are passed to each call explicitly; the client never stores them.
    """

    def __init__(
        self,
        config: SpotifyConfig,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "SpotifyClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # HTTP plumbing
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        url: str,
        expect_json: bool = True,
        **kwargs: Any,
    ) -> Any:
        kwargs.setdefault("timeout", self.config.request_timeout)
        try:
            r = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise CatalogError(f"{method} {url} failed: {e}", url=url) from e

        try:
            r.raise_for_status()
        except requests.HTTPError as e:
            raise CatalogError(
                f"{method} {url} returned HTTP {r.status_code}",
                status_code=r.status_code,
                url=url,
            ) from e

        if not expect_json:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise CatalogError(
                f"{method} {url} returned a malformed JSON body",
                status_code=r.status_code,
                url=url,
            ) from e

    def _paginate(self, url: str, token: str, params: Optional[Dict] = None) -> Iterator[Dict]:
        headers = bearer_headers(token)
        while url:
            data = self._request("GET", url, headers=headers, params=params)
            if not isinstance(data, dict):
                return
            for item in data.get("items") or []:
                if isinstance(item, dict):
                    yield item
            url = data.get("next")
            params = None  # next URL already includes params

    def _token_grant(self, form: Dict[str, str]) -> Optional[str]:
        data = self._request(
            "POST",
            self.config.token_url,
            data=form,
            auth=(self.config.client_id, self.config.client_secret),
        )
        if isinstance(data, dict):
            return data.get("access_token") or None
        return None

    # ------------------------------------------------------------------
    # Authorization
    # ------------------------------------------------------------------

    def build_authorization_url(
        self, scopes: Sequence[str], redirect_uri: Optional[str] = None
    ) -> str:
        query = {
            "response_type": "code",
            "client_id": self.config.client_id,
            "scope": " ".join(scopes),
            "redirect_uri": redirect_uri or self.config.redirect_uri,
        }
        return f"{self.config.auth_url}?{urlencode(query, quote_via=quote)}"

    def get_client_credentials_token(self) -> Optional[str]:
        return self._token_grant({"grant_type": "client_credentials"})

    def exchange_authorization_code(
        self, code: str, redirect_uri: Optional[str] = None
    ) -> Optional[str]:
        return self._token_grant(
            {
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": redirect_uri or self.config.redirect_uri,
            }
        )

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def search_track(self, title: str, artist: str, token: str) -> Optional[str]:
        """
        Look up a single track by structured title/artist query.

        The top hit is only accepted when it has a non-empty name and a
        non-empty primary artist name.
        """
        params = {
            "q": f"track:{title} artist:{artist}",
            "type": "track",
            "limit": 1,
        }
        data = self._request(
            "GET", self.config.search_url, headers=bearer_headers(token), params=params
        )
        if not isinstance(data, dict):
            return None
        items = (data.get("tracks") or {}).get("items") or []
        for item in items:
            if not isinstance(item, dict) or not item.get("id"):
                continue
            artists = item.get("artists") or []
            first_artist = artists[0] if artists and isinstance(artists[0], dict) else {}
            if item.get("name") and first_artist.get("name"):
                return item["id"]
        return None

    def get_current_user_id(self, token: str) -> Optional[str]:
        data = self._request("GET", self.config.me_url, headers=bearer_headers(token))
        if isinstance(data, dict):
            return data.get("id") or None
        return None

    # ------------------------------------------------------------------
    # Playlists
    # ------------------------------------------------------------------

    def find_playlist_by_name(self, name: str, token: str) -> Optional[PlaylistHandle]:
        wanted = name.casefold()
        url = f"{self.config.me_url}/playlists"
        for p in self._paginate(url, token, params={"limit": 50}):
            p_name = p.get("name")
            if p.get("id") and isinstance(p_name, str) and p_name.casefold() == wanted:
                return PlaylistHandle(id=p["id"], name=p_name)
        return None

    def create_playlist(
        self, name: str, token: str, user_id: str
    ) -> Optional[PlaylistHandle]:
        url = self.config.playlists_url.format(user_id=user_id)
        payload = {
            "name": name,
            "public": False,
            "description": PLAYLIST_DESCRIPTION,
        }
        data = self._request("POST", url, headers=bearer_headers(token), json=payload)
        if isinstance(data, dict) and data.get("id"):
            return PlaylistHandle(id=data["id"], name=data.get("name") or name)
        return None

    def get_playlist_track_uris(self, playlist_id: str, token: str) -> List[str]:
        url = self.config.playlist_tracks_url.format(playlist_id=playlist_id)
        uris: List[str] = []
        for item in self._paginate(url, token, params={"fields": "items(track(uri)),next"}):
            track = item.get("track")
            if isinstance(track, dict) and track.get("uri"):
                uris.append(track["uri"])
        return uris

    def remove_tracks(self, playlist_id: str, uris: Sequence[str], token: str) -> None:
        if not uris:
            return
        url = self.config.playlist_tracks_url.format(playlist_id=playlist_id)
        headers = bearer_headers(token)
        for batch in _chunks(uris):
            body = {"tracks": [{"uri": u} for u in batch]}
            self._request("DELETE", url, expect_json=False, headers=headers, json=body)

    def add_tracks(self, playlist_id: str, track_ids: Sequence[str], token: str) -> None:
        if not track_ids:
            return
        url = self.config.playlist_tracks_url.format(playlist_id=playlist_id)
        headers = bearer_headers(token)
        uris = [track_uri(tid) for tid in track_ids]
        for batch in _chunks(uris):
            self._request(
                "POST", url, expect_json=False, headers=headers, json={"uris": batch}
            )
