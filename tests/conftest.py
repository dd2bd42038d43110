import socket
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from eighty_twenty.core import PlaylistHandle
from eighty_twenty.spotify import track_uri


class FakeCatalog:
    """In-memory CatalogClient that records every call it receives."""

    def __init__(
        self,
        user_id: Optional[str] = "user-1",
        playlists: Optional[Dict[str, Tuple[str, List[str]]]] = None,
        search_results: Optional[Dict[Tuple[str, str], str]] = None,
        search_token: Optional[str] = "search-token",
        user_token: Optional[str] = "user-token",
        can_create: bool = True,
    ):
        self.user_id = user_id
        # playlist id -> (name, track uris)
        self.playlists: Dict[str, Tuple[str, List[str]]] = playlists or {}
        self.search_results = search_results or {}
        self.search_token = search_token
        self.user_token = user_token
        self.can_create = can_create
        self.calls: List[Tuple] = []

    def calls_to(self, name: str) -> List[Tuple]:
        return [c for c in self.calls if c[0] == name]

    def build_authorization_url(self, scopes: Sequence[str], redirect_uri=None) -> str:
        self.calls.append(("build_authorization_url", list(scopes), redirect_uri))
        return "https://accounts.example.test/authorize?client_id=abc"

    def get_client_credentials_token(self) -> Optional[str]:
        self.calls.append(("get_client_credentials_token",))
        return self.search_token

    def exchange_authorization_code(self, code: str, redirect_uri=None) -> Optional[str]:
        self.calls.append(("exchange_authorization_code", code, redirect_uri))
        return self.user_token

    def search_track(self, title: str, artist: str, token: str) -> Optional[str]:
        self.calls.append(("search_track", title, artist, token))
        return self.search_results.get((artist, title))

    def get_current_user_id(self, token: str) -> Optional[str]:
        self.calls.append(("get_current_user_id", token))
        return self.user_id

    def find_playlist_by_name(self, name: str, token: str) -> Optional[PlaylistHandle]:
        self.calls.append(("find_playlist_by_name", name, token))
        for pid, (p_name, _) in self.playlists.items():
            if p_name.lower() == name.lower():
                return PlaylistHandle(id=pid, name=p_name)
        return None

    def create_playlist(self, name: str, token: str, user_id: str) -> Optional[PlaylistHandle]:
        self.calls.append(("create_playlist", name, token, user_id))
        if not self.can_create:
            return None
        pid = f"pl-{len(self.playlists) + 1}"
        self.playlists[pid] = (name, [])
        return PlaylistHandle(id=pid, name=name)

    def get_playlist_track_uris(self, playlist_id: str, token: str) -> List[str]:
        self.calls.append(("get_playlist_track_uris", playlist_id, token))
        return list(self.playlists[playlist_id][1])

    def remove_tracks(self, playlist_id: str, uris: Sequence[str], token: str) -> None:
        self.calls.append(("remove_tracks", playlist_id, list(uris), token))
        name, current = self.playlists[playlist_id]
        doomed = set(uris)
        self.playlists[playlist_id] = (name, [u for u in current if u not in doomed])

    def add_tracks(self, playlist_id: str, track_ids: Sequence[str], token: str) -> None:
        self.calls.append(("add_tracks", playlist_id, list(track_ids), token))
        name, current = self.playlists[playlist_id]
        self.playlists[playlist_id] = (name, current + [track_uri(t) for t in track_ids])


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture
def redirect_uri(free_port: int) -> str:
    return f"http://127.0.0.1:{free_port}/callback"


@pytest.fixture
def make_catalog():
    return FakeCatalog
