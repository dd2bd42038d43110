from typing import List, Optional, Sequence

import pytest

from eighty_twenty.ai import PlaylistGenerator, PlaylistRequest
from eighty_twenty.pipeline import PlaylistApp, RunStatus
from eighty_twenty.spotify import (
    AuthResult,
    AuthState,
    CatalogError,
    PlaylistReconciler,
    track_uri,
)


class StubGenerator:
    def __init__(self, text: Optional[str]):
        self.text = text

    def generate(self, prompt: str) -> Optional[str]:
        return self.text


class FakeAuthFlow:
    def __init__(self, result: AuthResult):
        self.result = result
        self.scopes: List[Sequence[str]] = []

    def authorize(self, scopes, redirect_uri=None, timeout=None) -> AuthResult:
        self.scopes.append(list(scopes))
        return self.result


AUTHORIZED = AuthResult(state=AuthState.AUTHORIZED, access_token="user-token")
SONG_TEXT = "Queen, Under Pressure;Muse, Uprising;Nobody, Nothing;"
SEARCH = {("Queen", "Under Pressure"): "q1", ("Muse", "Uprising"): "m1"}


def _app(catalog, text: Optional[str] = SONG_TEXT, auth: AuthResult = AUTHORIZED) -> tuple[PlaylistApp, FakeAuthFlow]:
    flow = FakeAuthFlow(auth)
    app = PlaylistApp(
        generator=PlaylistGenerator(StubGenerator(text)),
        catalog=catalog,
        auth_flow=flow,
        reconciler=PlaylistReconciler(catalog),
        scopes=["playlist-modify-private"],
        playlist_name="MyDailyTrain",
    )
    return app, flow


def test_run_end_to_end_creates_playlist(make_catalog) -> None:
    catalog = make_catalog(search_results=SEARCH)
    app, flow = _app(catalog)

    outcome = app.run(PlaylistRequest())

    assert outcome.ok
    assert outcome.status is RunStatus.COMPLETED
    assert [s.artist for s in outcome.songs] == ["Queen", "Muse", "Nobody"]
    assert outcome.track_ids == ["q1", "m1"]
    assert outcome.reconcile.created is True
    assert flow.scopes == [["playlist-modify-private"]]

    searches = catalog.calls_to("search_track")
    assert [c[1] for c in searches] == ["Under Pressure", "Uprising", "Nothing"]
    assert all(c[3] == "search-token" for c in searches)

    (playlist_id,) = catalog.playlists
    assert catalog.playlists[playlist_id] == ("MyDailyTrain", [track_uri("q1"), track_uri("m1")])


def test_run_uses_request_playlist_title(make_catalog) -> None:
    catalog = make_catalog(search_results=SEARCH)
    app, _ = _app(catalog)

    outcome = app.run(PlaylistRequest(playlist_title="Hill Repeats"))

    assert outcome.reconcile.playlist.name == "Hill Repeats"


def test_run_stops_when_no_songs_extracted(catalog) -> None:
    app, flow = _app(catalog, text=None)

    outcome = app.run(PlaylistRequest())

    assert outcome.status is RunStatus.NO_SONGS
    assert catalog.calls == []
    assert flow.scopes == []


def test_run_stops_without_search_token(make_catalog) -> None:
    catalog = make_catalog(search_token=None)
    app, _ = _app(catalog)

    outcome = app.run(PlaylistRequest())

    assert outcome.status is RunStatus.NO_SEARCH_TOKEN
    assert catalog.calls_to("search_track") == []


def test_run_stops_when_nothing_found(catalog) -> None:
    app, flow = _app(catalog)

    outcome = app.run(PlaylistRequest())

    assert outcome.status is RunStatus.NO_TRACKS
    assert len(outcome.songs) == 3
    assert flow.scopes == []


def test_run_stops_when_not_authorized(make_catalog) -> None:
    catalog = make_catalog(search_results=SEARCH)
    timed_out = AuthResult(state=AuthState.TIMED_OUT, error="no redirect")
    app, _ = _app(catalog, auth=timed_out)

    outcome = app.run(PlaylistRequest())

    assert outcome.status is RunStatus.NOT_AUTHORIZED
    assert outcome.track_ids == ["q1", "m1"]
    assert catalog.calls_to("get_current_user_id") == []


def test_run_propagates_catalog_errors(make_catalog) -> None:
    class BrokenSearch(make_catalog):
        def search_track(self, title, artist, token):
            raise CatalogError("HTTP 503", status_code=503)

    app, _ = _app(BrokenSearch(search_results=SEARCH))

    with pytest.raises(CatalogError):
        app.run(PlaylistRequest())
