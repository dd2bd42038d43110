"""End-to-end run: request -> song list -> track ids -> user token -> playlist.

Each stage runs sequentially, one catalog call at a time. Early exits (no
songs, no search token, no tracks, no user token) are reported through
RunOutcome; catalog and reconciliation errors propagate to the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from eighty_twenty.ai import PlaylistGenerator, PlaylistRequest
from eighty_twenty.core import (
    SongEntry,
    log_error,
    log_info,
    log_progress,
    log_section,
    log_step,
    log_success,
    log_warning,
    track_label,
)
from eighty_twenty.spotify import (
    AuthorizationFlow,
    CatalogClient,
    PlaylistReconciler,
    ReconcileResult,
)

from .extractor import SongExtractor


class RunStatus(str, Enum):
    COMPLETED = "completed"
    NO_SONGS = "no_songs"
    NO_SEARCH_TOKEN = "no_search_token"
    NO_TRACKS = "no_tracks"
    NOT_AUTHORIZED = "not_authorized"


@dataclass
class RunOutcome:
    status: RunStatus
    message: str
    songs: List[SongEntry] = field(default_factory=list)
    track_ids: List[str] = field(default_factory=list)
    reconcile: Optional[ReconcileResult] = None

    @property
    def ok(self) -> bool:
        return self.status is RunStatus.COMPLETED


def search_tracks(
    catalog: CatalogClient, songs: Sequence[SongEntry], token: str
) -> List[str]:
    """Search each song in order; misses are logged and skipped."""
    track_ids: List[str] = []
    total = len(songs)
    for idx, song in enumerate(songs, start=1):
        track_id = catalog.search_track(song.title, song.artist, token)
        if track_id:
            track_ids.append(track_id)
        else:
            log_warning(f"Could not find Spotify track ID for: {track_label(song)}")
        log_progress(idx, total, prefix="  Searching tracks")
    return track_ids


class PlaylistApp:
    def __init__(
        self,
        generator: PlaylistGenerator,
        catalog: CatalogClient,
        auth_flow: AuthorizationFlow,
        reconciler: PlaylistReconciler,
        scopes: Sequence[str],
        playlist_name: str,
        extractor: Optional[SongExtractor] = None,
    ):
        self.generator = generator
        self.catalog = catalog
        self.auth_flow = auth_flow
        self.reconciler = reconciler
        self.scopes = list(scopes)
        self.playlist_name = playlist_name
        self.extractor = extractor or SongExtractor()

    def _stop(self, status: RunStatus, message: str, **kwargs) -> RunOutcome:
        log_error(message)
        return RunOutcome(status=status, message=message, **kwargs)

    def run(self, request: PlaylistRequest) -> RunOutcome:
        playlist_name = request.playlist_title or self.playlist_name
        log_section(f"Training playlist '{playlist_name}'")

        text = self.generator.generate_song_text(request)
        songs = self.extractor.extract(text)
        if not songs:
            return self._stop(
                RunStatus.NO_SONGS, "No songs could be extracted from Gemini response."
            )
        log_info(f"{len(songs)} songs extracted from the generated list.")

        log_step("Searching for Spotify track IDs...")
        search_token = self.catalog.get_client_credentials_token()
        if not search_token:
            return self._stop(
                RunStatus.NO_SEARCH_TOKEN,
                "Failed to obtain Spotify search access token.",
                songs=songs,
            )

        track_ids = search_tracks(self.catalog, songs, search_token)
        if not track_ids:
            return self._stop(
                RunStatus.NO_TRACKS,
                "No Spotify track IDs could be found for the generated songs.",
                songs=songs,
            )
        log_info(f"{len(track_ids)}/{len(songs)} songs found on Spotify.")

        log_info("To create a playlist, you need to authorize this app with Spotify.")
        auth = self.auth_flow.authorize(self.scopes)
        if not auth.ok:
            return self._stop(
                RunStatus.NOT_AUTHORIZED,
                "Failed to obtain user-authorized Spotify access token.",
                songs=songs,
                track_ids=track_ids,
            )

        result = self.reconciler.reconcile(playlist_name, track_ids, auth.access_token)
        message = f"Playlist '{playlist_name}' has been successfully updated on Spotify!"
        log_success(message)
        return RunOutcome(
            status=RunStatus.COMPLETED,
            message=message,
            songs=songs,
            track_ids=track_ids,
            reconcile=result,
        )
