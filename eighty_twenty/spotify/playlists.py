"""Playlist reconciliation: converge a named playlist to a target track list.

Two strategies are supported:

  - REPLACE (default): remove every current track, then add the full target
    list. Simple and order-preserving, at the cost of redundant calls when
    the playlist already mostly matches.
  - DIFF: remove only tracks absent from the target and add only target
    tracks that are missing. Existing tracks keep their position.

Either way, after a successful run the playlist holds exactly the target set.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

from eighty_twenty.core import PlaylistHandle, log_info, log_step, log_success, log_warning

from .client import CatalogClient, track_uri
from .errors import ReconcileError


class ReconcileMode(str, Enum):
    REPLACE = "replace"
    DIFF = "diff"


@dataclass(frozen=True)
class ReconcileResult:
    playlist: PlaylistHandle
    created: bool
    removed: int
    added: int


def _missing_in_order(target_ids: Sequence[str], present_uris: Sequence[str]) -> List[str]:
    """Target ids whose URI is not present, de-duplicated, in target order."""
    present = set(present_uris)
    seen = set()
    missing: List[str] = []
    for tid in target_ids:
        uri = track_uri(tid)
        if uri in present or uri in seen:
            continue
        seen.add(uri)
        missing.append(tid)
    return missing


class PlaylistReconciler:
    def __init__(self, client: CatalogClient, mode: ReconcileMode = ReconcileMode.REPLACE):
        self.client = client
        self.mode = mode

    def _resolve_playlist(self, name: str, token: str, user_id: str) -> tuple[PlaylistHandle, bool]:
        playlist = self.client.find_playlist_by_name(name, token)
        if playlist is not None:
            log_info(f"Playlist '{name}' found ({playlist.id}).")
            return playlist, False

        log_step(f"Playlist '{name}' not found. Creating new playlist.")
        playlist = self.client.create_playlist(name, token, user_id)
        if playlist is None:
            raise ReconcileError(f"Failed to create playlist '{name}'.")
        return playlist, True

    def reconcile(
        self,
        playlist_name: str,
        target_track_ids: Sequence[str],
        user_token: str,
    ) -> ReconcileResult:
        """
        Find or create `playlist_name` and make its contents equal the target.

        Raises ReconcileError when the user id cannot be resolved or the
        playlist cannot be created; in that case no track is added or removed.
        CatalogError from the underlying client propagates unchanged.
        """
        user_id = self.client.get_current_user_id(user_token)
        if not user_id:
            raise ReconcileError("Unable to get Spotify user ID.")

        playlist, created = self._resolve_playlist(playlist_name, user_token, user_id)
        target = list(target_track_ids)

        current: List[str] = []
        if not created:
            current = self.client.get_playlist_track_uris(playlist.id, user_token)

        if self.mode is ReconcileMode.DIFF:
            target_uris = {track_uri(tid) for tid in target}
            # Removal by URI drops every occurrence of it
            to_remove = list(dict.fromkeys(u for u in current if u not in target_uris))
            to_add = _missing_in_order(target, current)
        else:
            to_remove = current
            to_add = target

        if to_remove:
            self.client.remove_tracks(playlist.id, to_remove, user_token)
            log_info(f"Removed {len(to_remove)} existing tracks from playlist '{playlist_name}'.")
        elif not created and not current:
            log_info(f"Playlist '{playlist_name}' is already empty.")

        if to_add:
            self.client.add_tracks(playlist.id, to_add, user_token)
            log_success(f"Added {len(to_add)} tracks to playlist '{playlist_name}'.")
        elif not target:
            log_warning(f"No tracks provided to add to playlist '{playlist_name}'.")
        else:
            log_info(f"Playlist '{playlist_name}' already holds every target track.")

        return ReconcileResult(
            playlist=playlist,
            created=created,
            removed=len(to_remove),
            added=len(to_add),
        )
