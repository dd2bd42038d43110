from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel


@dataclass(frozen=True)
class SongEntry:
    """One (artist, title) pair extracted from a generated song list."""

    title: str
    artist: str


@dataclass(frozen=True)
class PlaylistHandle:
    id: str
    name: str


class SongEntryModel(BaseModel):
    artist: str
    title: str


class SongList(BaseModel):
    """
    Serializable view of an extraction result.

    - songs : extracted entries, in input order
    - count : number of entries
    """

    songs: List[SongEntryModel]
    count: int

    @classmethod
    def from_entries(cls, entries: List[SongEntry]) -> "SongList":
        return cls(
            songs=[SongEntryModel(artist=e.artist, title=e.title) for e in entries],
            count=len(entries),
        )


def track_label(song: SongEntry, track_id: Optional[str] = None) -> str:
    """Human-readable line for logs, e.g. 'Artist – Title [id]'."""
    if track_id:
        return f"{song.artist} – {song.title} [{track_id}]"
    return f"{song.artist} – {song.title}"
