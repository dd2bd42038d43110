"""Public façade for the eighty_twenty.pipeline package.

Exposes song-list extraction and the end-to-end PlaylistApp run. Other
packages should import pipeline behaviour from this façade instead of the
internal submodules.
"""

from .extractor import SONG_PATTERN, SongExtractor, extract_songs
from .orchestration import PlaylistApp, RunOutcome, RunStatus, search_tracks

__all__ = [
    "SONG_PATTERN",
    "SongExtractor",
    "extract_songs",
    "PlaylistApp",
    "RunOutcome",
    "RunStatus",
    "search_tracks",
]
