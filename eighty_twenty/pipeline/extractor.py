"""Tolerant parser for generated song lists.

The expected shape is `Artist,Title;Artist,Title;...`. Anything that does not
fit is skipped silently, since the generated text is not guaranteed to be
well-formed.
"""

import re
from typing import List

from eighty_twenty.core import SongEntry

# An entry starts at the beginning of the text or right after a ';' and must
# hold exactly one comma before its terminating ';'. Starting only at those
# boundaries keeps `A, B, C;` from being read as the entry `B, C;`.
SONG_PATTERN = re.compile(r"(?:^|(?<=;))([^,;]+),([^,;]+);")


def extract_songs(text: str | None) -> List[SongEntry]:
    """
    Extract ordered (artist, title) entries from free-form text.

    Never raises: empty, blank or unparsable input yields an empty list.
    """
    if not text or not text.strip():
        return []

    songs: List[SongEntry] = []
    for match in SONG_PATTERN.finditer(text):
        artist = match.group(1).strip()
        title = match.group(2).strip()
        if artist and title:
            songs.append(SongEntry(title=title, artist=artist))
    return songs


class SongExtractor:
    """Object form of extract_songs(), for injection into the orchestrator."""

    def extract(self, text: str | None) -> List[SongEntry]:
        return extract_songs(text)
