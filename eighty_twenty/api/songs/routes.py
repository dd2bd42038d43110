from fastapi import APIRouter

from eighty_twenty.core import SongList, log_info
from eighty_twenty.pipeline import extract_songs

from .schemas import ExtractRequest

router = APIRouter()


@router.post("/extract", response_model=SongList)
def extract(body: ExtractRequest) -> SongList:
    """
    Parse a generated `Artist,Title;` list.

    Malformed entries are dropped; this endpoint never fails on bad text.
    """
    songs = extract_songs(body.text)
    log_info(f"Song extraction: {len(songs)} entries.")
    return SongList.from_entries(songs)
