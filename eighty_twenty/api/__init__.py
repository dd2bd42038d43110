"""HTTP API for song-list extraction and authorization helpers."""
