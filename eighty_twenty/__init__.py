"""Running-training playlist generator with Spotify playlist sync."""

__version__ = "0.1.0"
