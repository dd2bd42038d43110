"""Public façade for the eighty_twenty.ai package (song-list generation)."""

from .gemini import NO_TEXT_RESPONSE, GeminiTextGenerator, PlaylistGenerator, TextGenerator
from .prompt import (
    DEFAULT_DESCRIPTION,
    DEFAULT_DURATION,
    DEFAULT_GENRES,
    PlaylistRequest,
    build_prompt,
)

__all__ = [
    "NO_TEXT_RESPONSE",
    "TextGenerator",
    "GeminiTextGenerator",
    "PlaylistGenerator",
    "PlaylistRequest",
    "build_prompt",
    "DEFAULT_DURATION",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_GENRES",
]
