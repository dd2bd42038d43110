from typing import Optional, Protocol

from google import genai

from eighty_twenty.config import GeminiConfig
from eighty_twenty.core import log_step, log_warning

from .prompt import PlaylistRequest, build_prompt

NO_TEXT_RESPONSE = "Error: Could not extract text from the Gemini response."


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> Optional[str]: ...


class GeminiTextGenerator:
    """TextGenerator backed by the google-genai client."""

    def __init__(self, config: GeminiConfig, client: Optional[genai.Client] = None):
        self.model = config.model
        self.client = client or genai.Client(api_key=config.api_key)

    def generate(self, prompt: str) -> Optional[str]:
        response = self.client.models.generate_content(model=self.model, contents=prompt)
        text = getattr(response, "text", None)
        return text or None


class PlaylistGenerator:
    """
    Turn a playlist request into the raw song-list text.

    A response without usable text is reported through the NO_TEXT_RESPONSE
    sentinel rather than an exception; it never parses into songs.
    """

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    def get_prompt(self, request: PlaylistRequest) -> str:
        return build_prompt(request)

    def send_prompt(self, prompt: str) -> str:
        log_step("Generating song list...")
        text = self.generator.generate(prompt)
        if not text:
            log_warning("The generative model returned no text.")
            return NO_TEXT_RESPONSE
        return text

    def generate_song_text(self, request: PlaylistRequest) -> str:
        return self.send_prompt(self.get_prompt(request))
