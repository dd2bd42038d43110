from types import SimpleNamespace
from typing import List, Optional

from eighty_twenty.ai import (
    NO_TEXT_RESPONSE,
    GeminiTextGenerator,
    PlaylistGenerator,
    PlaylistRequest,
    build_prompt,
)
from eighty_twenty.config import GeminiConfig
from eighty_twenty.pipeline import extract_songs


class StubGenerator:
    def __init__(self, text: Optional[str]):
        self.text = text
        self.prompts: List[str] = []

    def generate(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        return self.text


def test_build_prompt_includes_request_fields() -> None:
    request = PlaylistRequest(duration="45 minutes", description="10 min zone1, 35 min zone3", genres="Funk")

    prompt = build_prompt(request)

    assert "total duration of 45 minutes" in prompt
    assert "10 min zone1, 35 min zone3" in prompt
    assert "Genres: Funk." in prompt
    assert "Artist,Song;Artist,Song;" in prompt


def test_playlist_request_defaults() -> None:
    request = PlaylistRequest()

    assert request.duration == "60 minutes"
    assert request.description == "60 minutes zone2"
    assert request.genres == "Rock, metal, blues"
    assert request.playlist_title is None


def test_send_prompt_returns_text() -> None:
    stub = StubGenerator("Queen, Under Pressure;")
    generator = PlaylistGenerator(stub)

    text = generator.generate_song_text(PlaylistRequest())

    assert text == "Queen, Under Pressure;"
    assert stub.prompts == [build_prompt(PlaylistRequest())]


def test_send_prompt_without_text_returns_sentinel() -> None:
    generator = PlaylistGenerator(StubGenerator(None))

    text = generator.send_prompt("anything")

    assert text == NO_TEXT_RESPONSE
    assert extract_songs(text) == []


def test_gemini_text_generator_calls_models_api() -> None:
    calls = []

    def generate_content(model: str, contents: str):
        calls.append((model, contents))
        return SimpleNamespace(text="A, B;")

    fake_client = SimpleNamespace(models=SimpleNamespace(generate_content=generate_content))
    generator = GeminiTextGenerator(GeminiConfig(api_key="k", model="gemini-test"), client=fake_client)

    assert generator.generate("hello") == "A, B;"
    assert calls == [("gemini-test", "hello")]


def test_gemini_text_generator_empty_response_is_none() -> None:
    fake_client = SimpleNamespace(
        models=SimpleNamespace(generate_content=lambda model, contents: SimpleNamespace(text=None))
    )
    generator = GeminiTextGenerator(GeminiConfig(api_key="k"), client=fake_client)

    assert generator.generate("hello") is None
