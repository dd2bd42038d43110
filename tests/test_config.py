import dataclasses

import pytest

from eighty_twenty.config import (
    DEFAULT_PLAYLIST_NAME,
    SCOPES,
    SPOTIFY_REDIRECT_URI,
    ConfigError,
    load_config,
)

BASE_ENV = {
    "SPOTIFY_CLIENT_ID": "id",
    "SPOTIFY_CLIENT_SECRET": "secret",
    "GEMINI_API_KEY": "gemini-key",
}


def test_load_config_defaults() -> None:
    config = load_config(BASE_ENV)

    assert config.spotify.client_id == "id"
    assert config.spotify.redirect_uri == SPOTIFY_REDIRECT_URI
    assert config.spotify.scopes == tuple(SCOPES)
    assert config.spotify.auth_timeout == 300.0
    assert config.spotify.playlists_url.format(user_id="u1").endswith("/users/u1/playlists")
    assert config.playlist_name == DEFAULT_PLAYLIST_NAME
    assert config.gemini.api_key == "gemini-key"


def test_load_config_reports_every_missing_variable() -> None:
    with pytest.raises(ConfigError) as excinfo:
        load_config({"SPOTIFY_CLIENT_ID": "id"})

    message = str(excinfo.value)
    assert "SPOTIFY_CLIENT_SECRET" in message
    assert "GEMINI_API_KEY" in message
    assert "SPOTIFY_CLIENT_ID" not in message


def test_load_config_overrides() -> None:
    env = {
        **BASE_ENV,
        "SPOTIFY_REDIRECT_URI": "http://localhost:5000/cb",
        "SPOTIFY_AUTH_TIMEOUT": "60",
        "SPOTIFY_SCOPES": "playlist-modify-private user-read-email",
        "PLAYLIST_NAME": "Tempo Tuesday",
        "LOG_LEVEL": "debug",
    }

    config = load_config(env)

    assert config.spotify.redirect_uri == "http://localhost:5000/cb"
    assert config.spotify.auth_timeout == 60.0
    assert config.spotify.scopes == ("playlist-modify-private", "user-read-email")
    assert config.playlist_name == "Tempo Tuesday"
    assert config.log_level == "debug"


@pytest.mark.parametrize("value", ["soon", "-5", "0"])
def test_load_config_rejects_bad_timeouts(value: str) -> None:
    with pytest.raises(ConfigError):
        load_config({**BASE_ENV, "SPOTIFY_REQUEST_TIMEOUT": value})


def test_config_is_immutable() -> None:
    config = load_config(BASE_ENV)

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.playlist_name = "other"  # type: ignore[misc]
