from dataclasses import dataclass
import os
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

# Spotify API defaults
SPOTIFY_AUTH_URL = "https://accounts.spotify.com/authorize"
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API_BASE = "https://api.spotify.com/v1"
SPOTIFY_REDIRECT_URI = "http://127.0.0.1:8888/callback"

SCOPES = [
    "playlist-read-private",
    "playlist-read-collaborative",
    "playlist-modify-private",
    "playlist-modify-public",
]

DEFAULT_PLAYLIST_NAME = "MyDailyTrain"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_AUTH_TIMEOUT = 300.0

REQUIRED_VARIABLES = ("SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET", "GEMINI_API_KEY")


class ConfigError(ValueError):
    """Raised when required configuration is missing or malformed."""


@dataclass(frozen=True)
class SpotifyConfig:
    client_id: str
    client_secret: str
    redirect_uri: str = SPOTIFY_REDIRECT_URI
    auth_url: str = SPOTIFY_AUTH_URL
    token_url: str = SPOTIFY_TOKEN_URL
    search_url: str = f"{SPOTIFY_API_BASE}/search"
    me_url: str = f"{SPOTIFY_API_BASE}/me"
    # Templates: formatted with user_id / playlist_id
    playlists_url: str = SPOTIFY_API_BASE + "/users/{user_id}/playlists"
    playlist_tracks_url: str = SPOTIFY_API_BASE + "/playlists/{playlist_id}/tracks"
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    auth_timeout: float = DEFAULT_AUTH_TIMEOUT
    scopes: Tuple[str, ...] = tuple(SCOPES)


@dataclass(frozen=True)
class GeminiConfig:
    api_key: str
    model: str = DEFAULT_GEMINI_MODEL


@dataclass(frozen=True)
class AppConfig:
    spotify: SpotifyConfig
    gemini: GeminiConfig
    playlist_name: str = DEFAULT_PLAYLIST_NAME
    log_level: str = "INFO"


def _parse_seconds(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number of seconds, got {raw!r}.")
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}.")
    return value


def load_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Build the immutable application configuration.

    Reads os.environ (after .env has been loaded) unless an explicit mapping
    is given. Every missing required variable is reported in a single
    ConfigError.
    """
    if env is None:
        env = os.environ

    missing = [name for name in REQUIRED_VARIABLES if not env.get(name)]
    if missing:
        raise ConfigError(
            "Missing required configuration: " + ", ".join(missing) + "."
        )

    scopes_raw = env.get("SPOTIFY_SCOPES")
    scopes = tuple(scopes_raw.split()) if scopes_raw else tuple(SCOPES)

    spotify = SpotifyConfig(
        client_id=env["SPOTIFY_CLIENT_ID"],
        client_secret=env["SPOTIFY_CLIENT_SECRET"],
        redirect_uri=env.get("SPOTIFY_REDIRECT_URI") or SPOTIFY_REDIRECT_URI,
        auth_url=env.get("SPOTIFY_AUTH_URL") or SPOTIFY_AUTH_URL,
        token_url=env.get("SPOTIFY_TOKEN_URL") or SPOTIFY_TOKEN_URL,
        search_url=env.get("SPOTIFY_SEARCH_URL") or f"{SPOTIFY_API_BASE}/search",
        me_url=env.get("SPOTIFY_ME_URL") or f"{SPOTIFY_API_BASE}/me",
        playlists_url=env.get("SPOTIFY_PLAYLISTS_URL")
        or SPOTIFY_API_BASE + "/users/{user_id}/playlists",
        playlist_tracks_url=env.get("SPOTIFY_PLAYLIST_TRACKS_URL")
        or SPOTIFY_API_BASE + "/playlists/{playlist_id}/tracks",
        request_timeout=_parse_seconds(
            env, "SPOTIFY_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT
        ),
        auth_timeout=_parse_seconds(env, "SPOTIFY_AUTH_TIMEOUT", DEFAULT_AUTH_TIMEOUT),
        scopes=scopes,
    )
    gemini = GeminiConfig(
        api_key=env["GEMINI_API_KEY"],
        model=env.get("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
    )
    return AppConfig(
        spotify=spotify,
        gemini=gemini,
        playlist_name=env.get("PLAYLIST_NAME") or DEFAULT_PLAYLIST_NAME,
        log_level=env.get("LOG_LEVEL") or "INFO",
    )
