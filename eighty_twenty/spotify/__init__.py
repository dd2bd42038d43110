"""Public façade for the eighty_twenty.spotify package.

This module exposes the Spotify Web API integration: the REST client, the
user authorization flow, playlist reconciliation, and the error taxonomy.
Callers should import these symbols from this façade instead of the
internal client, auth, or playlists modules.
"""

from .auth import AuthorizationFlow, AuthResult, AuthState, CallbackResult, CallbackServer
from .client import (
    PLAYLIST_DESCRIPTION,
    CatalogClient,
    SpotifyClient,
    bearer_headers,
    track_uri,
)
from .errors import (
    AuthDenied,
    AuthError,
    AuthExchangeFailed,
    AuthTimeout,
    CatalogError,
    ReconcileError,
    SpotifyError,
)
from .playlists import PlaylistReconciler, ReconcileMode, ReconcileResult

__all__ = [
    "CatalogClient",
    "SpotifyClient",
    "PLAYLIST_DESCRIPTION",
    "bearer_headers",
    "track_uri",
    "AuthorizationFlow",
    "AuthResult",
    "AuthState",
    "CallbackResult",
    "CallbackServer",
    "PlaylistReconciler",
    "ReconcileMode",
    "ReconcileResult",
    "SpotifyError",
    "CatalogError",
    "AuthError",
    "AuthTimeout",
    "AuthDenied",
    "AuthExchangeFailed",
    "ReconcileError",
]
