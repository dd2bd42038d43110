from typing import Optional


class SpotifyError(Exception):
    """Base class for every Spotify integration failure."""


class CatalogError(SpotifyError):
    """
    A catalog call failed at the transport level.

    Covers network errors, non-2xx responses and bodies that are not JSON.
    "Call succeeded but the expected field is absent" is NOT a CatalogError;
    client methods return None for that case.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class AuthError(SpotifyError):
    """The user authorization flow ended without a token."""


class AuthTimeout(AuthError):
    pass


class AuthDenied(AuthError):
    pass


class AuthExchangeFailed(AuthError):
    pass


class ReconcileError(SpotifyError):
    """Fatal playlist reconciliation failure (no user id, creation failed)."""
