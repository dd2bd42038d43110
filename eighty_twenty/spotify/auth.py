"""User authorization (OAuth authorization-code grant) via a local callback.

The flow binds a one-shot HTTP listener on the redirect URI, surfaces the
consent URL, then races the first redirect against a timer. The listener is
shut down and its port released on every exit path.
"""

from dataclasses import dataclass
from enum import Enum
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Callable, Optional, Sequence
from urllib.parse import parse_qs, urlparse
import webbrowser

from eighty_twenty.core import log_error, log_info, log_step, log_success, log_warning

from .client import CatalogClient
from .errors import AuthDenied, AuthExchangeFailed, AuthTimeout, CatalogError

SUCCESS_HTML = (
    "<html><body><h1>Spotify authorization complete</h1>"
    "<p>Authorization received. You may close this window.</p></body></html>"
)
FAILURE_HTML = (
    "<html><body><h1>Spotify authorization failed</h1>"
    "<p>No authorization code received.</p></body></html>"
)


class AuthState(str, Enum):
    IDLE = "idle"
    AWAITING_REDIRECT = "awaiting_redirect"
    EXCHANGING = "exchanging"
    AUTHORIZED = "authorized"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True)
class AuthResult:
    state: AuthState
    access_token: Optional[str] = None
    error: Optional[str] = None
    denied: bool = False

    @property
    def ok(self) -> bool:
        return self.state is AuthState.AUTHORIZED and bool(self.access_token)

    def raise_for_state(self) -> str:
        """Return the token, or raise the AuthError matching the final state."""
        if self.ok:
            return self.access_token
        if self.state is AuthState.TIMED_OUT:
            raise AuthTimeout(self.error or "Timed out waiting for authorization.")
        if self.denied:
            raise AuthDenied(self.error)
        raise AuthExchangeFailed(self.error or "Authorization failed.")


@dataclass(frozen=True)
class CallbackResult:
    """What the single accepted redirect carried."""

    code: Optional[str]
    error: Optional[str] = None


class _CallbackHTTPServer(ThreadingHTTPServer):
    # One thread per connection: a stalled socket cannot block the redirect,
    # and leftover handler threads never hold up shutdown.
    daemon_threads = True

    def __init__(self, address, expected_path: str):
        super().__init__(address, _CallbackHandler)
        self.expected_path = expected_path
        self.result: Optional[CallbackResult] = None
        self.received = threading.Event()
        self._lock = threading.Lock()

    def accept_result(self, result: CallbackResult) -> bool:
        """Record the first redirect; later ones are refused."""
        with self._lock:
            if self.result is not None:
                return False
            self.result = result
        self.received.set()
        return True


class _CallbackHandler(BaseHTTPRequestHandler):
    server: _CallbackHTTPServer
    # Seconds a connection may stay silent before it is dropped
    timeout = 5

    def do_GET(self):
        parsed = urlparse(self.path)
        if parsed.path.rstrip("/") != self.server.expected_path.rstrip("/"):
            self._respond(404, "<html><body>Not found.</body></html>")
            return

        qs = parse_qs(parsed.query)
        code = qs.get("code", [None])[0] or None
        error = qs.get("error", [None])[0]

        if not self.server.accept_result(CallbackResult(code=code, error=error)):
            self._respond(410, "<html><body>Authorization already handled.</body></html>")
            return

        if code:
            self._respond(200, SUCCESS_HTML)
        else:
            self._respond(400, FAILURE_HTML)

    def _respond(self, status: int, html: str) -> None:
        body = html.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        # Silence default HTTP server logging in the console
        return


class CallbackServer:
    """
    One-shot local listener bound to a redirect URI.

    Use as a context manager: entering binds the port and starts serving in
    a daemon thread, leaving always shuts the server down and closes the
    socket, whichever way the block exits.
    """

    def __init__(self, redirect_uri: str):
        parsed = urlparse(redirect_uri)
        self.host = parsed.hostname or "127.0.0.1"
        self.port = parsed.port or 8888
        self.path = parsed.path or "/"
        self._httpd: Optional[_CallbackHTTPServer] = None
        self._thread: Optional[threading.Thread] = None

    def __enter__(self) -> "CallbackServer":
        self._httpd = _CallbackHTTPServer((self.host, self.port), self.path)
        self._thread = threading.Thread(
            target=self._httpd.serve_forever,
            kwargs={"poll_interval": 0.1},
            daemon=True,
        )
        self._thread.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        httpd, self._httpd = self._httpd, None
        if httpd is None:
            return
        try:
            httpd.shutdown()
        finally:
            httpd.server_close()
            if self._thread is not None:
                self._thread.join(timeout=5)
                self._thread = None

    def wait(self, timeout: float) -> Optional[CallbackResult]:
        """Block until the redirect arrives or `timeout` seconds elapse."""
        if self._httpd is None:
            raise RuntimeError("CallbackServer is not running.")
        if self._httpd.received.wait(timeout):
            return self._httpd.result
        return None


def _open_browser(url: str) -> bool:
    return webbrowser.open(url)


class AuthorizationFlow:
    """
    Drive the authorization-code dance for one user token.

    States: IDLE -> AWAITING_REDIRECT -> EXCHANGING -> AUTHORIZED, with
    FAILED and TIMED_OUT as the other terminal states. Both are final for
    this call; retrying means calling authorize() again.
    """

    def __init__(
        self,
        client: CatalogClient,
        redirect_uri: str,
        timeout: float = 300.0,
        opener: Optional[Callable[[str], object]] = _open_browser,
    ):
        self.client = client
        self.redirect_uri = redirect_uri
        self.timeout = timeout
        self.opener = opener
        self.state = AuthState.IDLE

    def _finish(
        self,
        state: AuthState,
        token: Optional[str] = None,
        error: Optional[str] = None,
        denied: bool = False,
    ) -> AuthResult:
        self.state = state
        return AuthResult(state=state, access_token=token, error=error, denied=denied)

    def _surface_url(self, url: str) -> None:
        log_step("Opening browser for Spotify authorization...")
        log_info(
            f"If your browser does not open automatically, copy/paste this URL manually:\n{url}"
        )
        if self.opener is None:
            return
        try:
            self.opener(url)
        except Exception as e:
            log_warning(f"Unable to open the browser automatically ({e}).")

    def authorize(
        self,
        scopes: Sequence[str],
        redirect_uri: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> AuthResult:
        redirect_uri = redirect_uri or self.redirect_uri
        timeout = self.timeout if timeout is None else timeout
        self.state = AuthState.IDLE

        auth_url = self.client.build_authorization_url(scopes, redirect_uri)

        with CallbackServer(redirect_uri) as server:
            self.state = AuthState.AWAITING_REDIRECT
            self._surface_url(auth_url)
            log_step(f"Waiting for Spotify authorization response at {redirect_uri} ...")
            callback = server.wait(timeout)

        if callback is None:
            log_error("Timed out waiting for Spotify authorization response.")
            return self._finish(
                AuthState.TIMED_OUT,
                error=f"No redirect received within {timeout:g} seconds.",
            )

        if not callback.code:
            reason = callback.error or "no authorization code in redirect"
            log_error(f"Spotify authorization denied: {reason}.")
            return self._finish(AuthState.FAILED, error=reason, denied=True)

        self.state = AuthState.EXCHANGING
        log_step("Exchanging authorization code for an access token...")
        try:
            token = self.client.exchange_authorization_code(callback.code, redirect_uri)
        except CatalogError as e:
            log_error(f"Token exchange failed: {e}")
            return self._finish(AuthState.FAILED, error=f"exchange failed: {e}")

        if not token:
            log_error("Token endpoint response did not contain an access token.")
            return self._finish(
                AuthState.FAILED, error="exchange failed: no access token in response"
            )

        log_success("Spotify authorization complete.")
        return self._finish(AuthState.AUTHORIZED, token=token)
