"""Command-line entry point: prompt for a session, build the playlist."""

import argparse
import sys
from typing import Callable, Optional, Sequence

from google.genai import errors as genai_errors

from eighty_twenty.ai import (
    DEFAULT_DESCRIPTION,
    DEFAULT_DURATION,
    DEFAULT_GENRES,
    GeminiTextGenerator,
    PlaylistGenerator,
    PlaylistRequest,
)
from eighty_twenty.config import AppConfig, ConfigError, load_config
from eighty_twenty.core import (
    ask,
    configure_logging,
    log_error,
    print_table,
)
from eighty_twenty.pipeline import PlaylistApp, RunOutcome
from eighty_twenty.spotify import (
    AuthorizationFlow,
    PlaylistReconciler,
    ReconcileMode,
    SpotifyClient,
    SpotifyError,
)


def positive_seconds(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number of seconds, got {raw!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {raw!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eighty-twenty",
        description="Generate a running-training playlist and sync it to Spotify.",
    )
    parser.add_argument("--playlist", help="Target playlist name.")
    parser.add_argument(
        "--timeout",
        type=positive_seconds,
        help="Seconds to wait for the Spotify authorization redirect.",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not try to open the consent URL in a browser.",
    )
    parser.add_argument(
        "--diff",
        action="store_true",
        help="Only remove/add the tracks that differ instead of replacing all.",
    )
    return parser


def prompt_for_request(input_fn: Callable[[str], str] = input) -> PlaylistRequest:
    duration = ask("Enter total duration (e.g. 60 minutes):", DEFAULT_DURATION, input_fn)
    description = ask(
        "Enter training session description (e.g. 60 minutes zone2):",
        DEFAULT_DESCRIPTION,
        input_fn,
    )
    genres = ask(
        "Enter preferred genres, comma separated (e.g. Rock, metal, blues):",
        DEFAULT_GENRES,
        input_fn,
    )
    return PlaylistRequest(duration=duration, description=description, genres=genres)


def display_outcome(outcome: RunOutcome) -> None:
    if outcome.songs:
        print_table(
            "Generated Songs",
            ["Artist", "Title"],
            [(s.artist, s.title) for s in outcome.songs],
        )
    if outcome.track_ids:
        print_table("Spotify Track IDs", ["Track ID"], [(t,) for t in outcome.track_ids])
    print(outcome.message)


def build_app(config: AppConfig, args: argparse.Namespace) -> tuple[PlaylistApp, SpotifyClient]:
    client = SpotifyClient(config.spotify)
    flow = AuthorizationFlow(
        client,
        redirect_uri=config.spotify.redirect_uri,
        timeout=(
            args.timeout if args.timeout is not None else config.spotify.auth_timeout
        ),
    )
    if args.no_browser:
        flow.opener = None
    mode = ReconcileMode.DIFF if args.diff else ReconcileMode.REPLACE
    app = PlaylistApp(
        generator=PlaylistGenerator(GeminiTextGenerator(config.gemini)),
        catalog=client,
        auth_flow=flow,
        reconciler=PlaylistReconciler(client, mode=mode),
        scopes=config.spotify.scopes,
        playlist_name=args.playlist or config.playlist_name,
    )
    return app, client


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
    except ConfigError as e:
        configure_logging()
        log_error(str(e))
        return 2

    configure_logging(config.log_level)
    print("EightyTwentyPlaylist Tool Started")
    request = prompt_for_request()

    app, client = build_app(config, args)
    try:
        outcome = app.run(request)
    except (SpotifyError, genai_errors.APIError) as e:
        log_error(f"An error occurred during playlist generation: {e}")
        return 1
    except OSError as e:
        log_error(f"Cannot listen on {config.spotify.redirect_uri}: {e}")
        return 1
    finally:
        client.close()

    display_outcome(outcome)
    return 0 if outcome.ok else 1


if __name__ == "__main__":
    sys.exit(main())
