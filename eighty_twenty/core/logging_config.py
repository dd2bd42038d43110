import logging
import sys

_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

# Third-party loggers that log every request at INFO/DEBUG
_CHATTY_LOGGERS = ("urllib3", "httpx", "httpcore", "google_genai")


def parse_log_level(name: str | None, default: int = logging.WARNING) -> int:
    """
    Map a level name ("debug", "INFO", ...) to a logging level.

    Unknown or empty names fall back to `default`.
    """
    if not name:
        return default
    return _LEVELS.get(name.strip().lower(), default)


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Configure root logging for the application.

    - Logs go to stdout as "time [LEVEL] logger - message"
    - Calling it again only adjusts the level (no duplicate handlers)
    - HTTP client libraries stay at WARNING unless DEBUG is requested
    """
    if isinstance(level, str):
        level = parse_log_level(level)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        root.addHandler(handler)
    root.setLevel(level)

    library_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
