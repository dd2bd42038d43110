"""Public façade for the eighty_twenty.core package.

This module exposes logging helpers, CLI helpers, and base models that are
safe to import from other packages. Callers should import these cross-cutting
concerns from this façade instead of the internal submodules.
"""

from .cli_utils import ask, print_question, print_table
from .logging_config import configure_logging, parse_log_level
from .logging_utils import (
    log_error,
    log_info,
    log_progress,
    log_section,
    log_step,
    log_success,
    log_warning,
)
from .models import PlaylistHandle, SongEntry, SongEntryModel, SongList, track_label

__all__ = [
    "configure_logging",
    "parse_log_level",
    "log_section",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "log_progress",
    "ask",
    "print_question",
    "print_table",
    "SongEntry",
    "PlaylistHandle",
    "SongEntryModel",
    "SongList",
    "track_label",
]
