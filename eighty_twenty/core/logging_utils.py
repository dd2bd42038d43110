"""Project-wide log helpers with a light visual marker per message kind."""

import logging

logger = logging.getLogger("eighty_twenty")


def log_section(title: str) -> None:
    logger.info("")  # blank line for readability
    logger.info("=== %s ===", title)


def log_info(message: str) -> None:
    logger.info("%s", message)


def log_step(message: str) -> None:
    logger.info("→ %s", message)


def log_success(message: str) -> None:
    logger.info("✅ %s", message)


def log_warning(message: str) -> None:
    """Non-fatal problem: a missed search, an empty target."""
    logger.warning("⚠️ %s", message)


def log_error(message: str) -> None:
    logger.error("❌ %s", message)


def log_progress(current: int, total: int, prefix: str = "") -> None:
    """
    One log line per step, e.g. "Searching tracks 3/12 (25.0%)".

    Logged at DEBUG for intermediate steps so long searches stay readable;
    the final step is logged at INFO.
    """
    total = max(total, 1)
    percent = max(0.0, min(1.0, current / total)) * 100
    level = logging.INFO if current >= total else logging.DEBUG
    if prefix:
        logger.log(level, "%s %d/%d (%.1f%%)", prefix, current, total, percent)
    else:
        logger.log(level, "%d/%d (%.1f%%)", current, total, percent)
