"""
Interaction context logger.

Provides logging interface for the interaction context with automatic [ui] prefix.
All interaction modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[ui]"


# Wrapper functions with automatic [ui] prefix


def _log_info(message: str) -> None:
    """Log info message with [ui] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [ui] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [ui] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [ui] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [ui] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level interaction-specific logging helpers


def log_filter_pass(num_cards: int, num_visible: int, active: dict) -> None:
    """Log a completed visibility pass with the active filters."""
    _log_debug(f"Filter pass: {num_visible}/{num_cards} cards visible")
    for name, value in active.items():
        if value:
            _log_debug(f"  {name}: {value}")


def log_session_started(num_sections: int, num_cards: int, num_images: int, num_tracks: int) -> None:
    """Log the end of startup rendering."""
    _log_success(f"Session ready: {num_sections} sections, {num_cards} cards")
    _log_info(f"  {num_images} lightbox images, {num_tracks} playable tracks")


def log_playback_denied(track_title: str, error: Exception) -> None:
    """Log a playback start refused by the platform (not an error)."""
    _log_debug(f"Playback of \"{track_title}\" not started: {error}")
