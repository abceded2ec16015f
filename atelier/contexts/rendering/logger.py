"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from atelier.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, content_path: Path = None) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        content_path: Content document being rendered (recorded in provenance)

    Returns:
        Path to log file

    Example:
        from atelier.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, content_path)
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        content_path=content_path,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_missing_media(section: str, title: str, index: int, reason: str) -> None:
    """Log an item rendered as a needs-upload placeholder."""
    label = title or f"Item {index + 1}"
    _log_warning(f"[media pipeline] {section} item \"{label}\" {reason}")


def log_section_rendered(section: str, kind: str, num_cards: int, num_chips: int) -> None:
    """Log a rendered section with its card and chip counts."""
    _log_debug(f"Rendered {section} ({kind}): {num_cards} cards, {num_chips} chips")


def log_page_rendered(output_path: Path, num_cards: int, num_hidden: int) -> None:
    """Log a written HTML projection."""
    _log_success(f"Rendered page: {output_path}")
    _log_info(f"  {num_cards} cards ({num_hidden} hidden)")
