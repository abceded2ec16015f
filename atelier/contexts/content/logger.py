"""
Content context logger.

Provides logging interface for the content context with automatic [content] prefix.
All content modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from atelier.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[content]"


def setup_content_logger(log_dir: Path, content_path: Path = None) -> Path:
    """
    Setup logger for content context.

    Args:
        log_dir: Directory for this session
        content_path: Content document being checked (defaults to ATELIER_CONTENT_PATH)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="content",
        log_dir=log_dir,
        content_path=content_path or Path(os.getenv("ATELIER_CONTENT_PATH", "content/content.json")),
    )


# Wrapper functions with automatic [content] prefix


def _log_info(message: str) -> None:
    """Log info message with [content] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [content] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [content] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [content] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [content] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level content-specific logging helpers


def log_content_loaded(source: Path, section_counts: dict) -> None:
    """Log a successfully parsed content document with per-section item counts."""
    _log_success(f"Loaded content document: {source}")
    for section, count in section_counts.items():
        _log_debug(f"  {section}: {count} items")


def log_content_fallback(source: Path, error: Exception) -> None:
    """Log a failed content load that was replaced by the default document."""
    _log_error(f"Failed to load {source}: {error}")
    _log_warning("Rendering with the minimal default document")


def log_missing_assets(missing: dict) -> None:
    """Log local asset references that do not resolve to files."""
    _log_error(f"Missing local assets ({len(missing)}):")
    for asset_path, locations in missing.items():
        _log_error(f"  {asset_path} <- {', '.join(locations)}")
