"""
Content Loader

Reads the content document once per session. A document that cannot be read
or parsed is replaced by the minimal default so the rest of the site still
renders.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Union

from dotenv import load_dotenv

from atelier.contexts.content.content_document import ContentDocument
from atelier.contexts.content.defaults import get_default_document
from atelier.contexts.content.exceptions import ContentLoadError, InvalidContentStructureError
from atelier.contexts.content.logger import log_content_fallback, log_content_loaded

load_dotenv()
CONTENT_PATH = Path(os.getenv("ATELIER_CONTENT_PATH", "content/content.json"))


def read_raw_content(source: Path) -> Dict[str, Any]:
    """
    Read and decode the content document.

    Args:
        source: Path to content.json

    Returns:
        Parsed top-level object

    Raises:
        ContentLoadError: If the file is missing, unreadable, not JSON, or not an object
    """
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ContentLoadError("Could not read content document", source, e) from e

    if not isinstance(raw, dict):
        error = InvalidContentStructureError(
            f"Content root must be an object, got {type(raw).__name__}"
        )
        raise ContentLoadError("Invalid content document", source, error) from error

    return raw


def default_document() -> ContentDocument:
    """Minimal document used when loading fails."""
    return ContentDocument.from_dict(get_default_document())


def load_content(source: Union[Path, str, None] = None) -> ContentDocument:
    """
    Load the content document, degrading to the default on any failure.

    Args:
        source: Path to content.json (defaults to ATELIER_CONTENT_PATH)

    Returns:
        ContentDocument (never raises)
    """
    if source is None:
        source = CONTENT_PATH
    source = Path(source)

    try:
        raw = read_raw_content(source)
    except ContentLoadError as e:
        log_content_fallback(source, e.original_error or e)
        return default_document()

    try:
        document = ContentDocument.from_dict(raw)
    except (TypeError, ValueError, AttributeError, OverflowError) as e:
        log_content_fallback(source, InvalidContentStructureError(f"Could not build content model: {e}"))
        return default_document()

    log_content_loaded(source, document.section_counts())
    return document
