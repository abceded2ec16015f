"""Custom exceptions for the content context."""

from pathlib import Path
from typing import Optional


class ContentLoadError(Exception):
    """
    Exception raised when the content document cannot be read or parsed.

    Never escapes ``load_content``: the loader logs it and substitutes the
    default document.

    Attributes:
        message: Error description
        source: Path the document was read from
        original_error: The underlying I/O or decode error
    """

    def __init__(
        self,
        message: str,
        source: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.source = source
        self.original_error = original_error

        parts = [message]

        if source:
            parts.append(f"Source: {source}")

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))


class InvalidContentStructureError(ValueError):
    """
    Exception raised when the content document root is not a JSON object.
    """

    pass
