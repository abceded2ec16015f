"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    Exception raised when a section template fails to render.

    Attributes:
        message: Error description
        kind: Section kind being rendered
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        kind: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.kind = kind
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if kind and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Kind: {kind}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
