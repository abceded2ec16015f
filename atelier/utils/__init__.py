"""
Shared utilities for ATELIER.

Common functionality used across contexts:
- Logger setup with provenance
- Typed UI settings (OmegaConf)
- Text processing (excerpts, time labels, filenames)
"""

from atelier.utils.text_processing import format_time, make_excerpt

__all__ = ["format_time", "make_excerpt"]
