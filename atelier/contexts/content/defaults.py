"""
Default values for the ATELIER content document.

Used by the loader when the document cannot be fetched, and by the data model
when individual fields are absent.
"""

from typing import Any, Dict

DEFAULT_SITE_NAME = "YOUR NAME"
DEFAULT_EMAIL = "you@example.com"
DEFAULT_EMAIL_SUBJECT = "Hello from your portfolio"

# Top-level keys of the content document, in render order
SECTION_KEYS = (
    "musician",
    "writer",
    "analysis",
    "art",
    "games",
    "photography",
    "apps",
    "contact",
)


def get_default_document() -> Dict[str, Any]:
    """
    Minimal raw content document.

    Only the site block is populated; every section is absent and therefore
    renders as an empty collection.
    """
    return {"site": {"name": DEFAULT_SITE_NAME, "tagline": ""}}
