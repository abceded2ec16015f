"""
Rendering Context

Responsibilities:
- Turns content sub-documents into cards, chip rows and section views
- Maintains the flat card registry queried by filtering
- Sanitizes rich text for the reader
- Projects the card table to HTML through Jinja2 templates

Owns: Card registry, section dispatch by kind, sanitizer, templates
Never: Decides visibility or holds modal state
"""

from atelier.contexts.rendering.cards import Card, CardRegistry
from atelier.contexts.rendering.sanitizer import sanitize_html
from atelier.contexts.rendering.sections import (
    SECTION_LAYOUT,
    Chip,
    ItemView,
    SectionKind,
    SectionSpec,
    SectionView,
    render_all_sections,
    render_section,
)

__all__ = [
    # Card registry
    "Card",
    "CardRegistry",
    # Section rendering
    "SECTION_LAYOUT",
    "SectionKind",
    "SectionSpec",
    "SectionView",
    "ItemView",
    "Chip",
    "render_section",
    "render_all_sections",
    # Sanitization
    "sanitize_html",
]
