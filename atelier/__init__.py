"""
ATELIER - Artist portfolio rendering and interaction engine

Turns a single structured content document into searchable, filterable card
collections and drives the stateful widgets of a personal portfolio site.

Architecture:
- Content Context: Content document loading, defaults, asset reference checks
- Rendering Context: Card registry, section renderers, sanitizer, HTML projection
- Interaction Context: Filter engine, playlist, lightbox, reader, details carousel
"""

__version__ = "0.1.0"
