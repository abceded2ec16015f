"""
Content Context

Responsibilities:
- Loads the content document (with default fallback)
- Provides the structured content data model
- Checks local asset references

Owns: Content document parsing and defaults
Never: Renders cards or holds UI state
"""

from atelier.contexts.content.content_document import (
    Contact,
    ContentDocument,
    Embed,
    GallerySection,
    Link,
    MusicianSection,
    Post,
    PostsSection,
    Project,
    ProjectsSection,
    Site,
    SrcsetEntry,
    Track,
    Work,
)
from atelier.contexts.content.links import collect_local_references, find_missing_assets
from atelier.contexts.content.loader import default_document, load_content

__all__ = [
    # Loading
    "load_content",
    "default_document",
    # Asset checks
    "collect_local_references",
    "find_missing_assets",
    # Data structure classes
    "ContentDocument",
    "Site",
    "MusicianSection",
    "PostsSection",
    "GallerySection",
    "ProjectsSection",
    "Contact",
    "Track",
    "Post",
    "Work",
    "SrcsetEntry",
    "Project",
    "Embed",
    "Link",
]
