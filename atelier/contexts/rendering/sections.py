"""
Section Renderers

Turns each content sub-document into cards (registered in the CardRegistry),
a chip row, and section-specific view data. Dispatch is by section kind: one
handler per kind in ``RENDERERS``.

Missing media never raises. An item without a resolvable media reference
(no file/src, or a legacy driveId not yet migrated) renders as a needs-upload
placeholder and is left out of the playable/navigable subset, but still gets
a card.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional
from urllib.parse import quote

from atelier.contexts.content.content_document import (
    Contact,
    ContentDocument,
    GallerySection,
    Link,
    MusicianSection,
    PostsSection,
    ProjectsSection,
    Track,
    year_label,
)
from atelier.contexts.content.defaults import DEFAULT_EMAIL, DEFAULT_EMAIL_SUBJECT
from atelier.contexts.rendering.cards import Card, CardRegistry
from atelier.contexts.rendering.embeds import EmbedView, embed_view
from atelier.contexts.rendering.logger import log_missing_media, log_section_rendered
from atelier.utils.settings import UISettings
from atelier.utils.text_processing import make_excerpt

NEEDS_UPLOAD_TEXT = "MISSING: upload to CDN"
GALLERY_SIZES = "(min-width: 900px) 33vw, 90vw"


class SectionKind(Enum):
    MUSICIAN = "musician"
    POSTS = "posts"
    GALLERY = "gallery"
    PROJECTS = "projects"
    CONTACT = "contact"


@dataclass(frozen=True)
class SectionSpec:
    key: str
    kind: SectionKind
    label: str


# Render order is DOM order (the lightbox item list follows it)
SECTION_LAYOUT = (
    SectionSpec("musician", SectionKind.MUSICIAN, "Musician"),
    SectionSpec("writer", SectionKind.POSTS, "Writer"),
    SectionSpec("analysis", SectionKind.POSTS, "Game Design Analysis"),
    SectionSpec("art", SectionKind.GALLERY, "Art"),
    SectionSpec("games", SectionKind.PROJECTS, "Video Games"),
    SectionSpec("photography", SectionKind.GALLERY, "Street Photography"),
    SectionSpec("apps", SectionKind.PROJECTS, "Vibe Coding Apps"),
    SectionSpec("contact", SectionKind.CONTACT, "Contact"),
)

SECTION_KINDS: Dict[str, SectionKind] = {spec.key: spec.kind for spec in SECTION_LAYOUT}


def sections_of_kind(kind: SectionKind) -> List[str]:
    return [spec.key for spec in SECTION_LAYOUT if spec.kind == kind]


@dataclass
class Chip:
    """
    Filter control in a section's chip row.

    Attributes:
        label: Displayed text
        value: Tag value ("" for the All/Clear chips)
        role: "tag", "all" (gallery reset) or "clear" (project reset)
    """

    label: str
    value: str = ""
    role: str = "tag"


@dataclass
class ImageView:
    """Gallery image as rendered in the grid and fed to the lightbox."""

    src: str
    large_src: str
    alt: str
    title: str
    year: str
    srcset: str = ""
    sizes: str = ""


@dataclass
class ItemView:
    """
    One rendered item of a section.

    Attributes:
        card: Backing card in the registry
        item: Content record (Track, Post, Work, Project)
        tags: Tags shown on the card's tag row
        needs_upload: Rendered as a needs-upload placeholder
        playable_index: Position in the playlist (tracks only)
        lightbox_index: Position in the lightbox list (gallery images only)
        excerpt: Plain-text excerpt (posts only)
        image: Image view (gallery items with media)
        embed: Embed view (projects only)
    """

    card: Card
    item: Any
    tags: List[str] = field(default_factory=list)
    needs_upload: bool = False
    playable_index: Optional[int] = None
    lightbox_index: Optional[int] = None
    excerpt: str = ""
    image: Optional[ImageView] = None
    embed: Optional[EmbedView] = None


@dataclass
class SectionView:
    """
    Rendered section: its cards, chip row, and section-specific controls.
    """

    key: str
    kind: SectionKind
    label: str
    intro_text: str = ""
    intro_card: Optional[Card] = None
    chips: List[Chip] = field(default_factory=list)
    items: List[ItemView] = field(default_factory=list)
    has_section_search: bool = False
    playable_tracks: List[Track] = field(default_factory=list)
    email: str = ""
    compose_href: str = ""
    links: List[Link] = field(default_factory=list)

    @property
    def cards(self) -> List[Card]:
        cards = [self.intro_card] if self.intro_card else []
        return cards + [item.card for item in self.items]


def _sorted_unique(values: Iterable[str]) -> List[str]:
    return sorted({value for value in values if value})


def _tag_chips(values: Iterable[str]) -> List[Chip]:
    return [Chip(label=tag, value=tag) for tag in _sorted_unique(values)]


def _intro(view: SectionView, registry: CardRegistry, intro: str) -> None:
    if intro:
        view.intro_text = intro
        view.intro_card = registry.add(view.key, "Intro", [], kind="intro")


def render_musician(
    spec: SectionSpec, section: MusicianSection, registry: CardRegistry, settings: UISettings
) -> SectionView:
    """Bio card, year chips, one card per track, and the playable subset."""
    view = SectionView(key=spec.key, kind=spec.kind, label=spec.label, intro_text=section.bio)
    view.intro_card = registry.add(spec.key, "Musician", [], kind="intro")
    view.chips = _tag_chips(year_label(track.year) for track in section.tracks)

    for idx, track in enumerate(section.tracks):
        tags = [t for t in [year_label(track.year)] + [l.label for l in track.links] if t]
        card = registry.add(
            spec.key, track.title, tags, kind="track", item_index=idx, needs_upload=track.needs_upload
        )
        item_view = ItemView(card=card, item=track, tags=tags, needs_upload=track.needs_upload)

        if track.drive_id:
            log_missing_media(spec.key, track.title, idx, "requires a CDN file and removal of driveId.")
        elif not track.file:
            log_missing_media(spec.key, track.title, idx, "is missing an audio file path.")
        else:
            item_view.playable_index = len(view.playable_tracks)
            view.playable_tracks.append(track)

        view.items.append(item_view)

    return view


def render_posts(
    spec: SectionSpec, section: PostsSection, registry: CardRegistry, settings: UISettings
) -> SectionView:
    """Intro, tag chips, per-section search, and one excerpted card per post."""
    view = SectionView(key=spec.key, kind=spec.kind, label=spec.label, has_section_search=True)
    _intro(view, registry, section.intro)
    view.chips = _tag_chips(tag for post in section.items for tag in post.tags)

    for idx, post in enumerate(section.items):
        card = registry.add(spec.key, post.title, post.tags, kind="post", item_index=idx)
        view.items.append(
            ItemView(
                card=card,
                item=post,
                tags=list(post.tags),
                excerpt=make_excerpt(post.html, settings.rendering.excerpt_chars),
            )
        )

    return view


def render_gallery(
    spec: SectionSpec, section: GallerySection, registry: CardRegistry, settings: UISettings
) -> SectionView:
    """Intro, "All" chip plus tag/year chips, and one image card per work."""
    view = SectionView(key=spec.key, kind=spec.kind, label=spec.label)
    _intro(view, registry, section.intro)
    view.chips = [Chip(label="All", role="all")] + _tag_chips(
        [tag for work in section.items for tag in work.tags]
        + [year_label(work.year) for work in section.items]
    )

    for idx, work in enumerate(section.items):
        tags = [t for t in list(work.tags) + [year_label(work.year)] if t]
        card = registry.add(
            spec.key, work.title, tags, kind="work", item_index=idx, needs_upload=work.needs_upload
        )
        item_view = ItemView(card=card, item=work, tags=tags, needs_upload=work.needs_upload)

        if work.drive_id:
            log_missing_media(spec.key, work.title, idx, "requires a CDN image and removal of driveId.")
        elif not work.src:
            log_missing_media(spec.key, work.title, idx, "is missing an image source.")
        else:
            item_view.image = ImageView(
                src=work.src,
                large_src=work.large_src,
                alt=f"{work.title} — {spec.key}",
                title=work.title,
                year=year_label(work.year),
                srcset=", ".join(f"{entry.src} {entry.w}w" for entry in work.srcset),
                sizes=GALLERY_SIZES if work.srcset else "",
            )

        view.items.append(item_view)

    return view


def render_projects(
    spec: SectionSpec, section: ProjectsSection, registry: CardRegistry, settings: UISettings
) -> SectionView:
    """Intro, "Clear filters" chip plus tag/year chips, and one card per project."""
    view = SectionView(key=spec.key, kind=spec.kind, label=spec.label)
    _intro(view, registry, section.intro)
    view.chips = [Chip(label="Clear filters", role="clear")] + _tag_chips(
        [tag for project in section.items for tag in project.tags]
        + [year_label(project.year) for project in section.items]
    )

    for idx, project in enumerate(section.items):
        card_tags = [t for t in list(project.tags) + [year_label(project.year)] if t]
        card = registry.add(
            spec.key,
            project.title,
            card_tags,
            kind="project",
            item_index=idx,
            needs_upload=project.needs_upload,
        )
        if project.needs_upload:
            log_missing_media(spec.key, project.title, idx, "requires a YouTube or Vimeo embed.")

        view.items.append(
            ItemView(
                card=card,
                item=project,
                tags=list(project.tags),
                needs_upload=project.needs_upload,
                embed=embed_view(project.embed, project.title),
            )
        )

    return view


def compose_href(email: str, subject: str = DEFAULT_EMAIL_SUBJECT) -> str:
    return f"mailto:{email}?subject={quote(subject, safe='')}"


def render_contact(
    spec: SectionSpec, section: Contact, registry: CardRegistry, settings: UISettings
) -> SectionView:
    email = section.email or DEFAULT_EMAIL
    view = SectionView(
        key=spec.key,
        kind=spec.kind,
        label=spec.label,
        email=email,
        compose_href=compose_href(email),
        links=list(section.links),
    )
    view.intro_card = registry.add(spec.key, "Contact", [], kind="contact")
    return view


RENDERERS: Dict[SectionKind, Callable[..., SectionView]] = {
    SectionKind.MUSICIAN: render_musician,
    SectionKind.POSTS: render_posts,
    SectionKind.GALLERY: render_gallery,
    SectionKind.PROJECTS: render_projects,
    SectionKind.CONTACT: render_contact,
}


def render_section(
    spec: SectionSpec, document: ContentDocument, registry: CardRegistry, settings: UISettings
) -> SectionView:
    """
    Render one section of the document.

    Args:
        spec: Section key, kind and label
        document: Loaded content document
        registry: Card registry to populate
        settings: UI settings (excerpt length)

    Returns:
        SectionView for the presentation layer and controllers
    """
    renderer = RENDERERS[spec.kind]
    view = renderer(spec, getattr(document, spec.key), registry, settings)
    log_section_rendered(spec.key, spec.kind.value, len(view.cards), len(view.chips))
    return view


def render_all_sections(
    document: ContentDocument, registry: CardRegistry, settings: UISettings
) -> List[SectionView]:
    """Render every section exactly once, in layout order."""
    return [render_section(spec, document, registry, settings) for spec in SECTION_LAYOUT]
