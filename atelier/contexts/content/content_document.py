"""
Content Document Structure

Defines the structured representation of the portfolio content document.
This structure is the interface between the Content and Rendering contexts.

Every ``from_dict`` is tolerant: absent keys become empty strings or empty
collections, and list entries that are not objects are skipped. Malformed
content must never raise, only render as a visible gap.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from atelier.contexts.content.defaults import DEFAULT_SITE_NAME
from atelier.contexts.content.logger import _log_warning

Year = Union[int, str, None]


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _records(value: Any, where: str) -> List[Dict[str, Any]]:
    """Object entries of a list, skipping anything else."""
    if not isinstance(value, list):
        return []
    records = []
    for i, entry in enumerate(value):
        if isinstance(entry, dict):
            records.append(entry)
        else:
            _log_warning(f"Skipping malformed entry {where}[{i}]: {entry!r}")
    return records


def _tags(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(tag) for tag in value if tag is not None]


def year_label(year: Year) -> str:
    """Stringified year, empty when absent."""
    return _as_str(year) if year not in (None, "", 0) else ""


@dataclass
class Link:
    label: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Link":
        return cls(label=_as_str(data.get("label")), url=_as_str(data.get("url")))


def _links(value: Any, where: str) -> List[Link]:
    return [Link.from_dict(entry) for entry in _records(value, where)]


@dataclass
class Site:
    name: str = DEFAULT_SITE_NAME
    tagline: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Site":
        return cls(
            name=_as_str(data.get("name")) or DEFAULT_SITE_NAME,
            tagline=_as_str(data.get("tagline")),
        )


@dataclass
class Track:
    """
    Audio track of the musician section.

    Attributes:
        title: Track title
        file: Audio file path or URL (empty when not uploaded)
        year: Release year
        links: External links (streaming services, etc.)
        drive_id: Legacy external-storage reference not yet migrated to the CDN
    """

    title: str = ""
    file: str = ""
    year: Year = None
    links: List[Link] = field(default_factory=list)
    drive_id: str = ""

    @property
    def needs_upload(self) -> bool:
        return bool(self.drive_id) or not self.file

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Track":
        return cls(
            title=_as_str(data.get("title")),
            file=_as_str(data.get("file")),
            year=data.get("year"),
            links=_links(data.get("links"), "track.links"),
            drive_id=_as_str(data.get("driveId")),
        )


@dataclass
class Post:
    """Text post or essay with rich-text body."""

    title: str = ""
    date: str = ""
    html: str = ""
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        return cls(
            title=_as_str(data.get("title")),
            date=_as_str(data.get("date")),
            html=_as_str(data.get("html")),
            tags=_tags(data.get("tags")),
        )


@dataclass
class SrcsetEntry:
    src: str
    w: int


@dataclass
class Work:
    """
    Gallery item (art work or photo).

    Attributes:
        srcset: Responsive variants ordered by ascending width
    """

    title: str = ""
    year: Year = None
    src: str = ""
    srcset: List[SrcsetEntry] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    drive_id: str = ""

    @property
    def needs_upload(self) -> bool:
        return bool(self.drive_id) or not self.src

    @property
    def large_src(self) -> str:
        """Largest responsive variant, falling back to ``src``."""
        return self.srcset[-1].src if self.srcset else self.src

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Work":
        srcset = []
        raw_srcset = data.get("srcset")
        if isinstance(raw_srcset, list):
            for entry in raw_srcset:
                if not (isinstance(entry, dict) and entry.get("src") and entry.get("w")):
                    continue
                try:
                    width = int(entry["w"])
                except (TypeError, ValueError, OverflowError):
                    _log_warning(f"Skipping srcset entry with invalid width: {entry!r}")
                    continue
                srcset.append(SrcsetEntry(src=_as_str(entry["src"]), w=width))
        return cls(
            title=_as_str(data.get("title")),
            year=data.get("year"),
            src=_as_str(data.get("src")),
            srcset=srcset,
            tags=_tags(data.get("tags")),
            drive_id=_as_str(data.get("driveId")),
        )


@dataclass
class Embed:
    """Video embed reference (youtube, vimeo, cfstream, or legacy gdrive)."""

    type: str = ""
    id: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Embed":
        return cls(
            type=_as_str(data.get("type")),
            id=_as_str(data.get("id")),
            url=_as_str(data.get("url")),
        )


@dataclass
class Project:
    title: str = ""
    year: Year = None
    thumb: str = ""
    summary: str = ""
    tags: List[str] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    embed: Optional[Embed] = None

    @property
    def needs_upload(self) -> bool:
        return self.embed is not None and self.embed.type == "gdrive"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        embed = data.get("embed")
        return cls(
            title=_as_str(data.get("title")),
            year=data.get("year"),
            thumb=_as_str(data.get("thumb")),
            summary=_as_str(data.get("summary")),
            tags=_tags(data.get("tags")),
            links=_links(data.get("links"), "project.links"),
            embed=Embed.from_dict(embed) if isinstance(embed, dict) else None,
        )


@dataclass
class MusicianSection:
    bio: str = ""
    tracks: List[Track] = field(default_factory=list)


@dataclass
class PostsSection:
    intro: str = ""
    items: List[Post] = field(default_factory=list)


@dataclass
class GallerySection:
    intro: str = ""
    items: List[Work] = field(default_factory=list)


@dataclass
class ProjectsSection:
    intro: str = ""
    items: List[Project] = field(default_factory=list)


@dataclass
class Contact:
    email: str = ""
    links: List[Link] = field(default_factory=list)


@dataclass
class ContentDocument:
    """
    Structured representation of the complete content document.

    Loaded once per session and treated as immutable by the engine.
    """

    site: Site = field(default_factory=Site)
    musician: MusicianSection = field(default_factory=MusicianSection)
    writer: PostsSection = field(default_factory=PostsSection)
    analysis: PostsSection = field(default_factory=PostsSection)
    art: GallerySection = field(default_factory=GallerySection)
    games: ProjectsSection = field(default_factory=ProjectsSection)
    photography: GallerySection = field(default_factory=GallerySection)
    apps: ProjectsSection = field(default_factory=ProjectsSection)
    contact: Contact = field(default_factory=Contact)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ContentDocument":
        """
        Build a document from parsed JSON, substituting empty sections for
        absent or malformed keys.

        Args:
            raw: Parsed content document (top-level object)

        Returns:
            ContentDocument instance
        """
        raw = _as_dict(raw)

        musician = _as_dict(raw.get("musician"))
        writer = _as_dict(raw.get("writer"))
        analysis = _as_dict(raw.get("analysis"))
        art = _as_dict(raw.get("art"))
        games = _as_dict(raw.get("games"))
        photography = _as_dict(raw.get("photography"))
        apps = _as_dict(raw.get("apps"))
        contact = _as_dict(raw.get("contact"))

        return cls(
            site=Site.from_dict(_as_dict(raw.get("site"))),
            musician=MusicianSection(
                bio=_as_str(musician.get("bio")),
                tracks=[
                    Track.from_dict(t) for t in _records(musician.get("tracks"), "musician.tracks")
                ],
            ),
            writer=PostsSection(
                intro=_as_str(writer.get("intro")),
                items=[Post.from_dict(p) for p in _records(writer.get("posts"), "writer.posts")],
            ),
            analysis=PostsSection(
                intro=_as_str(analysis.get("intro")),
                items=[
                    Post.from_dict(p) for p in _records(analysis.get("essays"), "analysis.essays")
                ],
            ),
            art=GallerySection(
                intro=_as_str(art.get("intro")),
                items=[Work.from_dict(w) for w in _records(art.get("works"), "art.works")],
            ),
            games=ProjectsSection(
                intro=_as_str(games.get("intro")),
                items=[
                    Project.from_dict(p) for p in _records(games.get("projects"), "games.projects")
                ],
            ),
            photography=GallerySection(
                intro=_as_str(photography.get("intro")),
                items=[
                    Work.from_dict(w)
                    for w in _records(photography.get("photos"), "photography.photos")
                ],
            ),
            apps=ProjectsSection(
                intro=_as_str(apps.get("intro")),
                items=[
                    Project.from_dict(p) for p in _records(apps.get("projects"), "apps.projects")
                ],
            ),
            contact=Contact(
                email=_as_str(contact.get("email")),
                links=_links(contact.get("links"), "contact.links"),
            ),
        )

    def section_counts(self) -> Dict[str, int]:
        """Number of items per section, for logging."""
        return {
            "musician": len(self.musician.tracks),
            "writer": len(self.writer.items),
            "analysis": len(self.analysis.items),
            "art": len(self.art.items),
            "games": len(self.games.items),
            "photography": len(self.photography.items),
            "apps": len(self.apps.items),
            "contact": len(self.contact.links),
        }
