"""Video embed descriptors for project details."""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

from atelier.contexts.content.content_document import Embed

IFRAME_ALLOW_FULL = (
    "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"
)
IFRAME_ALLOW_VIMEO = "autoplay; fullscreen; picture-in-picture"

GDRIVE_PLACEHOLDER = "Replace with YouTube/Vimeo"


@dataclass
class EmbedView:
    """
    Renderable embed.

    Attributes:
        kind: Embed type ("youtube", "vimeo", "cfstream", "gdrive")
        src: Iframe source (empty for placeholders)
        title: Iframe title
        allow: Iframe permissions policy
        placeholder: Text shown instead of an iframe (needs-upload embeds)
    """

    kind: str
    src: str = ""
    title: str = ""
    allow: str = ""
    placeholder: str = ""

    @property
    def is_placeholder(self) -> bool:
        return bool(self.placeholder)


def embed_view(embed: Optional[Embed], title: str = "") -> Optional[EmbedView]:
    """
    Describe how an embed renders.

    Returns None for absent embeds, unknown types, and youtube/vimeo embeds
    without an id.
    """
    if embed is None:
        return None

    kind = embed.type
    if kind == "youtube" and embed.id:
        return EmbedView(
            kind=kind,
            src=f"https://www.youtube.com/embed/{quote(embed.id, safe='')}",
            title=title or "YouTube video",
            allow=IFRAME_ALLOW_FULL,
        )
    if kind == "vimeo" and embed.id:
        return EmbedView(
            kind=kind,
            src=f"https://player.vimeo.com/video/{quote(embed.id, safe='')}",
            title=title or "Vimeo video",
            allow=IFRAME_ALLOW_VIMEO,
        )
    if kind == "cfstream":
        src = embed.url or f"https://iframe.videodelivery.net/{quote(embed.id, safe='')}"
        return EmbedView(
            kind=kind, src=src, title=title or "Cloudflare Stream", allow=IFRAME_ALLOW_FULL
        )
    if kind == "gdrive":
        return EmbedView(kind=kind, placeholder=GDRIVE_PLACEHOLDER)
    return None
