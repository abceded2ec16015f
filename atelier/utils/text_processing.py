"""Text helpers shared by renderers and controllers."""

import math
import re

from bs4 import BeautifulSoup


def make_excerpt(html: str, max_chars: int = 200) -> str:
    """
    Plain-text excerpt of a rich-text fragment.

    Markup and script/style content are dropped, whitespace collapsed, and text longer than ``max_chars``
    is cut and suffixed with an ellipsis.

    Examples:
        >>> make_excerpt("<p>Hello <b>world</b></p>")
        'Hello world'
        >>> make_excerpt("abcdef", 3)
        'abc…'
    """
    soup = BeautifulSoup(html or "", "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    text = soup.get_text()
    text = re.sub(r"\s+", " ", text).strip()
    if len(text) > max_chars:
        return text[:max_chars].rstrip() + "…"
    return text


def format_time(seconds: float) -> str:
    """
    Format a playback position as ``m:ss``.

    Negative, NaN and infinite values render as ``0:00``.
    """
    if seconds is None or not math.isfinite(seconds):
        seconds = 0
    total = max(0, int(seconds))
    minutes, remainder = divmod(total, 60)
    return f"{minutes}:{remainder:02d}"


def filename_from_path(path: str) -> str:
    """Last path segment of a URL or relative path."""
    return (path or "").rstrip("/").split("/")[-1]
