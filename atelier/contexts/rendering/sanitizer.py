"""
Rich-text sanitizer for the reader.

Allow-list filter over parsed HTML:
- Allowed elements keep their children and lose every attribute
- Links are forced to open in a new context with ``rel="noopener noreferrer"``
  and keep only ``href``/``target``/``rel``
- script/style are deleted with their content, comments and declarations are deleted
- Any other element is unwrapped: its (sanitized) children are promoted in its place
"""

from bs4 import BeautifulSoup, Comment, Tag
from bs4.element import Declaration, Doctype, ProcessingInstruction

ALLOWED_TAGS = frozenset(
    {"a", "p", "h1", "h2", "h3", "ul", "ol", "li", "blockquote", "code", "pre", "strong", "em", "br"}
)

REMOVED_WITH_CONTENT = frozenset({"script", "style"})

LINK_TARGET = "_blank"
LINK_REL = "noopener noreferrer"

_DISCARDED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def _sanitize_link(tag: Tag) -> None:
    href = tag.get("href") or "#"
    tag.attrs = {"href": href, "target": LINK_TARGET, "rel": LINK_REL}


def _walk(node: Tag) -> None:
    for child in list(node.children):
        if isinstance(child, _DISCARDED_STRINGS):
            child.extract()
            continue
        if not isinstance(child, Tag):
            continue

        name = child.name.lower()
        if name in REMOVED_WITH_CONTENT:
            child.decompose()
            continue

        # Sanitize the subtree first so promoted children are already clean
        _walk(child)

        if name not in ALLOWED_TAGS:
            child.unwrap()
        elif name == "a":
            _sanitize_link(child)
        else:
            child.attrs = {}


def sanitize_html(html: str) -> str:
    """
    Sanitize a rich-text fragment for rendering.

    Args:
        html: Untrusted HTML fragment (malformed markup is parsed best-effort)

    Returns:
        Sanitized HTML string

    Examples:
        >>> sanitize_html("<script>alert(1)</script><p>ok</p>")
        '<p>ok</p>'
        >>> sanitize_html("<div><b>hi</b></div>")
        'hi'
    """
    soup = BeautifulSoup(html or "", "html.parser")
    _walk(soup)
    return soup.decode()
