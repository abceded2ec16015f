"""
Reader Controller

Modal paginated viewer over a section's posts in authoring order (filters do
not apply). Scroll offsets are remembered per ``section:index`` for the
session: leaving an item always records where the reader was.
"""

from typing import Dict, List, Optional

from atelier.contexts.content.content_document import Post
from atelier.contexts.interaction.modal import KeyEvent, ModalScope
from atelier.contexts.interaction.state import UIState
from atelier.contexts.rendering.sanitizer import sanitize_html

READER_BODY = "reader-body"


class ReaderController:
    def __init__(self, ui: UIState):
        self.ui = ui
        self.section = ""
        self.items: List[Post] = []
        self.index = 0
        self.is_open = False
        self.title = ""
        self.body_html = ""
        self.scroll_top = 0.0
        self.scroll_memory: Dict[str, float] = {}
        self._scope = ModalScope(ui.keyboard, ui.focus, self.handle_key)

    @property
    def _key(self) -> str:
        return f"{self.section}:{self.index}"

    @property
    def current(self) -> Optional[Post]:
        if self.is_open and self.items:
            return self.items[self.index]
        return None

    def open(self, section: str, items: List[Post], index: int = 0) -> None:
        """
        Open the reader on ``items[index]`` of ``section``.

        Args:
            section: Section key the items belong to
            items: Full, unfiltered item list of the section
            index: Item to show first
        """
        if not items:
            return
        if self.is_open:
            self.record_scroll()
        self.section = section
        self.items = list(items)
        self.show(max(0, index))
        if not self.is_open:
            self._scope.acquire()
            self.is_open = True
        self.ui.focus.focus(READER_BODY)

    def show(self, index: int) -> None:
        """Render the item at ``index`` (circular) and restore its scroll offset."""
        if not self.items:
            return
        self.index = index % len(self.items)
        post = self.items[self.index]
        self.title = post.title or ""
        self.body_html = sanitize_html(post.html or "")
        self.scroll_top = self.scroll_memory.get(self._key, 0.0)

    def scroll_to(self, offset: float) -> None:
        self.scroll_top = max(0.0, float(offset))

    def record_scroll(self) -> None:
        self.scroll_memory[self._key] = self.scroll_top

    def next(self) -> None:
        self.record_scroll()
        self.show(self.index + 1)

    def previous(self) -> None:
        self.record_scroll()
        self.show(self.index - 1)

    def close(self) -> None:
        if not self.is_open:
            return
        self.record_scroll()
        self.is_open = False
        self._scope.release()

    def handle_key(self, event: KeyEvent) -> None:
        if not self.is_open:
            return
        if event.key == "Escape":
            event.prevent_default()
            self.close()
        elif event.key == "ArrowLeft":
            event.prevent_default()
            self.previous()
        elif event.key == "ArrowRight":
            event.prevent_default()
            self.next()
