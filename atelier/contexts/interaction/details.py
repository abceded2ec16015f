"""
Details Carousel

Modal viewer over a project list. Navigation is anchored to the projects
that were visible (per the last filter pass) when the modal opened, so
hidden projects are skipped. Unlike the lightbox and reader, this viewer
follows filtering.

The visible subset is a snapshot taken at open time. When no project is
visible, the carousel holds only the requested project and navigation is
frozen.
"""

from typing import List, Optional

from atelier.contexts.content.content_document import Project
from atelier.contexts.interaction.modal import KeyEvent, ModalScope
from atelier.contexts.interaction.state import UIState
from atelier.contexts.rendering.embeds import EmbedView, embed_view

DETAILS_CLOSE = "details-close"


class DetailsCarousel:
    def __init__(self, ui: UIState):
        self.ui = ui
        self.section = ""
        self.items: List[Project] = []
        self.visible_indices: List[int] = []
        self.position = 0
        self.is_open = False
        self._scope = ModalScope(ui.keyboard, ui.focus, self.handle_key)

    def visible_project_indices(self, section: str) -> List[int]:
        """Item indices of the section's project cards that are currently visible."""
        return [
            card.item_index
            for card in self.ui.registry.visible_in_section(section, kind="project")
            if card.item_index is not None
        ]

    def open(self, section: str, items: List[Project], start_index: int) -> None:
        if not 0 <= start_index < len(items):
            return
        self.section = section
        self.items = list(items)
        visible = self.visible_project_indices(section)
        self.visible_indices = visible or [start_index]
        self.position = self.visible_indices.index(start_index) if start_index in self.visible_indices else 0
        if not self.is_open:
            self._scope.acquire()
            self.is_open = True
        self.ui.focus.focus(DETAILS_CLOSE)

    @property
    def navigation_enabled(self) -> bool:
        return len(self.visible_indices) > 1

    @property
    def current_index(self) -> Optional[int]:
        if not self.is_open or not self.visible_indices:
            return None
        return self.visible_indices[self.position]

    @property
    def current(self) -> Optional[Project]:
        index = self.current_index
        return self.items[index] if index is not None else None

    @property
    def current_embed(self) -> Optional[EmbedView]:
        project = self.current
        return embed_view(project.embed, project.title) if project else None

    def _move(self, delta: int) -> None:
        if not self.is_open or not self.navigation_enabled:
            return
        self.position = (self.position + delta) % len(self.visible_indices)

    def next(self) -> None:
        self._move(1)

    def previous(self) -> None:
        self._move(-1)

    def close(self) -> None:
        """Close from any exit path (button, outside click, Escape)."""
        if not self.is_open:
            return
        self.is_open = False
        self._scope.release()

    def handle_key(self, event: KeyEvent) -> None:
        if not self.is_open:
            return
        if event.key == "Escape":
            self.close()
        elif event.key == "ArrowLeft":
            event.prevent_default()
            self.previous()
        elif event.key == "ArrowRight":
            event.prevent_default()
            self.next()
