"""
Portfolio Session

Startup and wiring for one page session:
1. Resolve the theme
2. Load the content document (default document on failure)
3. Render every section once, populating the card registry
4. Restore persisted gallery/project filters and run the first filter pass
5. Collect lightbox images and restore the playlist position

Controllers share one UIState; the session only routes user gestures to them.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from atelier.contexts.content.content_document import ContentDocument
from atelier.contexts.content.loader import load_content
from atelier.contexts.interaction.audio import AudioElement
from atelier.contexts.interaction.contact import ContactController, Toast
from atelier.contexts.interaction.details import DetailsCarousel
from atelier.contexts.interaction.filters import FilterEngine
from atelier.contexts.interaction.lightbox import LightboxController, collect_lightbox_items
from atelier.contexts.interaction.logger import log_session_started
from atelier.contexts.interaction.playlist import PlaylistController
from atelier.contexts.interaction.reader import ReaderController
from atelier.contexts.interaction.search import SearchBox, SectionSearchBox
from atelier.contexts.interaction.state import UIState
from atelier.contexts.interaction.theme import ThemeController
from atelier.contexts.rendering.sections import (
    Chip,
    ItemView,
    SectionKind,
    SectionView,
    render_all_sections,
)


class PortfolioSession:
    """
    Example:
        session = PortfolioSession().start("content/content.json")
        session.filters.toggle_multi_tag("games", "2023")
        session.open_project("games", 1)
    """

    def __init__(
        self,
        ui: Optional[UIState] = None,
        audio: Optional[AudioElement] = None,
        prefers_dark: bool = False,
    ):
        self.ui = ui or UIState()
        self.audio = audio or AudioElement()
        self.document: Optional[ContentDocument] = None
        self.views: List[SectionView] = []

        self.theme = ThemeController(self.ui, prefers_dark=prefers_dark)
        self.filters = FilterEngine(self.ui)
        self.search = SearchBox(self.ui, self.filters)
        self.section_search: Dict[str, SectionSearchBox] = {}
        self.reader = ReaderController(self.ui)
        self.details = DetailsCarousel(self.ui)
        self.toast = Toast(self.ui)
        self.lightbox: Optional[LightboxController] = None
        self.playlist: Optional[PlaylistController] = None
        self.contact: Optional[ContactController] = None

    def start(self, source: Union[Path, str, None] = None) -> "PortfolioSession":
        """Resolve the theme, load the content document and build the page."""
        self.theme.init()
        return self.build(load_content(source))

    def build(self, document: ContentDocument) -> "PortfolioSession":
        """Render all sections from an already-loaded document."""
        self.document = document
        self.views = render_all_sections(document, self.ui.registry, self.ui.settings)

        for view in self.views:
            self.filters.restore_persisted(view.key)
            if view.has_section_search:
                self.section_search[view.key] = SectionSearchBox(view.key, self.filters)
        self.filters.recompute()

        self.lightbox = LightboxController(self.ui, collect_lightbox_items(self.views))

        self.playlist = PlaylistController(self.ui, self.view("musician").playable_tracks, self.audio)
        self.playlist.restore()

        self.contact = ContactController(self.ui, self.view("contact").email, self.toast)

        log_session_started(
            len(self.views), len(self.ui.registry), len(self.lightbox.items), len(self.playlist.tracks)
        )
        return self

    # Lookup

    def view(self, section: str) -> SectionView:
        for view in self.views:
            if view.key == section:
                return view
        raise KeyError(f"Unknown section: {section}")

    def item_view(self, section: str, item_index: int) -> ItemView:
        return self.view(section).items[item_index]

    # Chips and tags

    def click_chip(self, section: str, chip: Chip) -> None:
        """Route a chip-row click by chip role and section kind."""
        kind = self.view(section).kind
        if chip.role in ("all", "clear"):
            self.filters.clear_section(section)
        elif kind == SectionKind.PROJECTS:
            self.filters.toggle_multi_tag(section, chip.value)
        else:
            self.filters.set_single_tag(section, chip.value)

    def click_tag(self, section: str, tag: str) -> None:
        """Route a click on a card's tag button."""
        if self.view(section).kind == SectionKind.PROJECTS:
            self.filters.toggle_multi_tag(section, tag)
        else:
            self.filters.set_single_tag(section, tag)

    def chip_active(self, section: str, chip: Chip) -> bool:
        kind = self.view(section).kind
        if chip.role == "all":
            return not self.filters.active_single_tag(section)
        if chip.role == "clear":
            return False
        if kind == SectionKind.PROJECTS:
            return chip.value in self.filters.active_multi_tags(section)
        return chip.value == self.filters.active_single_tag(section)

    def show_clear_chip(self, section: str) -> bool:
        return section in self.filters.clear_chip_sections()

    # Modal openers

    def open_image(self, section: str, item_index: int) -> None:
        lightbox_index = self.item_view(section, item_index).lightbox_index
        if lightbox_index is not None:
            self.lightbox.open(lightbox_index)

    def open_post(self, section: str, item_index: int) -> None:
        view = self.view(section)
        self.reader.open(section, [item.item for item in view.items], item_index)

    def open_project(self, section: str, item_index: int) -> None:
        view = self.view(section)
        self.details.open(section, [item.item for item in view.items], item_index)
