"""
Lightbox Controller

Modal image viewer over every gallery image of the page, in page order.
The item list is built once at startup; filtering hides cards but does not
change lightbox navigation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from atelier.contexts.interaction.modal import KeyEvent, ModalScope, cycle_focus
from atelier.contexts.interaction.state import UIState
from atelier.contexts.rendering.sections import SectionKind, SectionView
from atelier.utils.text_processing import filename_from_path

# Focus-trap order of the lightbox controls
CONTROLS = ("lightbox-zoom", "lightbox-prev", "lightbox-next", "lightbox-close", "lightbox-download")
STAGE = "lightbox-stage"


class Zoom(Enum):
    FIT = "fit"
    ACTUAL = "100%"


@dataclass
class LightboxItem:
    src: str
    alt: str = ""
    title: str = ""
    year: str = ""
    filename: str = ""

    @property
    def caption(self) -> str:
        caption = self.title
        if self.year:
            caption += f" · {self.year}"
        if self.filename:
            caption += f" · {self.filename}"
        return caption.strip()


def collect_lightbox_items(views: List[SectionView]) -> List[LightboxItem]:
    """
    Flat list of all gallery images across sections, in render order.

    Each contributing item view gets its ``lightbox_index``. Needs-upload
    placeholders have no image and are skipped.
    """
    items = []
    for view in views:
        if view.kind != SectionKind.GALLERY:
            continue
        for item_view in view.items:
            image = item_view.image
            if image is None:
                continue
            item_view.lightbox_index = len(items)
            large = image.large_src or image.src
            items.append(
                LightboxItem(
                    src=large,
                    alt=image.alt,
                    title=image.title,
                    year=image.year,
                    filename=filename_from_path(large),
                )
            )
    return items


class LightboxController:
    """
    States: closed, or open at ``current_index``.

    Zoom is a two-state toggle independent of the index and resets to fit on
    every open.
    """

    def __init__(self, ui: UIState, items: List[LightboxItem]):
        self.ui = ui
        self.items = list(items)
        self.current_index = 0
        self.is_open = False
        self.zoom = Zoom.FIT
        self._scope = ModalScope(ui.keyboard, ui.focus, self.handle_key)
        self._touch_start: Optional[tuple] = None

    @property
    def current(self) -> Optional[LightboxItem]:
        if self.is_open and 0 <= self.current_index < len(self.items):
            return self.items[self.current_index]
        return None

    @property
    def zoom_button_label(self) -> str:
        return "Fit" if self.zoom == Zoom.ACTUAL else "1:1"

    @property
    def download_name(self) -> str:
        item = self.current
        return (item.filename or "image") if item else ""

    def open(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            return
        self.current_index = index
        self.zoom = Zoom.FIT
        if not self.is_open:
            self._scope.acquire()
            self.is_open = True
        self.ui.focus.focus(CONTROLS[0])

    def close(self) -> None:
        if not self.is_open:
            return
        self.is_open = False
        self._scope.release()

    def show(self, delta: int) -> None:
        if not self.items:
            return
        self.open((self.current_index + delta) % len(self.items))

    def set_zoom_100(self) -> None:
        self.zoom = Zoom.ACTUAL
        self.ui.focus.focus(STAGE)

    def set_zoom_fit(self) -> None:
        self.zoom = Zoom.FIT
        self.ui.focus.focus(STAGE)

    def toggle_zoom(self) -> None:
        if self.zoom == Zoom.ACTUAL:
            self.set_zoom_fit()
        else:
            self.set_zoom_100()

    def handle_key(self, event: KeyEvent) -> None:
        if not self.is_open:
            return
        key = event.key
        if key == "Escape":
            self.close()
        elif key == "ArrowLeft":
            self.show(-1)
        elif key == "ArrowRight":
            self.show(1)
        elif key in ("+", "="):
            self.set_zoom_100()
        elif key in ("-", "_"):
            self.set_zoom_fit()
        elif key == "Tab":
            event.prevent_default()
            cycle_focus(self.ui.focus, CONTROLS, backwards=event.shift)

    def touch_start(self, x: float, y: float) -> None:
        self._touch_start = (x, y)

    def touch_end(self, x: float, y: float) -> None:
        """Navigate on a mostly-horizontal swipe past the threshold."""
        if self._touch_start is None or not self.is_open:
            return
        start_x, start_y = self._touch_start
        self._touch_start = None
        dx = x - start_x
        dy = abs(y - start_y)
        settings = self.ui.settings.lightbox
        if abs(dx) > settings.swipe_min_dx and dy < settings.swipe_max_dy:
            self.show(-1 if dx > 0 else 1)
