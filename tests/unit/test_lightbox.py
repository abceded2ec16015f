"""
Unit tests for the lightbox controller.

Tests navigation, zoom, keyboard scoping and swipe handling in
atelier.contexts.interaction.lightbox.
"""

import pytest

from atelier.contexts.interaction.lightbox import (
    CONTROLS,
    STAGE,
    LightboxController,
    LightboxItem,
    Zoom,
    collect_lightbox_items,
)
from atelier.contexts.rendering.cards import CardRegistry
from atelier.contexts.rendering.sections import render_all_sections
from atelier.utils.settings import UISettings


@pytest.fixture
def items():
    return [
        LightboxItem(src=f"https://cdn.example.com/{name}.jpg", title=name.title(), filename=f"{name}.jpg")
        for name in ("heron", "storm", "crosswalk", "harbor")
    ]


@pytest.fixture
def lightbox(ui, items):
    ui.focus.focus("thumb-heron")
    return LightboxController(ui, items)


@pytest.mark.unit
class TestCollectLightboxItems:
    """Tests for collect_lightbox_items function."""

    def test_gallery_images_in_page_order(self, sample_document):
        views = render_all_sections(sample_document, CardRegistry(), UISettings())
        items = collect_lightbox_items(views)

        assert [i.title for i in items] == ["Heron", "Crosswalk"]
        assert items[0].src == "assets/art/heron-1600.jpg"
        assert items[0].filename == "heron-1600.jpg"
        assert items[0].caption == "Heron · 2021 · heron-1600.jpg"

    def test_lightbox_index_assigned(self, sample_document):
        views = render_all_sections(sample_document, CardRegistry(), UISettings())
        collect_lightbox_items(views)
        by_key = {v.key: v for v in views}

        assert [i.lightbox_index for i in by_key["art"].items] == [0, None]
        assert by_key["photography"].items[0].lightbox_index == 1


@pytest.mark.unit
class TestLightboxNavigation:
    """Tests for open/close/show."""

    def test_open_resets_zoom_and_focuses_first_control(self, lightbox, ui):
        lightbox.zoom = Zoom.ACTUAL
        lightbox.open(2)
        assert lightbox.is_open
        assert lightbox.current.title == "Crosswalk"
        assert lightbox.zoom == Zoom.FIT
        assert ui.focus.active == CONTROLS[0]

    def test_open_out_of_range_ignored(self, lightbox):
        lightbox.open(10)
        assert not lightbox.is_open

    @pytest.mark.parametrize("start", range(4))
    @pytest.mark.parametrize("delta", [1, -1])
    def test_show_composed_len_times_is_identity(self, lightbox, start, delta):
        lightbox.open(start)
        for _ in range(len(lightbox.items)):
            lightbox.show(delta)
        assert lightbox.current_index == start

    def test_show_wraps(self, lightbox):
        lightbox.open(0)
        lightbox.show(-1)
        assert lightbox.current_index == 3

    def test_close_restores_focus_and_unbinds(self, lightbox, ui):
        lightbox.open(0)
        assert ui.keyboard.num_bound == 1
        lightbox.close()
        assert ui.keyboard.num_bound == 0
        assert ui.focus.active == "thumb-heron"

    def test_reopen_binds_once(self, lightbox, ui):
        lightbox.open(0)
        lightbox.open(1)
        assert ui.keyboard.num_bound == 1

    def test_closed_lightbox_ignores_keys(self, lightbox, ui):
        lightbox.open(0)
        lightbox.close()
        ui.keyboard.press("ArrowRight")
        assert lightbox.current_index == 0

    def test_download_name(self, lightbox):
        assert lightbox.download_name == ""
        lightbox.open(1)
        assert lightbox.download_name == "storm.jpg"


@pytest.mark.unit
class TestLightboxKeys:
    """Tests for keyboard handling while open."""

    def test_arrows_navigate(self, lightbox, ui):
        lightbox.open(0)
        ui.keyboard.press("ArrowRight")
        ui.keyboard.press("ArrowRight")
        ui.keyboard.press("ArrowLeft")
        assert lightbox.current_index == 1

    def test_escape_closes(self, lightbox, ui):
        lightbox.open(0)
        ui.keyboard.press("Escape")
        assert not lightbox.is_open

    @pytest.mark.parametrize("key", ["+", "="])
    def test_zoom_in_keys(self, lightbox, ui, key):
        lightbox.open(0)
        ui.keyboard.press(key)
        assert lightbox.zoom == Zoom.ACTUAL
        assert ui.focus.active == STAGE

    @pytest.mark.parametrize("key", ["-", "_"])
    def test_zoom_out_keys(self, lightbox, ui, key):
        lightbox.open(0)
        lightbox.set_zoom_100()
        ui.keyboard.press(key)
        assert lightbox.zoom == Zoom.FIT

    def test_toggle_zoom_label(self, lightbox):
        lightbox.open(0)
        assert lightbox.zoom_button_label == "1:1"
        lightbox.toggle_zoom()
        assert lightbox.zoom_button_label == "Fit"
        lightbox.toggle_zoom()
        assert lightbox.zoom == Zoom.FIT

    def test_tab_traps_focus(self, lightbox, ui):
        lightbox.open(0)
        ui.focus.focus(CONTROLS[-1])
        event = ui.keyboard.press("Tab")
        assert event.default_prevented
        assert ui.focus.active == CONTROLS[0]

    def test_shift_tab_wraps_backwards(self, lightbox, ui):
        lightbox.open(0)
        ui.keyboard.press("Tab", shift=True)
        assert ui.focus.active == CONTROLS[-1]


@pytest.mark.unit
class TestLightboxSwipe:
    """Tests for touch navigation."""

    def test_swipe_left_goes_next(self, lightbox):
        lightbox.open(0)
        lightbox.touch_start(200, 100)
        lightbox.touch_end(100, 110)
        assert lightbox.current_index == 1

    def test_swipe_right_goes_previous(self, lightbox):
        lightbox.open(0)
        lightbox.touch_start(100, 100)
        lightbox.touch_end(200, 100)
        assert lightbox.current_index == 3

    @pytest.mark.parametrize("end", [(130, 100), (300, 200)])
    def test_short_or_vertical_swipe_ignored(self, lightbox, end):
        lightbox.open(0)
        lightbox.touch_start(100, 100)
        lightbox.touch_end(*end)
        assert lightbox.current_index == 0
