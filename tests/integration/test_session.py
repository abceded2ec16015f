"""
Integration tests for a full portfolio session.

Tests: content.json → session startup → filters, modals and playlist wired together.
"""

import json

import pytest

from atelier.contexts.interaction.audio import AudioElement
from atelier.contexts.interaction.contact import Clipboard
from atelier.contexts.interaction.playlist import PlaybackState
from atelier.contexts.interaction.session import PortfolioSession
from atelier.contexts.interaction.state import UIState
from atelier.contexts.interaction.storage import JsonFileStore, KeyValueStore
from atelier.contexts.rendering.sections import Chip


def _visible(session, section):
    return [c.title for c in session.ui.registry.in_section(section) if c.visible and c.kind != "intro"]


@pytest.fixture
def session(content_file):
    return PortfolioSession().start(content_file)


@pytest.mark.integration
def test_needs_upload_work_excluded_from_lightbox(tmp_path):
    """A gallery work without src or driveId renders one placeholder and no lightbox entry."""
    path = tmp_path / "content.json"
    path.write_text(json.dumps({"art": {"works": [{"title": "Lost", "year": 2020}]}}))

    session = PortfolioSession().start(path)

    cards = [c for c in session.ui.registry.in_section("art") if c.kind == "work"]
    assert len(cards) == 1
    assert cards[0].needs_upload
    assert session.lightbox.items == []
    session.open_image("art", 0)
    assert not session.lightbox.is_open


@pytest.mark.integration
def test_multi_tag_filter_on_projects(session):
    """Selecting {"2023"} hides the ["2022"] project and shows the ["2023", "demo"] one."""
    session.click_chip("games", Chip(label="2023", value="2023"))

    assert session.filters.active_multi_tags("games") == frozenset({"2023"})
    assert _visible(session, "games") == ["Tide Pool"]
    assert _visible(session, "apps") == ["Tiny Timer"]


@pytest.mark.integration
def test_details_follow_filtering(session):
    session.click_tag("games", "2023")
    session.open_project("games", 1)

    assert session.details.current.title == "Tide Pool"
    assert not session.details.navigation_enabled


@pytest.mark.integration
def test_gallery_chip_and_all_reset(session):
    session.click_chip("art", Chip(label="ink", value="ink"))
    assert _visible(session, "art") == ["Heron"]
    assert session.chip_active("art", Chip(label="ink", value="ink"))

    session.click_chip("art", Chip(label="All", role="all"))
    assert _visible(session, "art") == ["Heron", "Untitled"]
    assert session.chip_active("art", Chip(label="All", role="all"))


@pytest.mark.integration
def test_clear_chip_for_posts(session):
    session.click_tag("writer", "fiction")
    assert session.show_clear_chip("writer")
    assert _visible(session, "writer") == ["Winter"]

    session.click_chip("writer", Chip(label="Clear filters", role="clear"))
    assert not session.show_clear_chip("writer")


@pytest.mark.integration
def test_global_search_debounced_across_sections(session):
    session.search.input("harbor")
    session.ui.scheduler.advance(0.2)

    assert _visible(session, "musician") == ["Harbor"]
    assert _visible(session, "art") == []


@pytest.mark.integration
def test_lightbox_ignores_filters(session):
    session.click_chip("art", Chip(label="paint", value="paint"))
    session.open_image("photography", 0)

    assert session.lightbox.current.title == "Crosswalk"
    session.lightbox.show(1)
    assert session.lightbox.current.title == "Heron"


@pytest.mark.integration
def test_reader_ignores_filters(session):
    session.click_tag("writer", "fiction")
    session.open_post("writer", 1)
    session.reader.next()

    assert session.reader.title == "On Loops"
    assert "<script>" not in session.reader.body_html


@pytest.mark.integration
def test_playlist_skips_needs_upload_tracks(session):
    assert [t.title for t in session.playlist.tracks] == ["Night Drive", "Harbor"]
    session.playlist.toggle_for_index(1)
    assert session.playlist.state == PlaybackState.PLAYING
    session.playlist.next()
    assert session.playlist.title == "Night Drive"


@pytest.mark.integration
def test_copy_email(session):
    clipboard = Clipboard()
    session.contact.copy_email(clipboard)
    assert clipboard.text == "ada@example.com"
    assert session.toast.visible


@pytest.mark.integration
def test_persisted_state_restored(content_file, tmp_path):
    """Theme, gallery filter, project filter and audio position survive a reload."""
    storage = tmp_path / "storage.json"

    first = PortfolioSession(ui=UIState(store=JsonFileStore(storage))).start(content_file)
    first.theme.toggle()
    first.click_chip("art", Chip(label="ink", value="ink"))
    first.click_tag("games", "2022")
    first.playlist.load_track(1, start_time=30)

    audio = AudioElement()
    second = PortfolioSession(ui=UIState(store=JsonFileStore(storage)), audio=audio).start(content_file)

    assert second.theme.theme == "dark"
    assert second.filters.active_single_tag("art") == "ink"
    assert _visible(second, "art") == ["Heron"]
    assert _visible(second, "games") == ["Moss Knight"]
    assert second.playlist.index == 1
    assert audio.current_time == pytest.approx(30)
    assert second.playlist.state == PlaybackState.LOADED


@pytest.mark.integration
def test_missing_content_renders_default(tmp_path):
    session = PortfolioSession(ui=UIState(store=KeyValueStore())).start(tmp_path / "missing.json")

    assert session.document.site.name == "YOUR NAME"
    assert len(session.views) == 8
    assert session.playlist.state == PlaybackState.IDLE
    assert session.contact.email == "you@example.com"
