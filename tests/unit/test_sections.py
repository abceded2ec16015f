"""
Unit tests for section renderers.

Tests chip rows, card creation and needs-upload handling in
atelier.contexts.rendering.sections.
"""

import pytest

from atelier.contexts.content.content_document import ContentDocument, Embed
from atelier.contexts.rendering.cards import CardRegistry
from atelier.contexts.rendering.embeds import GDRIVE_PLACEHOLDER, embed_view
from atelier.contexts.rendering.sections import (
    SECTION_LAYOUT,
    SectionKind,
    compose_href,
    render_all_sections,
    sections_of_kind,
)
from atelier.utils.settings import UISettings


@pytest.fixture
def views(sample_document):
    registry = CardRegistry()
    return {v.key: v for v in render_all_sections(sample_document, registry, UISettings())}, registry


def _chip_labels(view):
    return [chip.label for chip in view.chips]


@pytest.mark.unit
class TestSectionLayout:
    """Tests for the static section table."""

    def test_layout_order(self):
        assert [s.key for s in SECTION_LAYOUT] == [
            "musician", "writer", "analysis", "art", "games", "photography", "apps", "contact"
        ]

    def test_sections_of_kind(self):
        assert sections_of_kind(SectionKind.GALLERY) == ["art", "photography"]
        assert sections_of_kind(SectionKind.PROJECTS) == ["games", "apps"]


@pytest.mark.unit
class TestRenderers:
    """Tests for per-kind renderers."""

    def test_every_section_rendered_once(self, views):
        by_key, registry = views
        assert list(by_key) == [s.key for s in SECTION_LAYOUT]
        assert registry.sections() == [s.key for s in SECTION_LAYOUT]

    def test_musician_playable_subset(self, views):
        by_key, _ = views
        musician = by_key["musician"]
        assert [t.title for t in musician.playable_tracks] == ["Night Drive", "Harbor"]
        assert [i.playable_index for i in musician.items] == [0, None, 1]
        assert [i.needs_upload for i in musician.items] == [False, True, False]

    def test_musician_chips_are_years(self, views):
        by_key, _ = views
        assert _chip_labels(by_key["musician"]) == ["2019", "2022", "2023"]

    def test_musician_track_card_tags(self, views):
        by_key, _ = views
        assert by_key["musician"].items[0].card.tags == ("2022", "Bandcamp")

    def test_posts_chips_sorted_unique(self, views):
        by_key, _ = views
        assert _chip_labels(by_key["writer"]) == ["essay", "fiction", "music"]
        assert by_key["writer"].has_section_search

    def test_posts_excerpt_plain_text(self, views):
        by_key, _ = views
        assert by_key["writer"].items[0].excerpt == "Loops repeat."
        assert by_key["writer"].items[1].excerpt == "Cold."

    def test_empty_intro_has_no_card(self, views):
        by_key, _ = views
        assert by_key["analysis"].intro_card is None
        assert by_key["writer"].intro_card is not None

    def test_gallery_chips(self, views):
        by_key, _ = views
        assert _chip_labels(by_key["art"]) == ["All", "2020", "2021", "ink", "paint"]
        assert by_key["art"].chips[0].role == "all"

    def test_gallery_missing_src_is_placeholder(self, views):
        by_key, _ = views
        heron, untitled = by_key["art"].items
        assert heron.image is not None
        assert heron.image.srcset == "assets/art/heron-800.jpg 800w, assets/art/heron-1600.jpg 1600w"
        assert heron.image.sizes
        assert untitled.image is None
        assert untitled.needs_upload
        assert untitled.card.needs_upload

    def test_projects_chips_and_card_tags(self, views):
        by_key, _ = views
        games = by_key["games"]
        assert _chip_labels(games) == ["Clear filters", "2022", "2023", "demo"]
        assert games.items[1].card.tags == ("2023", "demo", "2023")
        assert games.items[1].needs_upload
        assert games.items[1].embed.placeholder == GDRIVE_PLACEHOLDER

    def test_contact(self, views):
        by_key, _ = views
        contact = by_key["contact"]
        assert contact.email == "ada@example.com"
        assert contact.compose_href == "mailto:ada@example.com?subject=Hello%20from%20your%20portfolio"
        assert [l.label for l in contact.links] == ["Mastodon"]

    def test_empty_document_renders(self):
        registry = CardRegistry()
        views = render_all_sections(ContentDocument.from_dict({}), registry, UISettings())
        assert len(views) == len(SECTION_LAYOUT)
        assert views[-1].email == "you@example.com"
        assert views[0].playable_tracks == []


@pytest.mark.unit
class TestEmbeds:
    """Tests for embed_view function."""

    def test_youtube(self):
        view = embed_view(Embed(type="youtube", id="abc"), "Moss")
        assert view.src == "https://www.youtube.com/embed/abc"
        assert view.title == "Moss"
        assert not view.is_placeholder

    def test_vimeo(self):
        assert embed_view(Embed(type="vimeo", id="9")).src == "https://player.vimeo.com/video/9"

    def test_cfstream_prefers_url(self):
        assert embed_view(Embed(type="cfstream", url="https://x/y")).src == "https://x/y"
        assert embed_view(Embed(type="cfstream", id="v1")).src == "https://iframe.videodelivery.net/v1"

    def test_gdrive_placeholder(self):
        view = embed_view(Embed(type="gdrive", id="x"))
        assert view.is_placeholder
        assert view.src == ""

    @pytest.mark.parametrize("embed", [None, Embed(type="youtube"), Embed(type="unknown", id="x")])
    def test_unrenderable(self, embed):
        assert embed_view(embed) is None
