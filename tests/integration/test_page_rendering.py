"""
Integration tests for the HTML projection.

Tests: session → Jinja2 templates → static page.
"""

import pytest

from atelier.contexts.interaction.session import PortfolioSession
from atelier.contexts.rendering.page import render_page
from atelier.contexts.rendering.sections import Chip


@pytest.fixture
def session(content_file):
    return PortfolioSession().start(content_file)


@pytest.mark.integration
def test_page_contains_every_section(session):
    html = render_page(session)

    assert html.startswith("<!doctype html>")
    for key in ("musician", "writer", "analysis", "art", "games", "photography", "apps", "contact"):
        assert f'<section id="{key}">' in html
    assert "Ada Example" in html


@pytest.mark.integration
def test_hidden_cards_marked(session):
    session.click_chip("games", Chip(label="2023", value="2023"))
    html = render_page(session)

    assert 'class="card project hidden"' in html
    assert 'class="card project needs-upload"' in html


@pytest.mark.integration
def test_placeholders_and_escaping(tmp_path):
    path = tmp_path / "content.json"
    path.write_text('{"art": {"works": [{"title": "<i>Lost</i>"}]}}')
    html = render_page(PortfolioSession().start(path))

    assert "MISSING: upload to CDN" in html
    assert "&lt;i&gt;Lost&lt;/i&gt;" in html


@pytest.mark.integration
def test_theme_attribute(session):
    session.theme.toggle()
    assert 'data-theme="dark"' in render_page(session)
