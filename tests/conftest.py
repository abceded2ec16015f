"""Shared fixtures: a small but complete content document and UI state."""

import json

import pytest

from atelier.contexts.content.content_document import ContentDocument
from atelier.contexts.interaction.state import UIState


@pytest.fixture
def sample_content():
    """Raw content document exercising every section kind."""
    return {
        "site": {"name": "Ada Example", "tagline": "Sound, words, pictures"},
        "musician": {
            "bio": "Synth records from a small flat.",
            "tracks": [
                {
                    "title": "Night Drive",
                    "file": "https://cdn.example.com/audio/night-drive.mp3",
                    "year": 2022,
                    "links": [{"label": "Bandcamp", "url": "https://example.bandcamp.com"}],
                },
                {"title": "Old Demo", "driveId": "1AbCdEf", "year": 2019},
                {"title": "Harbor", "file": "https://cdn.example.com/audio/harbor.mp3", "year": 2023},
            ],
        },
        "writer": {
            "intro": "Short fiction and notes.",
            "posts": [
                {
                    "title": "On Loops",
                    "date": "2023-04-01",
                    "html": "<p>Loops <b>repeat</b>.</p><script>alert(1)</script>",
                    "tags": ["music", "essay"],
                },
                {"title": "Winter", "date": "2022-12-01", "html": "<p>Cold.</p>", "tags": ["fiction"]},
            ],
        },
        "analysis": {
            "intro": "",
            "essays": [
                {"title": "Level Flow", "html": "<h2>Flow</h2><p>Pacing.</p>", "tags": ["design"]},
            ],
        },
        "art": {
            "intro": "Ink and paint.",
            "works": [
                {
                    "title": "Heron",
                    "year": 2021,
                    "src": "assets/art/heron-800.jpg",
                    "srcset": [
                        {"src": "assets/art/heron-800.jpg", "w": 800},
                        {"src": "assets/art/heron-1600.jpg", "w": 1600},
                    ],
                    "tags": ["ink"],
                },
                {"title": "Untitled", "year": 2020, "tags": ["paint"]},
            ],
        },
        "games": {
            "intro": "Jam games.",
            "projects": [
                {
                    "title": "Moss Knight",
                    "year": 2022,
                    "thumb": "assets/games/moss.jpg",
                    "tags": ["2022"],
                    "embed": {"type": "youtube", "id": "abc123"},
                },
                {
                    "title": "Tide Pool",
                    "year": 2023,
                    "thumb": "assets/games/tide.jpg",
                    "tags": ["2023", "demo"],
                    "embed": {"type": "gdrive", "id": "zzz"},
                },
            ],
        },
        "photography": {
            "intro": "",
            "photos": [
                {"title": "Crosswalk", "year": 2023, "src": "assets/photo/crosswalk.jpg", "tags": ["street"]},
            ],
        },
        "apps": {
            "intro": "",
            "projects": [
                {
                    "title": "Tiny Timer",
                    "year": 2024,
                    "tags": ["web"],
                    "links": [{"label": "Open", "url": "https://timer.example.com"}],
                    "embed": {"type": "vimeo", "id": "987"},
                },
            ],
        },
        "contact": {
            "email": "ada@example.com",
            "links": [{"label": "Mastodon", "url": "https://social.example.com/@ada"}],
        },
    }


@pytest.fixture
def sample_document(sample_content):
    return ContentDocument.from_dict(sample_content)


@pytest.fixture
def content_file(tmp_path, sample_content):
    path = tmp_path / "content.json"
    path.write_text(json.dumps(sample_content), encoding="utf-8")
    return path


@pytest.fixture
def ui():
    """Fresh in-memory UI state with default settings."""
    return UIState()
