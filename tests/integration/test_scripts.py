"""
Integration tests for the command-line scripts.

Tests: scripts/render_site.py and scripts/check_links.py through Typer's CliRunner.
"""

import importlib.util
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

SCRIPTS_PATH = Path(__file__).resolve().parents[2] / "scripts"

runner = CliRunner()


def _load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_PATH / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop the sinks a script added to the CliRunner streams."""
    yield
    logger.remove()


@pytest.mark.integration
def test_render_site_writes_page(content_file, tmp_path):
    script = _load_script("render_site")
    out = tmp_path / "dist" / "index.html"

    args = [str(content_file), "--out", str(out), "--query", "heron", "--log-dir", str(tmp_path / "logs")]
    result = runner.invoke(script.app, args)

    assert result.exit_code == 0, result.output
    html = out.read_text(encoding="utf-8")
    assert "Heron" in html
    assert 'class="card hidden"' in html


@pytest.mark.integration
def test_check_links_reports_missing(content_file, tmp_path):
    script = _load_script("check_links")

    result = runner.invoke(
        script.app, [str(content_file), "--root", str(tmp_path), "--log-dir", str(tmp_path / "logs")]
    )

    assert result.exit_code == 1
    assert "assets/art/heron-800.jpg" in result.output


@pytest.mark.integration
def test_check_links_all_present(tmp_path):
    script = _load_script("check_links")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "a.jpg").write_bytes(b"")
    content = tmp_path / "content.json"
    content.write_text('{"art": {"works": [{"src": "assets/a.jpg"}]}}')

    result = runner.invoke(
        script.app, [str(content), "--root", str(tmp_path), "--log-dir", str(tmp_path / "logs")]
    )

    assert result.exit_code == 0
    assert "All referenced local assets are present." in result.output


@pytest.mark.integration
def test_check_links_unreadable_content(tmp_path):
    script = _load_script("check_links")

    result = runner.invoke(script.app, [str(tmp_path / "missing.json"), "--log-dir", str(tmp_path / "logs")])

    assert result.exit_code == 1
