#!/usr/bin/env python3
"""
Render the portfolio page from the content document.

Usage:
    python scripts/render_site.py
    python scripts/render_site.py content/content.json --out dist/index.html
    python scripts/render_site.py --query synth --storage outs/state/storage.json
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from atelier.contexts.interaction.session import PortfolioSession
from atelier.contexts.interaction.state import UIState
from atelier.contexts.interaction.storage import JsonFileStore, KeyValueStore
from atelier.contexts.rendering.logger import log_page_rendered, setup_rendering_logger
from atelier.contexts.rendering.page import render_page
from atelier.utils.settings import load_ui_settings

load_dotenv()
CONTENT_PATH = Path(os.getenv("ATELIER_CONTENT_PATH", "content/content.json"))
LOGS_PATH = Path(os.getenv("ATELIER_LOGS_PATH", "outs/logs"))

app = typer.Typer(add_completion=False, help="Render the portfolio page to static HTML.")


@app.command()
def main(
    content: Path = typer.Argument(CONTENT_PATH, help="Path to content.json"),
    out: Path = typer.Option(Path("dist/index.html"), "--out", "-o", help="Output HTML file"),
    storage: Optional[Path] = typer.Option(
        None, "--storage", help="Persisted state file (restores theme, filters, audio position)"
    ),
    query: str = typer.Option("", "--query", "-q", help="Apply a global search query"),
    dark: bool = typer.Option(False, "--dark", help="Prefer the dark theme when none is stored"),
    log_dir: Path = typer.Option(LOGS_PATH / "render", "--log-dir", help="Directory for the session log"),
):
    """Load content, build the session, and write its HTML projection."""
    setup_rendering_logger(log_dir, content_path=content)

    store = JsonFileStore(storage) if storage is not None else KeyValueStore()
    ui = UIState(store=store, settings=load_ui_settings())

    session = PortfolioSession(ui=ui, prefers_dark=dark).start(content)
    if query:
        session.filters.set_query(query)

    html = render_page(session)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")

    cards = ui.registry.cards
    log_page_rendered(out, len(cards), sum(1 for card in cards if not card.visible))
    typer.secho(f"✓ Wrote {out}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
