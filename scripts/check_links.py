#!/usr/bin/env python3
"""
Check that every local asset referenced by the content document exists.

Every string value starting with "assets/" is treated as a path relative to
the site root. Exits 1 when any referenced file is missing.

Usage:
    python scripts/check_links.py
    python scripts/check_links.py content/content.json --root .
"""

import os
from pathlib import Path

import typer
from dotenv import load_dotenv

from atelier.contexts.content.exceptions import ContentLoadError
from atelier.contexts.content.links import collect_local_references, find_missing_assets
from atelier.contexts.content.loader import read_raw_content
from atelier.contexts.content.logger import log_missing_assets, setup_content_logger

load_dotenv()
CONTENT_PATH = Path(os.getenv("ATELIER_CONTENT_PATH", "content/content.json"))
ASSETS_ROOT = Path(os.getenv("ATELIER_ASSETS_ROOT", "."))
LOGS_PATH = Path(os.getenv("ATELIER_LOGS_PATH", "outs/logs"))

app = typer.Typer(add_completion=False, help="Check local asset references in content.json.")


@app.command()
def main(
    content: Path = typer.Argument(CONTENT_PATH, help="Path to content.json"),
    root: Path = typer.Option(ASSETS_ROOT, "--root", help="Site root that asset paths are relative to"),
    log_dir: Path = typer.Option(LOGS_PATH / "check_links", "--log-dir", help="Directory for the session log"),
):
    """Report missing local assets; exit non-zero if any are missing."""
    setup_content_logger(log_dir, content_path=content)

    try:
        raw = read_raw_content(content)
    except ContentLoadError as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    refs = collect_local_references(raw)
    total = sum(len(locations) for locations in refs.values())
    typer.echo(f"Local asset references: {total} ({len(refs)} unique)")

    missing = find_missing_assets(raw, root)
    if missing:
        log_missing_assets(missing)
        typer.secho(f"Missing local assets ({len(missing)}):", fg=typer.colors.RED, err=True)
        for asset_path, locations in missing.items():
            typer.echo(f" - {asset_path} <- {', '.join(locations)}", err=True)
        raise typer.Exit(code=1)

    typer.secho("All referenced local assets are present.", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
