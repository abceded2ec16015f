"""
Loguru setup shared by the ATELIER contexts.

Each script run gets one log directory holding ``{context}.log`` (DEBUG and up)
while INFO and up is echoed to stdout. The first lines of every log record
which content document the run worked from. Prefixed wrappers live in
contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

import atelier

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    content_path: Optional[Path] = None,
    extra_provenance: Optional[dict] = None,
) -> Path:
    """
    Route loguru output for one context run.

    Args:
        context_name: "content" or "render"; names the log file
        log_dir: Directory for this run (created if missing)
        content_path: Content document the run reads, if any
        extra_provenance: Further key-value pairs for the header

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    provenance = {"Context": context_name}
    if content_path is not None:
        content_path = Path(content_path)
        provenance["Content"] = content_path.resolve()
        provenance["Content present"] = content_path.is_file()
    provenance.update(extra_provenance or {})
    log_provenance(provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """Write the run header: invocation, interpreter, package version, then ``extra_context``."""
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")
    logger.info(f"ATELIER: {atelier.__version__}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
