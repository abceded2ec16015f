"""
Local asset reference checking.

Walks the raw content document and reports every ``assets/...`` reference
whose file is missing on disk.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

LOCAL_ASSET_PREFIX = "assets/"

PathPart = Union[str, int]


def format_document_path(parts: Sequence[PathPart]) -> str:
    """
    Render a breadcrumb as a document path.

    Examples:
        >>> format_document_path(["musician", "tracks", 0, "file"])
        'musician.tracks[0].file'
    """
    result = ""
    for part in parts:
        if isinstance(part, int):
            result += f"[{part}]"
        else:
            result = f"{result}.{part}" if result else str(part)
    return result


def collect_local_references(
    node: Any,
    breadcrumb: Optional[List[PathPart]] = None,
    refs: Optional[Dict[str, List[str]]] = None,
) -> Dict[str, List[str]]:
    """
    Collect local asset references from a raw content document.

    Args:
        node: Parsed JSON value to walk
        breadcrumb: Path to ``node`` within the document

    Returns:
        Mapping of asset path -> document locations that reference it
    """
    if breadcrumb is None:
        breadcrumb = []
    if refs is None:
        refs = {}

    if isinstance(node, list):
        for i, item in enumerate(node):
            collect_local_references(item, breadcrumb + [i], refs)
    elif isinstance(node, dict):
        for key, value in node.items():
            current = breadcrumb + [key]
            if isinstance(value, str):
                if value.startswith(LOCAL_ASSET_PREFIX):
                    refs.setdefault(value, []).append(format_document_path(current))
            elif isinstance(value, (dict, list)):
                collect_local_references(value, current, refs)

    return refs


def find_missing_assets(raw: Dict[str, Any], root: Path) -> Dict[str, List[str]]:
    """
    Local references whose files do not exist under ``root``.

    Args:
        raw: Parsed content document
        root: Site root that asset paths are relative to

    Returns:
        Mapping of missing asset path -> referencing locations
    """
    refs = collect_local_references(raw)
    return {
        asset_path: locations
        for asset_path, locations in refs.items()
        if not (root / asset_path).exists()
    }
