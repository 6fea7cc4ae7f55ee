"""
Reverse lookup from MIME types to the extensions registered for them.

The index is built once from `MIME_TYPES` at import time and never changes.
"""
from typing import Dict, List, Optional, Tuple

from .mime_types import MIME_TYPES


def _build_index() -> Tuple[Tuple[str, ...], Dict[str, Tuple[str, ...]], Dict[str, Dict[str, Tuple[str, ...]]]]:
    grouped: Dict[str, Dict[str, List[str]]] = {}
    for ext, mime_types in MIME_TYPES:
        for mime in mime_types:
            top, _, sub = mime.lower().partition("/")
            grouped.setdefault(top, {}).setdefault(sub, []).append(ext)

    all_exts: List[str] = []
    top_index: Dict[str, Tuple[str, ...]] = {}
    sub_index: Dict[str, Dict[str, Tuple[str, ...]]] = {}
    for top in sorted(grouped):
        top_exts: List[str] = []
        sub_index[top] = {}
        for sub in sorted(grouped[top]):
            exts = tuple(grouped[top][sub])
            sub_index[top][sub] = exts
            top_exts.extend(exts)
        top_index[top] = tuple(top_exts)
        all_exts.extend(top_exts)
    return tuple(all_exts), top_index, sub_index


_ALL_EXTENSIONS, _BY_TOPLEVEL, _BY_SUBTYPE = _build_index()


def get_extensions(toplevel: str, sublevel: str) -> Optional[Tuple[str, ...]]:
    """
    Return the extensions registered for the MIME type `toplevel/sublevel`.

    Matching is case-insensitive. A `toplevel` of '*' returns every extension
    in the table and a `sublevel` of '*' returns every extension under
    `toplevel`. Extensions registered for several types appear once per type.

    Args:
        toplevel (str): The top-level type, e.g. 'image'.
        sublevel (str): The subtype, e.g. 'png'.

    Returns:
        Optional[Tuple[str, ...]]: The extensions, or None if the type is unknown.
    """
    if toplevel == "*":
        return _ALL_EXTENSIONS

    subs = _BY_SUBTYPE.get(toplevel.lower())
    if subs is None:
        return None
    if sublevel == "*":
        return _BY_TOPLEVEL[toplevel.lower()]
    return subs.get(sublevel.lower())


def get_mime_extensions_str(mime_type: str) -> Optional[Tuple[str, ...]]:
    """
    Same as `get_extensions`, taking a 'type/subtype' string such as 'image/*'.

    Parameters after a ';' are ignored. Strings without a '/' have no extensions.
    """
    essence = mime_type.split(";", 1)[0].strip()
    toplevel, slash, sublevel = essence.partition("/")
    if not slash:
        return None
    return get_extensions(toplevel.strip(), sublevel.strip())
