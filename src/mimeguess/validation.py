from typing import Sequence, Set, Tuple

from .errors import (
    DuplicateExtensionError,
    InvalidMimeTypeError,
    UnsortedTableError,
    UppercaseExtensionError,
)
from .mime_types import MIME_TYPES


def validate_table(
    table: Sequence[Tuple[str, Sequence[str]]] = MIME_TYPES,
) -> int:
    """
    Check that an extension table can be searched by bisection.

    Walks the table once and stops at the first entry that is not lowercase,
    has no valid MIME types, repeats an earlier extension, or does not sort
    strictly after its predecessor under ordinal comparison.

    Args:
        table (Sequence): (extension, MIME types) pairs. Defaults to the
                          compiled-in table.

    Returns:
        int: The number of entries checked.

    Raises:
        UppercaseExtensionError: If an extension contains uppercase letters.
        InvalidMimeTypeError: If an entry has no MIME types or a malformed one.
        DuplicateExtensionError: If an extension is registered twice.
        UnsortedTableError: If an entry is out of order.
    """
    seen: Set[str] = set()
    previous = None

    for index, (ext, mime_types) in enumerate(table):
        if ext != ext.lower():
            raise UppercaseExtensionError(index, ext)

        if not mime_types:
            raise InvalidMimeTypeError(index, ext)
        for mime in mime_types:
            top, slash, sub = mime.partition("/")
            if not (top and slash and sub):
                raise InvalidMimeTypeError(index, ext, mime)

        if ext in seen:
            raise DuplicateExtensionError(index, ext)
        seen.add(ext)

        if previous is not None and not previous < ext:
            raise UnsortedTableError(index, ext, previous)
        previous = ext

    return len(seen)
