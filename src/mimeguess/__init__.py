"""
Guess MIME types from file extensions using a static, sorted table.
"""

__version__ = "0.1.0"

from .errors import (
    MimeGuessError,
    TableError,
    UnsortedTableError,
    DuplicateExtensionError,
    UppercaseExtensionError,
    InvalidMimeTypeError,
)
from .mime_types import MIME_TYPES, OCTET_STREAM, TEXT_PLAIN
from .guess import (
    MimeGuess,
    extension_of,
    from_ext,
    from_path,
    get_mime_type_str,
    get_mime_types,
    guess_mime_type,
    mime_type_for_extension_bare,
    octet_stream,
)
from .reverse import get_extensions, get_mime_extensions_str
from .validation import validate_table

__all__ = [
    "__version__",
    "MIME_TYPES",
    "OCTET_STREAM",
    "TEXT_PLAIN",
    "MimeGuess",
    "extension_of",
    "from_ext",
    "from_path",
    "get_mime_type_str",
    "get_mime_types",
    "guess_mime_type",
    "mime_type_for_extension_bare",
    "octet_stream",
    "get_extensions",
    "get_mime_extensions_str",
    "validate_table",
    "MimeGuessError",
    "TableError",
    "UnsortedTableError",
    "DuplicateExtensionError",
    "UppercaseExtensionError",
    "InvalidMimeTypeError",
]
