import os
from bisect import bisect_left
from pathlib import PurePath
from typing import Iterator, Optional, Tuple, Union

from .mime_types import EXTENSIONS, MIME_TYPES, OCTET_STREAM, TEXT_PLAIN

PathLike = Union[str, os.PathLike]

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def _ascii_lower(text: str) -> str:
    # str.lower() also folds non-ASCII letters, which the table never stores
    return text.translate(_ASCII_LOWER)


def extension_of(path: PathLike) -> Optional[str]:
    """
    Return the extension of the last path component, without its dot.

    Only the segment after the final dot counts, so 'archive.tar.gz' gives 'gz'.
    Names without a dot, dot files such as '.bashrc' and names ending in a dot
    have no extension.
    """
    suffix = PurePath(path).suffix
    # newer interpreters report a trailing lone dot as the suffix '.'
    return suffix[1:] or None


def get_mime_types(extension: str) -> Optional[Tuple[str, ...]]:
    """
    Look up every MIME type registered for a bare extension.

    The extension is lowercased (ASCII only) and searched for by bisecting the
    sorted table. It is used literally otherwise: a leading dot is not stripped,
    so '.html' finds nothing.

    Args:
        extension (str): The extension to look up, e.g. 'html'.

    Returns:
        Optional[Tuple[str, ...]]: The registered MIME types with the primary
                                   type first, or None if the extension is
                                   empty or unknown.
    """
    if not extension:
        return None

    key = _ascii_lower(extension)
    idx = bisect_left(EXTENSIONS, key)
    if idx < len(EXTENSIONS) and EXTENSIONS[idx] == key:
        return MIME_TYPES[idx][1]
    return None


def mime_type_for_extension_bare(extension: str) -> Optional[str]:
    """
    Return the primary MIME type for a bare extension, or None.

    See `get_mime_types` for how the extension is matched.
    """
    mime_types = get_mime_types(extension)
    return mime_types[0] if mime_types else None


# Name kept for callers used to the `get_mime_type_str` spelling
get_mime_type_str = mime_type_for_extension_bare


def guess_mime_type(candidate: PathLike) -> Optional[str]:
    """
    Guess the primary MIME type of a file from its name.

    The extension is taken from the last path component (see `extension_of`),
    so a bare extension such as 'html' is treated as a file name without an
    extension. Use `mime_type_for_extension_bare` for those.

    Note that this is a guess: nothing checks that the file contents match the
    type associated with its extension.

    Args:
        candidate (str | os.PathLike): A path or file name, e.g. 'index.html'.

    Returns:
        Optional[str]: The primary MIME type, or None when the name has no
                       extension or the extension is unknown.
    """
    extension = extension_of(candidate)
    if extension is None:
        return None
    return mime_type_for_extension_bare(extension)


def octet_stream() -> str:
    """Return the MIME type for a generic binary stream."""
    return OCTET_STREAM


class MimeGuess:
    """
    The MIME types guessed for an extension, primary type first.

    A guess may be empty when nothing is registered for the extension.
    """

    __slots__ = ("_types",)

    def __init__(self, mime_types: Tuple[str, ...] = ()):
        self._types = tuple(mime_types)

    @classmethod
    def from_ext(cls, extension: str) -> "MimeGuess":
        return cls(get_mime_types(extension) or ())

    @classmethod
    def from_path(cls, path: PathLike) -> "MimeGuess":
        extension = extension_of(path)
        if extension is None:
            return cls()
        return cls.from_ext(extension)

    def is_empty(self) -> bool:
        return not self._types

    def count(self) -> int:
        return len(self._types)

    def first(self) -> Optional[str]:
        """Return the primary MIME type, or None for an empty guess."""
        return self._types[0] if self._types else None

    first_raw = first

    def first_or(self, default: str) -> str:
        return self._types[0] if self._types else default

    def first_or_octet_stream(self) -> str:
        return self.first_or(OCTET_STREAM)

    def first_or_text_plain(self) -> str:
        return self.first_or(TEXT_PLAIN)

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __bool__(self) -> bool:
        return bool(self._types)

    def __eq__(self, other):
        if not isinstance(other, MimeGuess):
            return NotImplemented
        return self._types == other._types

    def __hash__(self):
        return hash(self._types)

    def __repr__(self) -> str:
        return f"MimeGuess({list(self._types)!r})"


def from_ext(extension: str) -> MimeGuess:
    """Guess the MIME types for a bare extension."""
    return MimeGuess.from_ext(extension)


def from_path(path: PathLike) -> MimeGuess:
    """Guess the MIME types for a path, using the extension of its file name."""
    return MimeGuess.from_path(path)
