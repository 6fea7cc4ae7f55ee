"""Tests for extension lookups and path-based guessing."""

from pathlib import Path

import pytest

from mimeguess import (
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
from mimeguess.mime_types import MIME_TYPES


def test_every_extension_round_trips():
    """Looking up a stored extension returns that entry's types."""
    for ext, mime_types in MIME_TYPES:
        assert get_mime_types(ext) == mime_types
        assert mime_type_for_extension_bare(ext) == mime_types[0]


def test_every_extension_round_trips_uppercase():
    for ext, mime_types in MIME_TYPES:
        assert get_mime_types(ext.upper()) == mime_types
        assert get_mime_types(ext.title()) == mime_types


def test_every_extension_round_trips_through_path():
    for ext, mime_types in MIME_TYPES:
        assert guess_mime_type(f"/path/to/file.{ext}") == mime_types[0]
        assert list(from_path(f"FILE.{ext.upper()}")) == list(mime_types)


class TestGuessMimeType:
    """guess_mime_type() on file names and paths."""

    def test_html(self) -> None:
        assert guess_mime_type("index.html") == "text/html"

    def test_uppercase_name(self) -> None:
        assert guess_mime_type("IMAGE.JPG") == "image/jpeg"

    def test_multi_dot_uses_last_segment(self) -> None:
        assert guess_mime_type("archive.tar.gz") == "application/gzip"
        assert guess_mime_type("archive.tar.gz") == mime_type_for_extension_bare("gz")

    def test_no_dot(self) -> None:
        assert guess_mime_type("README") is None

    def test_unknown_extension(self) -> None:
        assert guess_mime_type("file.unknownext123") is None

    def test_full_path(self) -> None:
        assert guess_mime_type("/path/to/file.gif") == "image/gif"

    def test_pathlib_path(self) -> None:
        assert guess_mime_type(Path("docs") / "report.PDF") == "application/pdf"

    def test_dot_in_directory_only(self) -> None:
        assert guess_mime_type("/etc/conf.d/README") is None

    def test_dot_file_has_no_extension(self) -> None:
        assert guess_mime_type(".html") is None

    def test_trailing_dot(self) -> None:
        assert guess_mime_type("file.") is None

    def test_bare_extension_is_not_a_path_extension(self) -> None:
        assert guess_mime_type("html") is None

    @pytest.mark.parametrize(
        "candidate", ["", ".", "..", "\x00", "file.\x00\x01", "photo.jpgé", "été.é"]
    )
    def test_odd_input_is_no_match(self, candidate: str) -> None:
        assert guess_mime_type(candidate) is None


class TestBareExtension:
    """mime_type_for_extension_bare() and get_mime_types()."""

    def test_primary_type_is_first(self) -> None:
        assert mime_type_for_extension_bare("xml") == "text/xml"
        assert get_mime_types("xml") == ("text/xml", "application/xml")

    def test_mixed_case(self) -> None:
        assert mime_type_for_extension_bare("HtMl") == "text/html"

    def test_negative_lookup(self) -> None:
        assert mime_type_for_extension_bare("zzqxnotreal") is None
        assert get_mime_types("zzqxnotreal") is None

    def test_empty(self) -> None:
        assert mime_type_for_extension_bare("") is None

    def test_leading_dot_is_not_stripped(self) -> None:
        assert mime_type_for_extension_bare(".html") is None

    def test_dotted_input_is_literal(self) -> None:
        assert mime_type_for_extension_bare("tar.gz") is None

    def test_non_ascii_is_not_folded(self) -> None:
        # KELVIN SIGN lowercases to 'k' with str.lower()
        assert mime_type_for_extension_bare("\u212aey") is None
        assert mime_type_for_extension_bare("key") is not None

    def test_past_end_of_table(self) -> None:
        assert mime_type_for_extension_bare("zzzzzz") is None
        assert mime_type_for_extension_bare("\uffff") is None

    def test_before_start_of_table(self) -> None:
        assert mime_type_for_extension_bare("!") is None

    def test_get_mime_type_str_alias(self) -> None:
        assert get_mime_type_str("txt") == "text/plain"
        assert get_mime_type_str("blahblah") is None


class TestExtensionOf:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("index.html", "html"),
            ("archive.tar.gz", "gz"),
            ("/a/b.c/README", None),
            ("README", None),
            (".bashrc", None),
            ("file.", None),
            ("", None),
            ("IMAGE.JPG", "JPG"),
        ],
    )
    def test_extension_of(self, path, expected) -> None:
        assert extension_of(path) == expected


class TestMimeGuess:
    """MimeGuess results from from_ext() and from_path()."""

    def test_multiple_types(self) -> None:
        guess = from_ext("wav")
        assert len(guess) == 3
        assert guess.count() == 3
        assert list(guess) == ["audio/wav", "audio/wave", "audio/x-wav"]
        assert guess.first() == "audio/wav"
        assert guess.first_raw() == "audio/wav"

    def test_empty_guess(self) -> None:
        guess = from_path("/path/to/file")
        assert not guess
        assert guess.is_empty()
        assert guess.first() is None
        assert list(guess) == []

    def test_fallbacks(self) -> None:
        assert from_ext("nope").first_or_octet_stream() == "application/octet-stream"
        assert from_ext("nope").first_or_text_plain() == "text/plain"
        assert from_ext("nope").first_or("x/y") == "x/y"
        assert from_ext("gif").first_or_octet_stream() == "image/gif"

    def test_octet_stream(self) -> None:
        assert octet_stream() == "application/octet-stream"

    def test_from_path_matches_from_ext(self) -> None:
        assert from_path("notes.MD") == from_ext("md")
        assert from_path("notes.md") == MimeGuess(("text/markdown", "text/x-markdown"))

    def test_equality_and_hash(self) -> None:
        assert from_ext("jpg") == from_ext("JPEG")
        assert hash(from_ext("jpg")) == hash(from_ext("jpeg"))
        assert from_ext("jpg") != from_ext("png")
        assert from_ext("jpg") != ["image/jpeg", "image/pjpeg"]

    def test_repr(self) -> None:
        assert repr(from_ext("png")) == "MimeGuess(['image/png'])"

    def test_classmethods(self) -> None:
        assert MimeGuess.from_ext("css").first() == "text/css"
        assert MimeGuess.from_path("style.css").first() == "text/css"
