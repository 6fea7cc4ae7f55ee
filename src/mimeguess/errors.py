class MimeGuessError(Exception):
    """Base exception for all errors in the mimeguess package."""
    pass


class TableError(MimeGuessError):
    """Base exception for an extension table that breaks a lookup invariant."""
    def __init__(self, index: int, extension: str, reason: str):
        self.index = index
        self.extension = extension
        self.reason = reason
        super().__init__(f"Invalid table entry {index} ('{extension}'): {reason}")


class UnsortedTableError(TableError):
    """Raised when an entry does not sort strictly after the previous one."""
    def __init__(self, index: int, extension: str, previous: str):
        self.previous = previous
        super().__init__(
            index,
            extension,
            f"must sort after '{previous}' to keep the table bisectable",
        )


class DuplicateExtensionError(TableError):
    """Raised when an extension appears in more than one entry."""
    def __init__(self, index: int, extension: str):
        super().__init__(
            index,
            extension,
            "extension is already registered by the previous entry; "
            "group its MIME types into a single entry",
        )


class UppercaseExtensionError(TableError):
    """Raised when a stored extension is not entirely lowercase."""
    def __init__(self, index: int, extension: str):
        super().__init__(
            index,
            extension,
            f"extension must be stored lowercase as '{extension.lower()}'",
        )


class InvalidMimeTypeError(TableError):
    """
    Raised when an entry has no MIME types, or one of its MIME types is not
    a non-empty 'type/subtype' string.
    """
    def __init__(self, index: int, extension: str, mime_type: str | None = None):
        self.mime_type = mime_type
        if mime_type is None:
            reason = "entry has no MIME types"
        else:
            reason = f"'{mime_type}' is not a 'type/subtype' string"
        super().__init__(index, extension, reason)
