"""
Exceptions raised while extracting snippets.
"""

from pathlib import Path

from hother.include_code.core.models import MarkerKind


class IncludeCodeError(Exception):
    """
    Base exception for snippet extraction errors.

    Attributes:
        file_path: File that was searched
        identifier: Snippet identifier that was requested
        message: Human-readable error message
    """

    def __init__(
        self,
        file_path: str | Path,
        identifier: str,
        message: str | None = None,
    ):
        self.file_path = str(file_path)
        self.identifier = identifier
        self.message = message or f'Cannot extract "{identifier}" from file "{self.file_path}"'
        super().__init__(self.message)


class NotFoundError(IncludeCodeError):
    """Neither a start nor an end marker names the identifier."""

    def __init__(self, file_path: str | Path, identifier: str, message: str | None = None):
        super().__init__(
            file_path,
            identifier,
            message or f'Identifier "{identifier}" not found in file "{file_path}"',
        )


class MissingStartError(IncludeCodeError):
    """An end marker exists but the start marker does not."""

    def __init__(self, file_path: str | Path, identifier: str, message: str | None = None):
        super().__init__(
            file_path,
            identifier,
            message or f'Start marker "docs:start:{identifier}" not found in file "{file_path}"',
        )


class MissingEndError(IncludeCodeError):
    """A start marker exists but the end marker does not."""

    def __init__(self, file_path: str | Path, identifier: str, message: str | None = None):
        super().__init__(
            file_path,
            identifier,
            message or f'End marker "docs:end:{identifier}" not found in file "{file_path}"',
        )


class DuplicateMarkerError(IncludeCodeError):
    """More than one start (or end) marker names the identifier."""

    def __init__(
        self,
        file_path: str | Path,
        identifier: str,
        kind: MarkerKind,
        line_number: int | None = None,
        message: str | None = None,
    ):
        self.kind = kind
        self.line_number = line_number
        default_message = f'Duplicate marker for identifier "{identifier}" in file "{file_path}"'
        if line_number is not None:
            default_message = f"{default_message} (docs:{kind.value} repeated on line {line_number})"
        super().__init__(file_path, identifier, message or default_message)
