"""Snippet extraction engine."""

from .directives import process_directives
from .exceptions import DuplicateMarkerError, IncludeCodeError, MissingEndError, MissingStartError, NotFoundError
from .extractor import extract_from_text, extract_snippet
from .links import DEFAULT_REPOSITORY, DEFAULT_TAG, build_source_link, extract_code_with_metadata
from .models import ExtractionResult, MarkerHit, MarkerKind, SourceSnippet

__all__ = [
    # Models
    "ExtractionResult",
    "MarkerHit",
    "MarkerKind",
    "SourceSnippet",
    # Exceptions
    "IncludeCodeError",
    "NotFoundError",
    "MissingStartError",
    "MissingEndError",
    "DuplicateMarkerError",
    # Extraction
    "extract_snippet",
    "extract_from_text",
    "process_directives",
    # Links
    "DEFAULT_REPOSITORY",
    "DEFAULT_TAG",
    "build_source_link",
    "extract_code_with_metadata",
]
