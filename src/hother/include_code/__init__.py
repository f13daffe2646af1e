"""
Include Code - marker-delimited source snippets for documentation pages

Extracts named regions of source files (``docs:start:<id>`` /
``docs:end:<id>``) and splices them into Markdown documents through the
``#include_code`` macro, with highlighting directives and source links.
"""

import importlib.metadata

from .config import IncludeCodeConfig
from .core.exceptions import (
    DuplicateMarkerError,
    IncludeCodeError,
    MissingEndError,
    MissingStartError,
    NotFoundError,
)
from .core.extractor import extract_from_text, extract_snippet
from .core.links import build_source_link, extract_code_with_metadata
from .core.models import ExtractionResult, SourceSnippet
from .resolver import DIAGNOSTICS_KEY, Diagnostic, ParsedMacro, include_code_in_markdown, include_code_plugin, parse_macro
from .utils.logging import configure_logging, get_logger

try:
    __version__ = importlib.metadata.version("hother-include-code")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0+dev"

__all__ = [
    # Models
    "ExtractionResult",
    "SourceSnippet",
    "ParsedMacro",
    "Diagnostic",
    "IncludeCodeConfig",
    # Exceptions
    "IncludeCodeError",
    "NotFoundError",
    "MissingStartError",
    "MissingEndError",
    "DuplicateMarkerError",
    # Extraction
    "extract_snippet",
    "extract_from_text",
    "extract_code_with_metadata",
    "build_source_link",
    # Documents
    "DIAGNOSTICS_KEY",
    "parse_macro",
    "include_code_plugin",
    "include_code_in_markdown",
    # Logging
    "configure_logging",
    "get_logger",
]
