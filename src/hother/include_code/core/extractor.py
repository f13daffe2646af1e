"""
Snippet extraction from marker-annotated source files.
"""

from pathlib import Path

from hother.include_code.core.directives import process_directives
from hother.include_code.core.exceptions import MissingEndError, MissingStartError, NotFoundError
from hother.include_code.core.markers import (
    apply_removals,
    collect_removals,
    find_marker_pair,
    scan_markers,
    strip_inline_markers,
)
from hother.include_code.core.models import ExtractionResult
from hother.include_code.utils.logging import get_logger

logger = get_logger(__name__)


def extract_from_text(content: str, identifier: str, file_path: str | Path = "<string>") -> ExtractionResult:
    """
    Extract the snippet named ``identifier`` from already-loaded text.

    Args:
        content: Full file content
        identifier: Snippet identifier to look for
        file_path: Path used in error messages

    Returns:
        The processed snippet and the original marker line numbers

    Raises:
        NotFoundError: If no marker names the identifier
        MissingStartError: If only the end marker exists
        MissingEndError: If only the start marker exists
        DuplicateMarkerError: If a marker kind names the identifier twice
    """
    lines = content.split("\n")
    hits = scan_markers(lines)

    start, end = find_marker_pair(hits, identifier, file_path)
    if start is None and end is None:
        raise NotFoundError(file_path, identifier)
    if start is None:
        raise MissingStartError(file_path, identifier)
    if end is None:
        raise MissingEndError(file_path, identifier)

    start_line, end_line = start.line_number, end.line_number

    removals = collect_removals(lines, hits, identifier, start_line, end_line)
    cleaned, emptied = strip_inline_markers(lines, hits, identifier, start_line, end_line)
    removals |= emptied
    body = apply_removals(cleaned, removals, start_line, end_line)

    result = ExtractionResult(
        code=process_directives(body, identifier),
        start_line=start_line,
        end_line=end_line,
    )

    logger.debug(
        "Snippet extracted",
        identifier=identifier,
        file_path=str(file_path),
        removed_lines=len(removals),
        **result.log_context(),
    )
    return result


def extract_snippet(file_path: str | Path, identifier: str) -> ExtractionResult:
    """
    Extract a code snippet delimited by ``docs:start``/``docs:end`` markers.

    Overlapping snippets are supported: markers belonging to other
    identifiers that fall inside the requested snippet are removed from
    its body.

    Args:
        file_path: Source file to read (UTF-8, undecodable bytes become U+FFFD)
        identifier: Snippet identifier

    Returns:
        The extraction result
    """
    content = Path(file_path).read_text(encoding="utf-8", errors="replace")
    return extract_from_text(content, identifier, file_path)
