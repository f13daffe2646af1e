"""
Marker scanning and overlap resolution.

A source file is classified once, line by line, into marker hits. The
removal of lines belonging to other identifiers then happens in two pure
phases over the explicit line list: `collect_removals` builds the set of
line numbers scoped to the target's interval, `apply_removals` drops them
and slices out the body.
"""

import re
from collections import defaultdict
from collections.abc import Iterable, Sequence
from pathlib import Path

from hother.include_code.core.exceptions import DuplicateMarkerError
from hother.include_code.core.models import MarkerHit, MarkerKind

IDENTIFIER_CHARS = r"[a-zA-Z0-9\-._:]+"

MARKER_PATTERN = re.compile(rf"(?://|#)\s+docs:(?P<kind>start|end):(?P<ids>{IDENTIFIER_CHARS})")


def split_identifiers(id_list: str) -> tuple[str, ...]:
    """Split a colon-separated identifier list."""
    return tuple(id_list.split(":"))


def scan_markers(lines: Sequence[str]) -> list[MarkerHit]:
    """
    Classify every line of a file in a single forward pass.

    Args:
        lines: File content split on newlines

    Returns:
        All marker hits in file order
    """
    hits: list[MarkerHit] = []
    for index, line in enumerate(lines):
        if "docs:" not in line:
            continue
        stripped = line.strip()
        for match in MARKER_PATTERN.finditer(line):
            hits.append(
                MarkerHit(
                    kind=MarkerKind(match.group("kind")),
                    line_number=index + 1,
                    identifiers=split_identifiers(match.group("ids")),
                    text=match.group(0),
                    whole_line=stripped == match.group(0).strip(),
                )
            )
    return hits


def find_marker_pair(
    hits: Iterable[MarkerHit],
    identifier: str,
    file_path: str | Path,
) -> tuple[MarkerHit | None, MarkerHit | None]:
    """
    Find the start and end markers naming an identifier.

    Raises:
        DuplicateMarkerError: If a second start or end marker names the identifier
    """
    found: dict[MarkerKind, MarkerHit] = {}
    for hit in hits:
        if not hit.names(identifier):
            continue
        if hit.kind in found:
            raise DuplicateMarkerError(file_path, identifier, hit.kind, line_number=hit.line_number)
        found[hit.kind] = hit
    return found.get(MarkerKind.START), found.get(MarkerKind.END)


def collect_removals(
    lines: Sequence[str],
    hits: Iterable[MarkerHit],
    identifier: str,
    start_line: int,
    end_line: int,
) -> frozenset[int]:
    """
    Phase 1: line numbers taken up by other identifiers' markers.

    Every line whose trimmed text equals a foreign marker's text is a
    candidate; only candidates inside ``[start_line, end_line]`` are kept.
    """
    by_text: dict[str, list[int]] = defaultdict(list)
    for index, line in enumerate(lines):
        by_text[line.strip()].append(index + 1)

    removals: set[int] = set()
    for hit in hits:
        if hit.names(identifier):
            continue
        removals.update(by_text.get(hit.text.strip(), ()))

    return frozenset(n for n in removals if start_line <= n <= end_line)


def strip_inline_markers(
    lines: Sequence[str],
    hits: Iterable[MarkerHit],
    identifier: str,
    start_line: int,
    end_line: int,
) -> tuple[list[str], frozenset[int]]:
    """
    Cut foreign markers that trail code, keeping the code itself.

    Only lines strictly inside the target's markers are touched. The
    returned list has the same length as ``lines``.

    Returns:
        The cleaned lines and the numbers of lines left empty by the cut
    """
    result = list(lines)
    touched: set[int] = set()
    for hit in hits:
        if hit.whole_line or hit.names(identifier):
            continue
        if not start_line < hit.line_number < end_line:
            continue
        index = hit.line_number - 1
        result[index] = result[index].replace(hit.text, "", 1).rstrip()
        touched.add(hit.line_number)
    return result, frozenset(n for n in touched if not result[n - 1].strip())


def apply_removals(
    lines: Sequence[str],
    removals: frozenset[int],
    start_line: int,
    end_line: int,
) -> list[str]:
    """
    Phase 2: drop removed lines and keep what lies between the markers.

    Removed lines all sit after the start marker, so only the end
    position shifts.
    """
    kept = [line for number, line in enumerate(lines, 1) if number not in removals]
    adjusted_end = end_line - len(removals)
    return kept[start_line : adjusted_end - 1]
