"""
Highlighting directive rewriting and indentation normalization.
"""

import re
from collections.abc import Iterable

from hother.include_code.core.markers import IDENTIFIER_CHARS, split_identifiers

DIRECTIVE_NAMES = (
    "highlight-next-line",
    "highlight-start",
    "highlight-end",
    "this-will-error",
)

DIRECTIVE_PATTERNS = tuple((name, re.compile(rf"{name}:({IDENTIFIER_CHARS})")) for name in DIRECTIVE_NAMES)

EMPTY_COMMENTS = frozenset({"//", "#"})


def rewrite_directives(line: str, identifier: str) -> tuple[str, bool]:
    """
    Rewrite the directives on a single line for one identifier.

    A directive naming the identifier becomes its bare name; any other
    directive is deleted from the line. Only the first occurrence of each
    directive name is considered.

    Returns:
        The rewritten line and whether any directive was found
    """
    mutated = False
    for name, pattern in DIRECTIVE_PATTERNS:
        match = pattern.search(line)
        if match is None:
            continue
        mutated = True
        replacement = name if identifier in split_identifiers(match.group(1)) else ""
        line = line[: match.start()] + replacement + line[match.end() :]
    return line, mutated


def leading_spaces(line: str) -> int:
    """Count leading space characters (tabs are not counted)."""
    return len(line) - len(line.lstrip(" "))


def dedent_lines(lines: Iterable[str]) -> str:
    """
    Remove the common leading-space prefix and trailing whitespace.

    Empty lines do not take part in computing the common prefix;
    whitespace-only lines do.
    """
    lines = list(lines)
    indents = [leading_spaces(line) for line in lines if line]
    common = min(indents, default=0)

    normalized = [(line[common:] if len(line) > common else line).rstrip() for line in lines]
    return "\n".join(normalized).rstrip()


def process_directives(body: str | Iterable[str], identifier: str) -> str:
    """
    Apply directive rewriting, drop emptied lines, and dedent the block.

    Args:
        body: Snippet body as text or as a sequence of lines
        identifier: Identifier the snippet is being extracted for

    Returns:
        The final snippet text, with trailing blank lines trimmed
    """
    lines = body.split("\n") if isinstance(body, str) else body

    surviving: list[str] = []
    for line in lines:
        line, mutated = rewrite_directives(line, identifier)
        stripped = line.strip()
        if stripped in EMPTY_COMMENTS or (mutated and not stripped):
            continue
        surviving.append(line)

    return dedent_lines(surviving)
