"""
Source-level variant of the resolver for Markdown-string pipelines.

Some site generators hand hooks the page as Markdown text rather than as
a token stream. Invocations are located with the same token scan as the
plugin, then their source lines are rewritten as fenced blocks.
"""

import re
from collections.abc import MutableMapping
from typing import Any

from markdown_it import MarkdownIt

from hother.include_code.config import IncludeCodeConfig

from .nodes import Resolution
from .plugin import find_invocations, try_resolve

BACKTICK_RUN = re.compile(r"`{3,}")


def fence_for(code: str) -> str:
    """Pick a backtick fence longer than any run inside the code."""
    longest = max((len(run) for run in BACKTICK_RUN.findall(code)), default=2)
    return "`" * (longest + 1)


def container_prefix(line: str) -> tuple[str, str]:
    """
    Split the container prefix off an invocation line.

    Returns:
        The prefix of the first line and the one used for continuation
        lines, e.g. ``("> - ", ">   ")`` inside a quoted list item.
    """
    prefix = line[: line.index("#include_code")]
    continuation = "".join(ch if ch == ">" else " " for ch in prefix)
    return prefix, continuation


def render_markdown(resolution: Resolution, prefix: str = "", continuation: str = "") -> list[str]:
    """Render a resolution as Markdown source lines."""
    fence = fence_for(resolution.code)
    lines = [f"{prefix}{fence}{resolution.info}"]
    if resolution.code:
        lines.extend(f"{continuation}{line}".rstrip() for line in resolution.code.split("\n"))
    lines.append(f"{continuation}{fence}")

    if resolution.link_html is not None:
        lines.append(continuation.rstrip())
        lines.append(f"{continuation}{resolution.link_html}")
    return lines


def include_code_in_markdown(
    markdown: str,
    config: IncludeCodeConfig | None = None,
    env: MutableMapping[str, Any] | None = None,
    md: MarkdownIt | None = None,
) -> str:
    """
    Replace ``#include_code`` paragraphs in Markdown source.

    Args:
        markdown: Page source
        config: Resolution settings
        env: Mapping that receives diagnostics under ``DIAGNOSTICS_KEY``
        md: Parser used to locate invocations (CommonMark by default)

    Returns:
        The rewritten Markdown; unresolved invocations are left as written
    """
    config = config or IncludeCodeConfig()
    env = {} if env is None else env
    md = md or MarkdownIt("commonmark")

    tokens = md.parse(markdown, env)
    lines = markdown.split("\n")

    pending: list[tuple[int, int, list[str]]] = []
    for index, parsed in find_invocations(tokens):
        paragraph = tokens[index]
        if not paragraph.map:
            continue
        start, end = paragraph.map
        resolution = try_resolve(parsed, config, env, start)
        if resolution is None:
            continue
        prefix, continuation = container_prefix(lines[start])
        pending.append((start, end, render_markdown(resolution, prefix, continuation)))

    for start, end, replacement in reversed(pending):
        lines[start:end] = replacement

    return "\n".join(lines)
