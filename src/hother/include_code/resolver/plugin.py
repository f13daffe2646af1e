"""
markdown-it-py plugin resolving ``#include_code`` paragraphs.

Usage::

    md = MarkdownIt().use(include_code_plugin, IncludeCodeConfig(root_dir=repo_root))
    env = {}
    html = md.render(text, env)
    problems = env.get(DIAGNOSTICS_KEY, [])
"""

from collections.abc import MutableMapping, Sequence
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from hother.include_code.config import IncludeCodeConfig
from hother.include_code.core.exceptions import IncludeCodeError
from hother.include_code.utils.logging import get_logger

from .macro import ParsedMacro, parse_macro
from .nodes import Diagnostic, Resolution, diagnostic_for, resolve_invocation

logger = get_logger(__name__)

DIAGNOSTICS_KEY = "include_code_diagnostics"

# paragraph_open, inline, paragraph_close
PARAGRAPH_SPAN = 3


def find_invocations(tokens: Sequence[Token]) -> list[tuple[int, ParsedMacro]]:
    """
    Find paragraphs consisting of a single invocation.

    Only paragraphs whose inline content is exactly one text token are
    candidates, so a macro mentioned inside other prose is left alone.

    Returns:
        ``(index of paragraph_open, parsed invocation)`` pairs in document order
    """
    found: list[tuple[int, ParsedMacro]] = []
    for index in range(len(tokens) - PARAGRAPH_SPAN + 1):
        opening, inline, closing = tokens[index : index + PARAGRAPH_SPAN]
        if opening.type != "paragraph_open" or inline.type != "inline" or closing.type != "paragraph_close":
            continue
        children = inline.children or []
        if len(children) != 1 or children[0].type != "text":
            continue
        parsed = parse_macro(children[0].content)
        if parsed is not None:
            found.append((index, parsed))
    return found


def record_diagnostic(env: MutableMapping[str, Any], diagnostic: Diagnostic) -> None:
    """Attach a diagnostic to the render environment and log it."""
    env.setdefault(DIAGNOSTICS_KEY, []).append(diagnostic)
    logger.warning(diagnostic.message, **diagnostic.log_context())


def try_resolve(
    parsed: ParsedMacro,
    config: IncludeCodeConfig,
    env: MutableMapping[str, Any],
    line: int | None,
) -> Resolution | None:
    """Resolve one invocation, turning failures into diagnostics."""
    try:
        return resolve_invocation(parsed, config)
    except (IncludeCodeError, OSError) as e:
        record_diagnostic(env, diagnostic_for(parsed, e, line))
        return None


def replacement_tokens(resolution: Resolution, paragraph: Token) -> list[Token]:
    """Build the fence and optional attribution paragraph."""
    level = paragraph.level
    tokens = [
        Token(
            "fence",
            "code",
            0,
            map=paragraph.map,
            level=level,
            content=f"{resolution.code}\n",
            info=resolution.info,
            markup="```",
            block=True,
        )
    ]

    if resolution.link_html is not None:
        html = Token("html_inline", "", 0, content=resolution.link_html)
        tokens.extend(
            [
                Token("paragraph_open", "p", 1, map=paragraph.map, level=level, block=True, hidden=paragraph.hidden),
                Token("inline", "", 0, map=paragraph.map, level=level + 1, content=resolution.link_html, children=[html], block=True),
                Token("paragraph_close", "p", -1, level=level, block=True, hidden=paragraph.hidden),
            ]
        )
    return tokens


def make_include_code_rule(config: IncludeCodeConfig):
    """Create the core rule bound to a configuration."""

    def include_code(state: StateCore) -> None:
        pending: list[tuple[int, list[Token]]] = []

        for index, parsed in find_invocations(state.tokens):
            paragraph = state.tokens[index]
            line = paragraph.map[0] if paragraph.map else None
            resolution = try_resolve(parsed, config, state.env, line)
            if resolution is None:
                continue
            pending.append((index, replacement_tokens(resolution, paragraph)))

        # Splice from the end so earlier indices stay valid.
        for index, tokens in reversed(pending):
            state.tokens[index : index + PARAGRAPH_SPAN] = tokens

    return include_code


def include_code_plugin(md: MarkdownIt, config: IncludeCodeConfig | None = None, **options: Any) -> None:
    """
    Register the ``#include_code`` core rule on a parser.

    Args:
        md: Parser to extend
        config: Resolution settings; built from ``options`` when omitted
        **options: Fields of :class:`IncludeCodeConfig`
    """
    config = config or IncludeCodeConfig(**options)
    md.core.ruler.push("include_code", make_include_code_rule(config))
