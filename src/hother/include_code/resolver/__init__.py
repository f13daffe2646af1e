"""Resolution of ``#include_code`` invocations in Markdown documents."""

from .macro import MacroOptions, ParsedMacro, parse_macro
from .nodes import Diagnostic, Resolution, code_block_info, resolve_invocation, source_link_html
from .plugin import DIAGNOSTICS_KEY, find_invocations, include_code_plugin
from .text import include_code_in_markdown

__all__ = [
    # Parsing
    "MacroOptions",
    "ParsedMacro",
    "parse_macro",
    # Resolution
    "Diagnostic",
    "Resolution",
    "code_block_info",
    "source_link_html",
    "resolve_invocation",
    # markdown-it-py integration
    "DIAGNOSTICS_KEY",
    "find_invocations",
    "include_code_plugin",
    "include_code_in_markdown",
]
