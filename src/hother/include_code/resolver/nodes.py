"""
Resolution of parsed invocations into output blocks.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hother.include_code.config import IncludeCodeConfig
from hother.include_code.core.exceptions import IncludeCodeError
from hother.include_code.core.links import extract_code_with_metadata, rooted

from .macro import ParsedMacro

DIAGNOSTIC_SOURCE = "include-code"


class Resolution(BaseModel):
    """What an invocation is replaced with."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Snippet body")
    info: str = Field(default="", description="Fence info string: language followed by metadata")
    link_html: str | None = Field(default=None, description="Attribution markup, None when suppressed")


class Diagnostic(BaseModel):
    """A non-fatal problem found while resolving a document."""

    model_config = ConfigDict(frozen=True)

    message: str
    line: int | None = Field(default=None, description="0-based line of the invocation in the document")
    source: str = DIAGNOSTIC_SOURCE
    identifier: str | None = None
    file_path: str | None = None

    def log_context(self) -> dict[str, Any]:
        """Get context dict for structured logging."""
        return {
            "identifier": self.identifier,
            "file_path": self.file_path,
            "line": self.line,
        }


def code_block_info(parsed: ParsedMacro) -> str:
    """Build the fence info string, e.g. ``ts title="foo" showLineNumbers``."""
    meta: list[str] = []
    if not parsed.options.no_title:
        meta.append(f'title="{parsed.identifier}"')
    if not parsed.options.no_line_numbers:
        meta.append("showLineNumbers")
    return " ".join([parsed.language, *meta])


def source_link_html(source_link: str, label: str) -> str:
    """Attribution anchor; downstream styling depends on this exact wrapper."""
    return (
        f'<sup><sub><a href="{source_link}" target="_blank" rel="noopener noreferrer">'
        f"Source code: {label}</a></sub></sup>"
    )


def resolve_invocation(parsed: ParsedMacro, config: IncludeCodeConfig) -> Resolution:
    """
    Extract the snippet an invocation asks for.

    Raises:
        IncludeCodeError: If the markers cannot be resolved
        OSError: If the file cannot be read
    """
    snippet = extract_code_with_metadata(
        config.root_dir,
        rooted(parsed.file_path),
        parsed.identifier,
        commit_tag=config.commit_tag,
        repository=config.repository,
    )

    if parsed.is_raw:
        return Resolution(code=snippet.code)

    link_html = None
    if not parsed.options.no_source_link:
        link_html = source_link_html(snippet.source_link, f"{parsed.file_path}#L{parsed.identifier}")

    return Resolution(code=snippet.code, info=code_block_info(parsed), link_html=link_html)


def diagnostic_for(parsed: ParsedMacro, error: Exception, line: int | None = None) -> Diagnostic:
    """Describe a failed invocation."""
    message = f"Error processing #include_code macro: {error}"
    if not isinstance(error, IncludeCodeError):
        message = f'{message} (identifier "{parsed.identifier}", file "{parsed.file_path}")'
    return Diagnostic(
        message=message,
        line=line,
        identifier=parsed.identifier,
        file_path=parsed.file_path,
    )
