"""
Parsing of ``#include_code`` invocations.
"""

import re

from pydantic import BaseModel, ConfigDict, Field

MACRO_PATTERN = re.compile(r"^#include_code\s+(\S+)\s+(\S+)\s+(\S+)(?:\s+(\S+))?$")

RAW_LANGUAGE = "raw"


class MacroOptions(BaseModel):
    """Flags found in the optional trailing token."""

    model_config = ConfigDict(frozen=True)

    no_title: bool = Field(default=False, description="Omit the title attribute")
    no_line_numbers: bool = Field(default=False, description="Omit showLineNumbers")
    no_source_link: bool = Field(default=False, description="Omit the attribution link")

    @classmethod
    def from_token(cls, token: str) -> "MacroOptions":
        """Substring-match the recognized flags in an options token."""
        return cls(
            no_title="noTitle" in token,
            no_line_numbers="noLineNumbers" in token,
            no_source_link="noSourceLink" in token,
        )


class ParsedMacro(BaseModel):
    """A single ``#include_code`` invocation."""

    model_config = ConfigDict(frozen=True)

    full_match: str
    identifier: str
    file_path: str
    language: str
    options: MacroOptions = Field(default_factory=MacroOptions)

    @property
    def is_raw(self) -> bool:
        """Raw invocations emit the body without code-block metadata."""
        return self.language == RAW_LANGUAGE


def parse_macro(text: str) -> ParsedMacro | None:
    """
    Parse an ``#include_code`` line.

    Format: ``#include_code identifier path/to/file.ext language [options]``

    Args:
        text: Candidate text, surrounding whitespace is ignored

    Returns:
        The parsed invocation, or None if the text is not an invocation
    """
    match = MACRO_PATTERN.match(text.strip())
    if not match:
        return None

    full_match, identifier, file_path, language, options = match.group(0, 1, 2, 3, 4)
    return ParsedMacro(
        full_match=full_match,
        identifier=identifier,
        file_path=file_path,
        language=language,
        options=MacroOptions.from_token(options or ""),
    )
