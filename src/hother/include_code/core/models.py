"""
Core models for snippet extraction.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MarkerKind(str, Enum):
    """Kind of snippet boundary marker."""

    START = "start"
    END = "end"


class MarkerHit(BaseModel):
    """A single `docs:start` / `docs:end` marker found in a source file."""

    model_config = ConfigDict(frozen=True)

    kind: MarkerKind = Field(..., description="Whether the marker opens or closes a snippet")
    line_number: int = Field(..., ge=1, description="1-based line of the marker")
    identifiers: tuple[str, ...] = Field(..., description="Colon-split identifier list")
    text: str = Field(..., description="Matched marker text, comment prefix included")
    whole_line: bool = Field(default=True, description="Marker is the only content of its line")

    def names(self, identifier: str) -> bool:
        """Check exact membership of an identifier in this marker's list."""
        return identifier in self.identifiers


class ExtractionResult(BaseModel):
    """Snippet body plus the marker lines it was taken from."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Processed, dedented snippet text")
    start_line: int = Field(..., ge=1, description="1-based line of the start marker in the original file")
    end_line: int = Field(..., ge=1, description="1-based line of the end marker in the original file")

    @property
    def line_count(self) -> int:
        """Number of lines in the extracted body."""
        return len(self.code.splitlines())

    def log_context(self) -> dict[str, Any]:
        """Get context dict for structured logging."""
        return {
            "start_line": self.start_line,
            "end_line": self.end_line,
            "line_count": self.line_count,
        }


class SourceSnippet(BaseModel):
    """An extraction together with its permalink."""

    model_config = ConfigDict(frozen=True)

    code: str
    source_link: str = Field(..., description="GitHub URL pointing at the marker line range")
    start_line: int = Field(..., ge=1)
    end_line: int = Field(..., ge=1)
