"""
Configuration for resolving ``#include_code`` invocations.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from hother.include_code.core.links import DEFAULT_REPOSITORY


class IncludeCodeConfig(BaseModel):
    """Where snippets are read from and where source links point."""

    model_config = ConfigDict(frozen=True)

    root_dir: Path = Field(default_factory=Path.cwd, description="Directory invocation paths are relative to")
    commit_tag: str | None = Field(default=None, description="Revision used in source links (master when unset)")
    repository: str = Field(
        default=DEFAULT_REPOSITORY,
        pattern=r"^[\w.-]+/[\w.-]+$",
        description="GitHub <org>/<repo> used in source links",
    )
