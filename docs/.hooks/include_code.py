"""
MkDocs hook resolving ``#include_code`` invocations in page Markdown.

Enable it in ``mkdocs.yml``::

    hooks:
      - docs/.hooks/include_code.py

The source root defaults to the directory holding ``mkdocs.yml``; set
``extra.include_code.commit_tag`` (or the ``INCLUDE_CODE_COMMIT_TAG``
environment variable) to pin source links to a revision.
"""

import os
from pathlib import Path
from typing import Any

from hother.include_code import DIAGNOSTICS_KEY, IncludeCodeConfig, include_code_in_markdown
from hother.include_code.utils.logging import get_logger

logger = get_logger("mkdocs.hooks.include_code")


def config_from_mkdocs(config: Any) -> IncludeCodeConfig:
    """Build the resolver settings from the MkDocs configuration."""
    extra = (config.get("extra") or {}).get("include_code", {})
    root_dir = Path(config["config_file_path"]).parent
    return IncludeCodeConfig(
        root_dir=root_dir / extra.get("root_dir", "."),
        commit_tag=os.environ.get("INCLUDE_CODE_COMMIT_TAG") or extra.get("commit_tag"),
        **({"repository": extra["repository"]} if "repository" in extra else {}),
    )


def on_page_markdown(markdown: str, page: Any, config: Any, files: Any) -> str:
    env: dict[str, Any] = {}
    result = include_code_in_markdown(markdown, config_from_mkdocs(config), env)
    for diagnostic in env.get(DIAGNOSTICS_KEY, []):
        logger.warning(
            "Unresolved #include_code in page",
            page=getattr(page.file, "src_path", None),
            line=diagnostic.line,
            message=diagnostic.message,
        )
    return result
