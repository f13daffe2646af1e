"""
GitHub permalinks for extracted snippets.
"""

from pathlib import Path

from hother.include_code.core.extractor import extract_snippet
from hother.include_code.core.models import SourceSnippet

DEFAULT_REPOSITORY = "AztecProtocol/aztec-packages"
DEFAULT_TAG = "master"


def rooted(file_path: str) -> str:
    """Ensure a document-relative path starts with ``/``."""
    return file_path if file_path.startswith("/") else f"/{file_path}"


def resolve_path(root_dir: str | Path, file_path: str) -> Path:
    """Resolve a rooted documentation path against the source root."""
    return Path(root_dir) / rooted(file_path).lstrip("/")


def build_source_link(
    file_path: str,
    start_line: int,
    end_line: int,
    *,
    commit_tag: str | None = None,
    repository: str = DEFAULT_REPOSITORY,
) -> str:
    """
    Build the GitHub URL for a line range of a file.

    Args:
        file_path: Repository-relative path, with or without a leading slash
        start_line: First line of the range (1-based)
        end_line: Last line of the range (1-based)
        commit_tag: Revision to link against, ``master`` when omitted
        repository: ``<org>/<repo>`` on GitHub

    Returns:
        ``https://github.com/<repository>/blob/<tag>//<path>#L<start>-L<end>``
    """
    tag = commit_tag or DEFAULT_TAG
    url_text = f"{rooted(file_path)}#L{start_line}-L{end_line}"
    return f"https://github.com/{repository}/blob/{tag}/{url_text}"


def extract_code_with_metadata(
    root_dir: str | Path,
    file_path: str,
    identifier: str,
    commit_tag: str | None = None,
    repository: str = DEFAULT_REPOSITORY,
) -> SourceSnippet:
    """
    Extract a snippet and build its source link.

    Args:
        root_dir: Directory the documentation paths are relative to
        file_path: Path of the source file below ``root_dir``
        identifier: Snippet identifier
        commit_tag: Revision used in the link
        repository: ``<org>/<repo>`` used in the link

    Returns:
        The snippet with its permalink
    """
    result = extract_snippet(resolve_path(root_dir, file_path), identifier)
    return SourceSnippet(
        code=result.code,
        source_link=build_source_link(
            file_path,
            result.start_line,
            result.end_line,
            commit_tag=commit_tag,
            repository=repository,
        ),
        start_line=result.start_line,
        end_line=result.end_line,
    )
