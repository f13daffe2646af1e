"""Tests for source links."""

import pytest
from pydantic import ValidationError

from hother.include_code import IncludeCodeConfig, build_source_link, extract_code_with_metadata
from hother.include_code.core.links import resolve_path, rooted


class TestBuildSourceLink:
    """Test GitHub permalink construction."""

    def test_default_tag(self):
        """Test that master is used without a commit tag."""
        link = build_source_link("/src/a.ts", 3, 7)

        assert link == "https://github.com/AztecProtocol/aztec-packages/blob/master//src/a.ts#L3-L7"

    def test_commit_tag_and_repository(self):
        """Test explicit revision and repository."""
        link = build_source_link("src/a.ts", 1, 2, commit_tag="v1.2.0", repository="acme/widgets")

        assert link == "https://github.com/acme/widgets/blob/v1.2.0//src/a.ts#L1-L2"

    def test_rooted(self):
        """Test leading slash normalization."""
        assert rooted("src/a.ts") == "/src/a.ts"
        assert rooted("/src/a.ts") == "/src/a.ts"

    def test_resolve_path_stays_under_root(self, tmp_path):
        """Test that a rooted path is joined below the root directory."""
        assert resolve_path(tmp_path, "/src/a.ts") == tmp_path / "src" / "a.ts"


class TestExtractCodeWithMetadata:
    """Test extraction with link generation."""

    def test_snippet_and_link(self, tmp_path, counter_source):
        """Test the combined result."""
        snippet = extract_code_with_metadata(tmp_path, "/src/counter.ts", "foo", commit_tag="abc123")

        assert snippet.code.startswith("let x = 1;")
        assert snippet.source_link == "https://github.com/AztecProtocol/aztec-packages/blob/abc123//src/counter.ts#L3-L7"
        assert (snippet.start_line, snippet.end_line) == (3, 7)


class TestIncludeCodeConfig:
    """Test resolver configuration."""

    def test_defaults(self, tmp_path, monkeypatch):
        """Test default root, tag and repository."""
        monkeypatch.chdir(tmp_path)
        config = IncludeCodeConfig()

        assert config.root_dir.resolve() == tmp_path.resolve()
        assert config.commit_tag is None
        assert config.repository == "AztecProtocol/aztec-packages"

    def test_repository_validated(self):
        """Test that repository must be org/repo."""
        with pytest.raises(ValidationError):
            IncludeCodeConfig(repository="https://github.com/acme/widgets")

    def test_frozen(self, tmp_path):
        """Test that configuration is immutable."""
        config = IncludeCodeConfig(root_dir=tmp_path)

        with pytest.raises(ValidationError):
            config.commit_tag = "v1"
