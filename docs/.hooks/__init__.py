"""MkDocs hooks for the Include Code documentation.

This package provides custom MkDocs hooks for:
- Resolving #include_code invocations into fenced code blocks
- Creating GitHub source links for extracted snippets
"""

__all__ = ["include_code"]
