#!/usr/bin/env python3
"""
Render a Markdown page that includes code from the examples directory.
"""

# docs:start:imports
from pathlib import Path

from markdown_it import MarkdownIt

from hother.include_code import DIAGNOSTICS_KEY, IncludeCodeConfig, configure_logging, include_code_plugin

# docs:end:imports

PAGE = """\
# Extracting a snippet

#include_code example /examples/01_basics/01_extract_snippet.py python

The imports, without a title:

#include_code imports /examples/01_basics/01_extract_snippet.py python noTitle,noSourceLink

#include_code missing /examples/01_basics/01_extract_snippet.py python
"""


def main() -> None:
    """Run the example."""
    configure_logging(log_level="WARNING")

    # docs:start:example
    config = IncludeCodeConfig(root_dir=Path(__file__).parents[2], commit_tag="main")
    md = MarkdownIt("commonmark").use(include_code_plugin, config)

    env: dict = {}
    print(md.render(PAGE, env))

    for diagnostic in env.get(DIAGNOSTICS_KEY, []):
        print(f"  line {diagnostic.line}: {diagnostic.message}")
    # docs:end:example


if __name__ == "__main__":
    main()
