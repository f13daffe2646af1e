#!/usr/bin/env python3
"""
Extract a snippet from this very file.
"""

# docs:start:imports
from pathlib import Path

from hother.include_code import extract_snippet

# docs:end:imports


# docs:start:main
def main() -> None:
    """Run the example."""
    # docs:start:example
    result = extract_snippet(Path(__file__), "imports")  # highlight-next-line:example

    print(f"  Lines {result.start_line}-{result.end_line}:")
    print(result.code)
    # docs:end:example


# docs:end:main


if __name__ == "__main__":
    main()
