"""
Strip API reference sections from narrative documents.

The redistributed document keeps prose and examples but drops the
Attributes/Events/Methods/Slots tables, which are served from the merged
catalog instead. Filtering is a single forward line scan over a small
state record; fenced code is always passed through untouched.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from eldocs.extractors.keywords import is_api_heading

FENCE_PREFIX = "```"
DEMO_MARKER = ":::demo"
TABLE_SEPARATOR = "|"

HORIZONTAL_RULE = re.compile(r"^[-+=*_]{3,}$")
LEVEL3_HEADING = re.compile(r"^###\s")


@dataclass
class FilterState:
    """Scan state: inside a code fence, inside an API section, expecting its table."""
    in_code_block: bool = False
    in_api_section: bool = False
    expect_table: bool = False

    def step(self, line: str) -> bool:
        """Advance over one line; return True if the line is kept."""
        stripped = line.strip()

        if stripped.startswith(FENCE_PREFIX):
            self.in_code_block = not self.in_code_block
            return True

        if self.in_code_block:
            return True

        if is_api_heading(stripped):
            self.in_api_section = True
            self.expect_table = True
            return False

        if not self.in_api_section:
            return True

        if self.expect_table and TABLE_SEPARATOR in stripped:
            return False

        if DEMO_MARKER in stripped:
            self.in_api_section = False
            self.expect_table = False
            return True

        if LEVEL3_HEADING.match(stripped):
            self.in_api_section = False
            self.expect_table = False
            return True

        if not stripped or HORIZONTAL_RULE.match(stripped):
            self.expect_table = False

        return False


def filter_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield the lines of a document that survive API-section removal."""
    state = FilterState()
    for line in lines:
        if state.step(line):
            yield line


def filter_markdown(text: str) -> str:
    """
    Remove recognized API reference sections from a markdown document.

    Example:
        >>> filter_markdown("intro\\n### Attributes\\n| a | b |\\n\\n### Usage\\nok")
        'intro\\n### Usage\\nok'
    """
    return "\n".join(filter_lines(text.split("\n")))
