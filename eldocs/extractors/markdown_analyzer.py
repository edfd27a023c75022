"""
Structural analysis of narrative component documentation.

Renders markdown to an HTML tree (Python-Markdown with the tables and
fenced_code extensions) and walks it with BeautifulSoup to extract:
- The leading description paragraph
- Code block examples
- Methods and events tables, keyed by the component sub-type named in
  the heading that introduces them

Composite components (a table with a nested pagination, a cascader with a
panel) document several parts in one file; the sub-type key keeps their
tables apart. Consumers currently read only the bare-identifier entry.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional
import logging

import markdown
from bs4 import BeautifulSoup, Tag

from eldocs.extractors.keywords import (
    PARAMETER_PLACEHOLDERS,
    classify_section,
    classify_subtype,
    header_matches,
    is_placeholder_name,
)
from eldocs.schemas import (
    CodeExample,
    ComponentEvent,
    ComponentMethod,
    MarkdownAnalysis,
    TypeInfo,
)

logger = logging.getLogger(__name__)

DEFAULT_SUBTYPE = "default"

MARKDOWN_EXTENSIONS = ["tables", "fenced_code"]


@dataclass
class SubtypeTracker:
    """
    Accumulator threaded through the heading scan.

    `active` starts as the bare component identifier and only changes when
    a methods/events heading names a known sub-type.
    """
    active: str
    methods: Dict[str, List[ComponentMethod]] = field(default_factory=dict)
    events: Dict[str, List[ComponentEvent]] = field(default_factory=dict)

    def observe_heading(self, heading: str) -> None:
        subtype = classify_subtype(heading)
        if subtype:
            self.active = subtype

    def add_methods(self, methods: List[ComponentMethod]) -> None:
        self.methods.setdefault(self.active, []).extend(methods)

    def add_events(self, events: List[ComponentEvent]) -> None:
        self.events.setdefault(self.active, []).extend(events)


class MarkdownAnalyzer:
    """
    Extract description, examples and API tables from one document.

    Example:
        >>> analysis = MarkdownAnalyzer().analyze(text, "table")
        >>> analysis.methods_by_subtype["table"]
    """

    EXAMPLE_TITLE = "Example {index}"

    def analyze(self, text: str, identifier: Optional[str] = None) -> MarkdownAnalysis:
        """
        Analyze a narrative document.

        Args:
            text: Raw markdown (may be empty)
            identifier: Bare component identifier seeding sub-type tracking

        Returns:
            MarkdownAnalysis with description, examples and per-sub-type tables
        """
        soup = self.to_tree(text)
        tracker = SubtypeTracker(active=identifier or DEFAULT_SUBTYPE)

        for heading in soup.find_all("h3"):
            heading_text = heading.get_text().strip()
            category = classify_section(heading_text)
            if category is None:
                continue

            tracker.observe_heading(heading_text)

            table = heading.find_next_sibling("table")
            if table is None:
                logger.debug(f"No table after heading '{heading_text}'")
                continue

            if category == "methods":
                tracker.add_methods(self.parse_methods_table(table))
            else:
                tracker.add_events(self.parse_events_table(table))

        return MarkdownAnalysis(
            description=self.extract_description(soup),
            examples=self.extract_examples(soup),
            methods_by_subtype=tracker.methods,
            events_by_subtype=tracker.events,
        )

    @staticmethod
    def to_tree(text: str) -> BeautifulSoup:
        html = markdown.markdown(text or "", extensions=MARKDOWN_EXTENSIONS)
        return BeautifulSoup(html, "html.parser")

    @staticmethod
    def extract_description(soup: BeautifulSoup) -> str:
        paragraph = soup.find("p")
        return paragraph.get_text().strip() if paragraph else ""

    def extract_examples(self, soup: BeautifulSoup) -> List[CodeExample]:
        examples = []
        for index, block in enumerate(soup.select("pre code"), start=1):
            code = block.get_text().strip()
            if code:
                examples.append(CodeExample(
                    title=self.EXAMPLE_TITLE.format(index=index),
                    code=code,
                ))
        return examples

    def parse_methods_table(self, table: Tag) -> List[ComponentMethod]:
        return [
            ComponentMethod(name=name, description=description, parameters=parameters)
            for name, description, parameters in self._table_rows(table, "methods")
        ]

    def parse_events_table(self, table: Tag) -> List[ComponentEvent]:
        return [
            ComponentEvent(name=name, description=description, parameters=parameters)
            for name, description, parameters in self._table_rows(table, "events")
        ]

    def _table_rows(self, table: Tag, category: str):
        """Yield (name, description, parameters) for qualifying body rows."""
        headers = [th.get_text().strip() for th in table.select("thead th")]
        if not header_matches(category, headers):
            logger.debug(f"Table header {headers} is not a {category} table")
            return

        for row in table.select("tbody tr"):
            cells = [td.get_text().strip() for td in row.find_all("td")]
            if len(cells) < 3:
                continue

            name, description, raw_parameters = cells[0], cells[1], cells[2]
            if is_placeholder_name(category, name):
                continue

            if raw_parameters in PARAMETER_PLACEHOLDERS:
                parameters = []
            else:
                parameters = [TypeInfo(raw=raw_parameters)]

            yield name, description, parameters


def analyze_markdown(text: str, identifier: Optional[str] = None) -> MarkdownAnalysis:
    """
    Convenience function to analyze one narrative document.

    Args:
        text: Raw markdown
        identifier: Bare component identifier, e.g. 'table'

    Returns:
        MarkdownAnalysis
    """
    return MarkdownAnalyzer().analyze(text, identifier)
