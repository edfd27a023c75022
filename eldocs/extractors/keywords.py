"""
Bilingual keyword tables for classifying markdown structure.

Classification is table-driven so adding a locale or a component sub-type
is a data change. Keywords are matched as substrings of heading or cell
text; English and Chinese variants sit side by side.
"""

import re
from typing import Dict, List, Optional, Tuple


# Section headings that introduce a methods or events table (level-3 headings).
SECTION_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "methods": ("Methods", "方法"),
    "events": ("Events", "事件"),
}

# Sections stripped from redistributed documents.
API_SECTION_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "props": ("Attributes", "Props", "属性"),
    "events": ("Events", "事件"),
    "methods": ("Methods", "方法"),
    "slots": ("Slots", "Slot", "插槽"),
}

# Optional sub-part prefix in an API heading, e.g. "### Table Attributes".
API_HEADING_PREFIXES: Tuple[str, ...] = (
    "Table", "Input", "Form", "Menu", "Statistic", "Carousel", "Cascader", "Tree", "Upload",
)

# Ordered sub-type rules: (sub-type, keyword groups). A rule matches when every
# group has at least one keyword in the heading. First matching rule wins.
SUBTYPE_RULES: List[Tuple[str, Tuple[Tuple[str, ...], ...]]] = [
    ("table", (("Table", "表格"),)),
    ("input", (("Input", "输入框"),)),
    ("form", (("Form", "表单"),)),
    ("menu", (("Menu", "菜单"),)),
    ("statistic", (("Statistic", "统计"),)),
    ("carousel", (("Carousel", "轮播"),)),
    ("cascader-panel", (("Cascader",), ("Panel",))),
    ("cascader", (("Cascader",),)),
    ("tree", (("Tree", "树"),)),
]

# Accepted header labels for the first three columns of API tables.
TABLE_HEADERS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...], Tuple[str, ...]]] = {
    "methods": (
        ("方法名", "Method", "Method Name"),
        ("说明", "Description"),
        ("参数", "Parameters"),
    ),
    "events": (
        ("事件名", "事件名称", "Event", "Event Name"),
        ("说明", "Description"),
        ("参数", "回调参数", "Parameters"),
    ),
}

# Parameter cells that mean "no parameters".
PARAMETER_PLACEHOLDERS = frozenset({"—", "-", "N/A", ""})

DASH_PLACEHOLDER = re.compile(r"^-{3,}$")


def classify_section(heading: str) -> Optional[str]:
    """'methods' or 'events' for a heading, methods taking priority."""
    for category, keywords in SECTION_KEYWORDS.items():
        if any(keyword in heading for keyword in keywords):
            return category
    return None


def classify_subtype(heading: str) -> Optional[str]:
    """Sub-type named by a heading, or None when no rule matches."""
    for subtype, groups in SUBTYPE_RULES:
        if all(any(keyword in heading for keyword in group) for group in groups):
            return subtype
    return None


def header_matches(category: str, headers: List[str]) -> bool:
    """True if the first three header cells fit the table kind."""
    expected = TABLE_HEADERS[category]
    if len(headers) < len(expected):
        return False
    return all(cell in labels for cell, labels in zip(headers, expected))


def is_placeholder_name(category: str, name: str) -> bool:
    """Empty cells, repeated header labels and dash rows are not records."""
    if not name or DASH_PLACEHOLDER.match(name):
        return True
    return name in TABLE_HEADERS[category][0]


def _alternation(words) -> str:
    return "|".join(re.escape(w) for w in words)


API_HEADING_PATTERN = re.compile(
    r"^###\s+(?:(?:{prefixes})\s*)?(?:{keywords})".format(
        prefixes=_alternation(API_HEADING_PREFIXES),
        keywords=_alternation(
            sorted({k for ks in API_SECTION_KEYWORDS.values() for k in ks}, key=len, reverse=True)
        ),
    ),
    re.IGNORECASE,
)


def is_api_heading(line: str) -> bool:
    """True for a level-3 heading that opens an API reference section."""
    return bool(API_HEADING_PATTERN.match(line.strip()))
