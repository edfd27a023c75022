"""Extraction components: markdown analysis and declaration scanning."""

from .markdown_analyzer import MarkdownAnalyzer, SubtypeTracker, analyze_markdown
from .declaration_scanner import DeclarationScanner, scan_declarations

__all__ = [
    "MarkdownAnalyzer",
    "SubtypeTracker",
    "analyze_markdown",
    "DeclarationScanner",
    "scan_declarations",
]
