"""Output formatters: content filtering and artifact persistence."""

from .content_filter import FilterState, filter_lines, filter_markdown
from .artifact_writer import ArtifactWriter, write_atomic

__all__ = [
    "FilterState",
    "filter_lines",
    "filter_markdown",
    "ArtifactWriter",
    "write_atomic",
]
