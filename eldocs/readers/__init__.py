"""Source readers: structured catalog and per-component documents."""

from .catalog import ComponentCatalog, pascal_case
from .sources import SourceReader

__all__ = ["ComponentCatalog", "SourceReader", "pascal_case"]
