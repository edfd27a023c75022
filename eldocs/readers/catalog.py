"""
Structured catalog reader.

Loads a web-types style JSON catalog and resolves per-component entries.
The catalog is the only fatal source of a run: without it there is
nothing authoritative to merge against.
"""

import json
from pathlib import Path
from typing import List, Dict, Optional, Any
import logging

from pydantic import ValidationError

from eldocs.exceptions import CatalogNotFoundError, CatalogFormatError
from eldocs.schemas import CatalogEntry

logger = logging.getLogger(__name__)


def pascal_case(identifier: str) -> str:
    """'date-picker' -> 'DatePicker'."""
    return "".join(part[:1].upper() + part[1:] for part in identifier.split("-") if part)


class ComponentCatalog:
    """
    In-memory view of the structured catalog.

    Entries live under a fixed namespace:
    `contributions.html["vue-components"]` (older web-types files use
    `contributions.html.tags`).
    """

    NAMESPACE_KEYS = ("vue-components", "tags")

    def __init__(self, entries: List[CatalogEntry], tag_prefix: str = "el"):
        self.entries = entries
        self.tag_prefix = tag_prefix

    @classmethod
    def load(cls, catalog_path: Path, tag_prefix: str = "el") -> "ComponentCatalog":
        """
        Read and validate the catalog file.

        Raises:
            CatalogNotFoundError: If the file does not exist
            CatalogFormatError: If the file is not a catalog
        """
        catalog_path = Path(catalog_path)
        if not catalog_path.exists():
            raise CatalogNotFoundError(f"Catalog not found: {catalog_path}")

        logger.info(f"Loading catalog: {catalog_path}")
        try:
            data = json.loads(catalog_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise CatalogFormatError(f"Catalog is not valid JSON: {catalog_path}: {e}") from e

        raw_entries = cls._element_list(data)
        if raw_entries is None:
            raise CatalogFormatError(
                f"Catalog has no contributions.html component list: {catalog_path}"
            )

        entries = []
        for raw in raw_entries:
            try:
                entries.append(CatalogEntry.model_validate(raw))
            except ValidationError as e:
                logger.debug(f"Skipping malformed catalog entry {raw!r}: {e}")

        logger.info(f"Catalog holds {len(entries)} component entries")
        return cls(entries, tag_prefix=tag_prefix)

    @classmethod
    def _element_list(cls, data: Any) -> Optional[List[Dict[str, Any]]]:
        if not isinstance(data, dict):
            return None
        html = (data.get("contributions") or {}).get("html")
        if not isinstance(html, dict):
            return None
        for key in cls.NAMESPACE_KEYS:
            if isinstance(html.get(key), list):
                return html[key]
        return None

    def find(self, identifier: str) -> Optional[CatalogEntry]:
        """
        Find the entry for a bare component identifier.

        Tries a case-insensitive match on the namespaced tag first
        ('el-button'), then the prefixed PascalCase name ('ElButton').
        """
        tag = f"{self.tag_prefix}-{identifier}".lower()
        for entry in self.entries:
            if entry.name.lower() == tag:
                return entry

        pascal = pascal_case(self.tag_prefix) + pascal_case(identifier)
        for entry in self.entries:
            if entry.name == pascal:
                return entry

        return None

    def __len__(self) -> int:
        return len(self.entries)
