"""
Per-component source readers.

Enumerates component identifiers from the library's package directory and
loads the narrative document and type declaration for each. Both
per-component sources are optional: a missing file is a soft miss and
yields empty text, and so does a file that is not valid UTF-8.
"""

from pathlib import Path
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class SourceReader:
    """
    Read raw per-component inputs.

    Example:
        >>> reader = SourceReader(Path("packages"), Path("docs/zh-CN"), Path("types"))
        >>> for identifier in reader.component_identifiers():
        ...     text = reader.read_doc(identifier)
    """

    DOC_SUFFIX = ".md"
    DECLARATION_SUFFIX = ".d.ts"

    def __init__(self, components_dir: Path, docs_dir: Path, types_dir: Path):
        """
        Initialize the reader.

        Args:
            components_dir: Directory with one subdirectory per component
            docs_dir: Directory of `<identifier>.md` documents
            types_dir: Directory of `<identifier>.d.ts` declarations
        """
        self.components_dir = Path(components_dir)
        self.docs_dir = Path(docs_dir)
        self.types_dir = Path(types_dir)

    def component_identifiers(self) -> List[str]:
        """
        Immediate subdirectory names of the components directory, sorted.

        Raises:
            ValueError: If the components directory does not exist
        """
        if not self.components_dir.is_dir():
            raise ValueError(f"Components directory does not exist: {self.components_dir}")

        identifiers = sorted(
            item.name
            for item in self.components_dir.iterdir()
            if item.is_dir() and not item.name.startswith(".")
        )
        logger.info(f"Found {len(identifiers)} component directories in {self.components_dir}")
        return identifiers

    def doc_path(self, identifier: str) -> Path:
        return self.docs_dir / f"{identifier}{self.DOC_SUFFIX}"

    def declaration_path(self, identifier: str) -> Path:
        return self.types_dir / f"{identifier}{self.DECLARATION_SUFFIX}"

    def read_doc(self, identifier: str) -> str:
        """Narrative markdown for `identifier`, or '' if there is none."""
        text = self._read_optional(self.doc_path(identifier), "narrative document")
        return "" if text is None else text

    def read_declaration(self, identifier: str) -> Optional[str]:
        """Declaration text for `identifier`, or None if there is none."""
        return self._read_optional(self.declaration_path(identifier), "type declaration")

    def _read_optional(self, path: Path, label: str) -> Optional[str]:
        if not path.is_file():
            logger.warning(f"No {label} for '{path.name}': {path}")
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"Skipping undecodable {label} {path}: {e}")
            return None
