"""
Lookup over a generated component catalog.

Every miss raises ComponentLookupError naming the key and listing what
does exist; a query never answers a miss with an empty result.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import logging

from pydantic import ValidationError

from eldocs.exceptions import CatalogFormatError, ComponentLookupError
from eldocs.schemas import CodeExample, ComponentModel

logger = logging.getLogger(__name__)

DEMO_OPEN = ":::demo"
DEMO_CLOSE = ":::"
FENCE_PREFIX = "```"


def parse_demo_examples(markdown_text: str) -> List[CodeExample]:
    """
    Split a filtered document into `:::demo` examples.

    Inside a demo block the first non-fence line is the title, the second
    the description, and the first fenced block the code.
    """
    examples = []
    sections = markdown_text.split(DEMO_OPEN)

    for index, section in enumerate(sections[1:], start=1):
        end = section.find(DEMO_CLOSE)
        if end == -1:
            continue

        title = ""
        description = ""
        in_code = False
        code_lines: List[str] = []

        for line in section[:end].strip().split("\n"):
            if not in_code:
                if line.strip().startswith(FENCE_PREFIX):
                    in_code = True
                    continue
                if not title:
                    title = line.strip()
                elif not description:
                    description = line.strip()
            else:
                if line.strip().startswith(FENCE_PREFIX):
                    break
                code_lines.append(line)

        if code_lines:
            examples.append(CodeExample(
                title=title or f"Example {index}",
                description=description,
                code="\n".join(code_lines).strip(),
            ))

    return examples


class ComponentIndex:
    """
    Keyed access to component records.

    Example:
        >>> index = ComponentIndex.load(Path("data/components.json"), Path("data/docs"))
        >>> props, total = index.get_props("el-button", "type")
    """

    FIELDS = {
        "props": "prop",
        "events": "event",
        "slots": "slot",
        "methods": "method",
    }

    def __init__(self, components: Dict[str, ComponentModel], docs_dir: Optional[Path] = None):
        self.components = components
        self.docs_dir = Path(docs_dir) if docs_dir else None

    @classmethod
    def load(cls, catalog_path: Path, docs_dir: Optional[Path] = None) -> "ComponentIndex":
        """
        Load a catalog written by ArtifactWriter.

        Raises:
            FileNotFoundError: If the catalog does not exist
            CatalogFormatError: If the catalog is not a JSON object of records
        """
        catalog_path = Path(catalog_path)
        if not catalog_path.exists():
            raise FileNotFoundError(f"Component catalog not found: {catalog_path}")

        try:
            data = json.loads(catalog_path.read_text(encoding="utf-8"))
        except ValueError as e:
            raise CatalogFormatError(f"Invalid JSON in component catalog {catalog_path}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogFormatError(f"Component catalog {catalog_path} is not a JSON object")

        try:
            components = {tag: ComponentModel.model_validate(record) for tag, record in data.items()}
        except ValidationError as e:
            raise CatalogFormatError(f"Invalid component record in {catalog_path}: {e}") from e

        logger.debug(f"Loaded {len(components)} components from {catalog_path}")
        return cls(components, docs_dir if docs_dir is not None else catalog_path.parent / "docs")

    def tag_names(self) -> List[str]:
        return list(self.components)

    def get_component(self, tag_name: str) -> ComponentModel:
        try:
            return self.components[tag_name]
        except KeyError:
            raise ComponentLookupError("component", tag_name, self.components) from None

    def _get_field(self, field: str, tag_name: str, name: Optional[str]) -> Tuple[List[Any], int]:
        component = self.get_component(tag_name)
        items = list(getattr(component, field))
        total = len(items)

        if name:
            matches = [item for item in items if item.name == name]
            if not matches:
                raise ComponentLookupError(
                    self.FIELDS[field], name, [item.name for item in items], scope=tag_name
                )
            items = matches

        return items, total

    def get_props(self, tag_name: str, name: Optional[str] = None):
        """Props of a component, optionally narrowed to one name. Returns (items, total)."""
        return self._get_field("props", tag_name, name)

    def get_events(self, tag_name: str, name: Optional[str] = None):
        return self._get_field("events", tag_name, name)

    def get_slots(self, tag_name: str, name: Optional[str] = None):
        return self._get_field("slots", tag_name, name)

    def get_methods(self, tag_name: str, name: Optional[str] = None):
        return self._get_field("methods", tag_name, name)

    def search(self, keyword: str) -> List[ComponentModel]:
        """Case-insensitive substring search over tag names and descriptions."""
        needle = keyword.lower()
        return [
            component
            for tag, component in self.components.items()
            if needle in tag.lower() or needle in (component.description or "").lower()
        ]

    def get_examples(self, tag_name: str, index: Optional[int] = None) -> Tuple[List[CodeExample], int]:
        """
        Demo examples from the component's filtered document.

        Raises:
            ComponentLookupError: For an unknown tag or an out-of-range index
        """
        self.get_component(tag_name)

        examples: List[CodeExample] = []
        if self.docs_dir is not None:
            doc_path = self.docs_dir / f"{tag_name}.md"
            if doc_path.is_file():
                examples = parse_demo_examples(doc_path.read_text(encoding="utf-8"))

        total = len(examples)
        if index is not None:
            if not 0 <= index < total:
                raise ComponentLookupError(
                    "example", str(index), [str(i) for i in range(total)], scope=tag_name
                )
            examples = [examples[index]]

        return examples, total
