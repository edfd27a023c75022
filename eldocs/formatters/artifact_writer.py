"""
Persist pipeline outputs.

Output layout:

    <output_path>                    # components.json: {tagName: record}
    <output_path dir>/generation_metadata.json
    <docs_output_dir>/
    ├── el-button.md                 # filtered narrative document
    └── el-button.d.ts               # verbatim declaration copy

Each file is written atomically (temp file + rename). Per-component
failures are reported to the caller and do not undo earlier components;
failing to write the aggregate catalog raises ArtifactWriteError.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union
import logging

from eldocs.exceptions import ArtifactWriteError
from eldocs.schemas import ComponentModel, ExtractionOutput

logger = logging.getLogger(__name__)

METADATA_FILENAME = "generation_metadata.json"


def write_atomic(path: Path, content: Union[str, bytes]) -> None:
    """Write text or bytes to `path` so readers never see a partial file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        if isinstance(content, bytes):
            with os.fdopen(fd, "wb") as f:
                f.write(content)
        else:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class ArtifactWriter:
    """Write the component catalog and per-component documents."""

    def __init__(self, output_path: Path, docs_output_dir: Path):
        """
        Initialize the writer.

        Args:
            output_path: Path of the aggregate catalog JSON
            docs_output_dir: Directory for `<tagName>.md` / `<tagName>.d.ts`
        """
        self.output_path = Path(output_path)
        self.docs_output_dir = Path(docs_output_dir)

    def write_component_docs(
        self,
        tag_name: str,
        filtered_markdown: str,
        declaration_path: Optional[Path],
    ) -> bool:
        """
        Write one component's documents.

        The declaration is copied byte for byte from `declaration_path`.

        Returns:
            True on success, False if any document could not be written
        """
        try:
            write_atomic(self.docs_output_dir / f"{tag_name}.md", filtered_markdown)
            if declaration_path is not None:
                write_atomic(self.docs_output_dir / f"{tag_name}.d.ts", Path(declaration_path).read_bytes())
        except OSError as e:
            logger.error(f"Failed to write documents for {tag_name}: {e}")
            return False
        return True

    def write_catalog(self, components: Dict[str, ComponentModel]) -> Path:
        """
        Write the aggregate catalog, keyed by tag name in insertion order.

        Raises:
            ArtifactWriteError: If the catalog cannot be written
        """
        payload = {tag: record.to_json_dict() for tag, record in components.items()}
        try:
            write_atomic(
                self.output_path,
                json.dumps(payload, indent=2, ensure_ascii=False) + "\n",
            )
        except OSError as e:
            raise ArtifactWriteError(f"Failed to write catalog {self.output_path}: {e}") from e

        logger.info(f"Wrote {len(payload)} components to {self.output_path}")
        return self.output_path

    def write_metadata(self, output: ExtractionOutput) -> Path:
        """Write the run summary next to the catalog."""
        metadata_path = self.output_path.parent / METADATA_FILENAME
        write_atomic(metadata_path, output.model_dump_json(indent=2))
        return metadata_path
