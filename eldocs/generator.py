"""
Component documentation generator - main orchestration logic.

Ties together the readers, extractors, merge step and writers. Components
are independent of each other and processed one at a time; the only
shared state is the accumulating record collection.
"""

from datetime import datetime
from typing import Dict, List
import logging

from eldocs.config import PipelineConfig
from eldocs.extractors import DeclarationScanner, MarkdownAnalyzer
from eldocs.formatters import ArtifactWriter, filter_markdown
from eldocs.merge import ComponentMerger
from eldocs.readers import ComponentCatalog, SourceReader
from eldocs.schemas import ComponentModel, ExtractionOutput

logger = logging.getLogger(__name__)


class ComponentDocsGenerator:
    """
    Main generator for the component catalog.

    Orchestrates the pipeline:
    1. Load the structured catalog (fatal if missing)
    2. Enumerate component identifiers
    3. Per component: read sources, analyze markdown, scan declarations
    4. Merge into one ComponentModel
    5. Write filtered document, declaration copy, then the aggregate catalog
    """

    def __init__(self, config: PipelineConfig):
        """
        Initialize the generator.

        Args:
            config: Paths and naming conventions for the run
        """
        self.config = config
        self.reader = SourceReader(config.components_dir, config.docs_dir, config.types_dir)
        self.analyzer = MarkdownAnalyzer()
        self.scanner = DeclarationScanner()
        self.merger = ComponentMerger(config.tag_prefix, config.doc_url_template)
        self.writer = ArtifactWriter(config.output_path, config.docs_output_dir)

        logger.info("Initialized component docs generator")
        logger.info(f"  Source: {config.source_root}")
        logger.info(f"  Catalog: {config.catalog_path}")
        logger.info(f"  Output: {config.output_path}")

    def generate(self) -> ExtractionOutput:
        """
        Run the complete pipeline.

        Returns:
            ExtractionOutput summarizing the run

        Raises:
            CatalogNotFoundError: If the structured catalog is missing
            ArtifactWriteError: If the aggregate catalog cannot be written
        """
        logger.info("[1/4] Loading catalog...")
        catalog = ComponentCatalog.load(self.config.catalog_path, tag_prefix=self.config.tag_prefix)

        logger.info("[2/4] Enumerating components...")
        identifiers = self.reader.component_identifiers()

        output = ExtractionOutput(
            catalog_path=str(self.config.output_path),
            docs_output_dir=str(self.config.docs_output_dir),
            timestamp=datetime.now().isoformat(),
        )

        logger.info(f"[3/4] Processing {len(identifiers)} components...")
        components: Dict[str, ComponentModel] = {}
        for identifier in identifiers:
            record = self.process_component(identifier, catalog, output)
            components[record.tag_name] = record

        logger.info("[4/4] Writing catalog...")
        self.writer.write_catalog(components)

        output.total_components = len(components)
        output.total_props = sum(len(c.props) for c in components.values())
        output.total_events = sum(len(c.events) for c in components.values())
        output.total_slots = sum(len(c.slots) for c in components.values())
        output.total_methods = sum(len(c.methods) for c in components.values())
        self.writer.write_metadata(output)

        logger.info(
            f"Done: {output.total_components} components, {output.total_props} props, "
            f"{output.total_events} events, {output.total_slots} slots, "
            f"{output.total_methods} methods"
        )
        if output.failed_writes:
            logger.warning(f"Documents not written for: {', '.join(output.failed_writes)}")

        return output

    def process_component(
        self,
        identifier: str,
        catalog: ComponentCatalog,
        output: ExtractionOutput,
    ) -> ComponentModel:
        """Read, extract, merge and write documents for one component."""
        entry = catalog.find(identifier)
        if entry is None:
            logger.warning(f"No catalog entry for '{identifier}'")
            output.missing_catalog_entries.append(identifier)

        doc_text = self.reader.read_doc(identifier)
        if not self.reader.doc_path(identifier).is_file():
            output.missing_docs.append(identifier)

        declaration = self.reader.read_declaration(identifier)
        if declaration is None:
            output.missing_declarations.append(identifier)

        analysis = self.analyzer.analyze(doc_text, identifier)
        scan = self.scanner.scan(declaration)
        record = self.merger.merge(identifier, entry, scan, analysis)

        declaration_path = self.reader.declaration_path(identifier)
        if not declaration_path.is_file():
            declaration_path = None

        if not self.writer.write_component_docs(record.tag_name, filter_markdown(doc_text), declaration_path):
            output.failed_writes.append(record.tag_name)

        return record

    def build_records(self) -> List[ComponentModel]:
        """Merge every component without writing anything."""
        catalog = ComponentCatalog.load(self.config.catalog_path, tag_prefix=self.config.tag_prefix)
        records = []
        for identifier in self.reader.component_identifiers():
            analysis = self.analyzer.analyze(self.reader.read_doc(identifier), identifier)
            scan = self.scanner.scan(self.reader.read_declaration(identifier))
            records.append(self.merger.merge(identifier, catalog.find(identifier), scan, analysis))
        return records
