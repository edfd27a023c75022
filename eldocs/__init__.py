"""
eldocs - Normalized metadata for UI component libraries.

Merges three inconsistent documentation sources per component into one
record:
- Structured catalog (web-types.json): props, events, slots, defaults
- Type declarations (*.d.ts): prop types, required flags, event signatures
- Narrative markdown (zh-CN docs): description, examples, methods/events tables

Main Components:
- Readers: Catalog and per-component source loading
- Extractors: Markdown structure analysis, declaration scanning
- Merge: Source precedence and name de-duplication
- Formatters: API-section filtering, artifact writing
- Generator: Orchestrates the entire run
- Query: Lookups against a generated catalog

Usage:
    from eldocs import ComponentDocsGenerator, PipelineConfig
    from pathlib import Path

    config = PipelineConfig(source_root=Path("../element"))
    result = ComponentDocsGenerator(config).generate()
"""

__version__ = "0.1.0"

from .schemas import (
    # Records
    TypeInfo,
    ComponentProp,
    ComponentEvent,
    ComponentSlot,
    ComponentMethod,
    ComponentModel,

    # Source fragments
    CatalogEntry,
    CodeExample,
    DeclarationScan,
    MarkdownAnalysis,

    # Output
    ExtractionOutput,
)

from .config import PipelineConfig
from .generator import ComponentDocsGenerator
from .query import ComponentIndex

__all__ = [
    # Main generator
    "ComponentDocsGenerator",
    "PipelineConfig",
    "ComponentIndex",

    # Record schemas
    "TypeInfo",
    "ComponentProp",
    "ComponentEvent",
    "ComponentSlot",
    "ComponentMethod",
    "ComponentModel",

    # Fragment schemas
    "CatalogEntry",
    "CodeExample",
    "DeclarationScan",
    "MarkdownAnalysis",

    # Output schemas
    "ExtractionOutput",
]
