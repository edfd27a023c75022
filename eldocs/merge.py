"""
Merge catalog entries, declaration scans and markdown analyses into one
ComponentModel per component.

Precedence per field:
- props:   catalog decides presence and order; type from declarations first
- events:  markdown > catalog > declarations, first name wins
- slots:   catalog only
- methods: markdown only (bare identifier entry, then "default")

Duplicates are dropped by an explicit seen-names set before insertion, so
an earlier source is never overwritten by a later one.
"""

from typing import Any, Dict, Iterable, List, Optional, Set
import logging

from eldocs.extractors.markdown_analyzer import DEFAULT_SUBTYPE
from eldocs.schemas import (
    CatalogEntry,
    ComponentEvent,
    ComponentMethod,
    ComponentModel,
    ComponentProp,
    ComponentSlot,
    DeclarationScan,
    MarkdownAnalysis,
    TypeInfo,
    classify_type,
)

logger = logging.getLogger(__name__)


def type_text(value: Any) -> Optional[str]:
    """
    Flatten a catalog type value into declaration-style text.

    Catalogs give types as a string, a list of alternatives, or an object
    with a `name`/`type` key.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        parts = [type_text(v) for v in value]
        return " | ".join(p for p in parts if p)
    if isinstance(value, dict):
        return type_text(value.get("name") or value.get("type"))
    return str(value)


def _scalar(value: Any):
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def _first_by_name(items: Iterable[Any], name: str):
    for item in items:
        if item.name == name:
            return item
    return None


def merge_props(catalog_props: List[Dict[str, Any]], scanned: List[ComponentProp]) -> List[ComponentProp]:
    """
    Merge catalog props with scanned declarations.

    Scanner-only props are dropped. Description and `required` fall back
    from the catalog to the scanner; the default comes only from the catalog.
    """
    merged: List[ComponentProp] = []
    seen: Set[str] = set()

    for catalog_prop in catalog_props:
        name = catalog_prop.get("name")
        if not name or name in seen:
            continue
        seen.add(name)

        scanned_prop = _first_by_name(scanned, name)

        if scanned_prop is not None:
            prop_type = scanned_prop.type
        else:
            prop_type = classify_type(type_text(catalog_prop.get("type")) or "unknown")

        description = catalog_prop.get("description")
        if description is None and scanned_prop is not None:
            description = scanned_prop.description

        required = catalog_prop.get("required")
        if required is None and scanned_prop is not None:
            required = scanned_prop.required

        fields: Dict[str, Any] = {
            "name": name,
            "description": description,
            "type": prop_type,
            "required": required,
        }
        if "default" in catalog_prop:
            fields["default"] = _scalar(catalog_prop["default"])
        merged.append(ComponentProp(**fields))

    return merged


def _catalog_event_parameters(catalog_event: Dict[str, Any]) -> List[TypeInfo]:
    raw = type_text(catalog_event.get("type"))
    if raw:
        return [TypeInfo(raw=raw)]

    parameters = []
    for argument in catalog_event.get("arguments") or []:
        arg_name = argument.get("name", "")
        arg_type = type_text(argument.get("type"))
        text = f"{arg_name}: {arg_type}" if arg_type else arg_name
        if text:
            parameters.append(TypeInfo(raw=text))
    return parameters


def merge_events(
    catalog_events: List[Dict[str, Any]],
    scanned: List[ComponentEvent],
    markdown_events: Optional[List[ComponentEvent]] = None,
) -> List[ComponentEvent]:
    """
    Merge events with precedence markdown > catalog > declarations.

    Catalog events take parameters and signature from a same-named scanned
    event when one exists, else from their own type text.
    """
    merged: List[ComponentEvent] = []
    seen: Set[str] = set()

    for event in markdown_events or []:
        if event.name in seen:
            continue
        seen.add(event.name)
        merged.append(event)

    for catalog_event in catalog_events:
        name = catalog_event.get("name")
        if not name or name in seen:
            continue
        seen.add(name)

        scanned_event = _first_by_name(scanned, name)
        if scanned_event is not None:
            parameters = scanned_event.parameters
            ts = scanned_event.ts
        else:
            parameters = _catalog_event_parameters(catalog_event)
            ts = None

        merged.append(ComponentEvent(
            name=name,
            description=catalog_event.get("description"),
            parameters=parameters,
            ts=ts,
        ))

    for event in scanned:
        if event.name in seen:
            continue
        seen.add(event.name)
        merged.append(event)

    return merged


def catalog_slots(catalog_slots: List[Dict[str, Any]]) -> List[ComponentSlot]:
    """Slots straight from the catalog; scoped-slot properties become parameters."""
    slots: List[ComponentSlot] = []
    seen: Set[str] = set()

    for slot in catalog_slots:
        name = slot.get("name")
        if not name or name in seen:
            continue
        seen.add(name)

        scope = slot.get("vue-properties") or slot.get("props") or []
        parameters = None
        if scope:
            parameters = []
            for prop in scope:
                prop_type = type_text(prop.get("type"))
                raw = f"{prop.get('name', '')}: {prop_type}" if prop_type else prop.get("name", "")
                parameters.append(TypeInfo(raw=raw))

        slots.append(ComponentSlot(
            name=name,
            description=slot.get("description"),
            parameters=parameters,
        ))

    return slots


def _unique_by_name(items: Iterable[Any]) -> List[Any]:
    unique = []
    seen: Set[str] = set()
    for item in items:
        if item.name in seen:
            continue
        seen.add(item.name)
        unique.append(item)
    return unique


def select_subtype(mapping: Dict[str, List[Any]], identifier: str) -> List[Any]:
    """Entry for the bare identifier, falling back to the 'default' key."""
    if identifier in mapping:
        return mapping[identifier]
    return mapping.get(DEFAULT_SUBTYPE, [])


class ComponentMerger:
    """
    Build ComponentModel records.

    Example:
        >>> merger = ComponentMerger(tag_prefix="el", doc_url_template=".../{name}")
        >>> record = merger.merge("button", entry, scan, analysis)
    """

    def __init__(self, tag_prefix: str, doc_url_template: str):
        self.tag_prefix = tag_prefix
        self.doc_url_template = doc_url_template

    def merge(
        self,
        identifier: str,
        entry: Optional[CatalogEntry],
        scan: DeclarationScan,
        analysis: MarkdownAnalysis,
    ) -> ComponentModel:
        """
        Merge all sources for one component. Never fails on missing sources.

        Args:
            identifier: Bare component identifier, e.g. 'button'
            entry: Catalog entry, or None when the catalog has none
            scan: Declaration scan (empty when no declaration exists)
            analysis: Markdown analysis (empty when no document exists)
        """
        markdown_events = select_subtype(analysis.events_by_subtype, identifier)
        methods: List[ComponentMethod] = _unique_by_name(
            select_subtype(analysis.methods_by_subtype, identifier)
        )

        if entry is not None:
            props = merge_props(entry.props, scan.props)
            events = merge_events(entry.declared_events, scan.events, markdown_events)
            slots = catalog_slots(entry.slots)
            description = entry.description
        else:
            props = []
            events = merge_events([], scan.events, markdown_events)
            slots = []
            description = None

        if description is None:
            description = analysis.description

        record = ComponentModel(
            tag_name=f"{self.tag_prefix}-{identifier}",
            description=description,
            doc_url=self.doc_url_template.format(name=identifier),
            props=props,
            events=events,
            slots=slots,
            methods=methods,
        )

        logger.debug(
            f"Merged {record.tag_name}: {len(props)} props, {len(events)} events, "
            f"{len(slots)} slots, {len(methods)} methods"
        )
        return record
