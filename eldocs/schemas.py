"""
Pydantic schemas for the component documentation pipeline.

This module defines every data model that flows through extraction, merging
and persistence. Source fragments (catalog entries, declaration scans,
markdown analyses) are transient and consumed once by the merge step;
ComponentModel is the canonical record that gets persisted.

Architecture:
- TypeInfo: Declared or inferred type, with best-effort classification
- ComponentProp / ComponentEvent / ComponentSlot / ComponentMethod: Record parts
- ComponentModel: Merged per-component record
- CatalogEntry / DeclarationScan / MarkdownAnalysis: Raw source fragments
- ExtractionOutput: Run summary written beside the catalog
"""

import re
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict, Optional, Literal, Union, Any


TypeKind = Literal[
    "string", "number", "boolean", "enum", "union", "object", "function", "unknown"
]

Scalar = Union[str, int, float, bool, None]


# ============================================================================
# RECORD SCHEMAS
# ============================================================================

class TypeInfo(BaseModel):
    """
    Declared or inferred type.

    `raw` is always the source text; `kind` and `enumValues` are best-effort
    and never feed back into `raw`.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    raw: str = Field(description="Type text as found in the source")
    kind: Optional[TypeKind] = Field(None, description="Coarse type classification")
    enum_values: Optional[List[str]] = Field(
        None,
        alias="enumValues",
        description="Literal members when kind is 'enum'"
    )
    ts: Optional[str] = Field(None, description="Original declaration text")


class ComponentProp(BaseModel):
    """Component property."""
    name: str = Field(description="Property name")
    description: Optional[str] = Field(None, description="From the catalog or declarations")
    type: TypeInfo = Field(description="Declared type")
    required: Optional[bool] = Field(None, description="Whether the prop must be passed")
    default: Scalar = Field(None, description="Default value from the catalog")


class ComponentEvent(BaseModel):
    """Component event."""
    name: str = Field(description="Event name")
    description: Optional[str] = None
    parameters: Optional[List[TypeInfo]] = Field(
        None,
        description="Callback parameters, e.g. [{raw: 'event: Event'}]"
    )
    ts: Optional[str] = Field(None, description="Full event signature from declarations")


class ComponentSlot(BaseModel):
    """Component slot."""
    name: str = Field(description="Slot name")
    description: Optional[str] = None
    parameters: Optional[List[TypeInfo]] = Field(None, description="Scoped slot parameters")


class ComponentMethod(BaseModel):
    """Component instance method."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="Method name")
    description: Optional[str] = None
    parameters: Optional[List[TypeInfo]] = None
    return_type: Optional[TypeInfo] = Field(None, alias="returnType")
    ts: Optional[str] = None


class ComponentModel(BaseModel):
    """
    Merged, canonical record for one component.

    Names inside each list are unique; the merge step guarantees it.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "tagName": "el-button",
                "description": "常用的操作按钮。",
                "docUrl": "https://element.eleme.cn/#/zh-CN/component/button",
                "props": [
                    {
                        "name": "type",
                        "type": {"raw": "'primary'|'success'", "kind": "enum"},
                        "required": False,
                        "default": "primary"
                    }
                ],
                "events": [
                    {
                        "name": "click",
                        "description": "点击时触发",
                        "parameters": [{"raw": "event: Event"}]
                    }
                ],
                "slots": [],
                "methods": []
            }
        },
    )

    tag_name: str = Field(alias="tagName", description="Namespaced tag, e.g. 'el-button'")
    description: Optional[str] = None
    doc_url: Optional[str] = Field(None, alias="docUrl")
    props: List[ComponentProp] = Field(default_factory=list)
    events: List[ComponentEvent] = Field(default_factory=list)
    slots: List[ComponentSlot] = Field(default_factory=list)
    methods: List[ComponentMethod] = Field(default_factory=list)

    def to_json_dict(self) -> Dict[str, Any]:
        """
        Dump with camelCase keys and without unset optional fields.

        A prop default that was explicitly set to null stays in the output.
        """
        data = self.model_dump(by_alias=True, exclude_none=True)
        for prop, dumped in zip(self.props, data["props"]):
            if prop.default is None and "default" in prop.model_fields_set:
                dumped["default"] = None
        return data


# ============================================================================
# SOURCE FRAGMENT SCHEMAS
# ============================================================================

class CatalogEntry(BaseModel):
    """
    One element entry of the structured catalog (web-types style).

    Sub-lists are kept as plain dicts; the merge step reads them leniently
    since catalog producers disagree on optional keys.
    """
    model_config = ConfigDict(extra="allow")

    name: str
    description: Optional[str] = None
    props: List[Dict[str, Any]] = Field(default_factory=list)
    events: List[Dict[str, Any]] = Field(default_factory=list)
    slots: List[Dict[str, Any]] = Field(default_factory=list)
    js: Optional[Dict[str, Any]] = None

    @property
    def declared_events(self) -> List[Dict[str, Any]]:
        """Events from `js.events`, falling back to top-level `events`."""
        if self.js and self.js.get("events") is not None:
            return list(self.js["events"])
        return list(self.events)


class DeclarationScan(BaseModel):
    """Result of lexically scanning a type-declaration file."""
    props: List[ComponentProp] = Field(default_factory=list)
    events: List[ComponentEvent] = Field(default_factory=list)
    slots: List[ComponentSlot] = Field(default_factory=list)


class CodeExample(BaseModel):
    """Code example pulled from a narrative document."""
    title: str = Field(description="Positional title, e.g. 'Example 1'")
    code: str = Field(description="Block text, trimmed")
    description: str = Field("", description="Demo description when available")


class MarkdownAnalysis(BaseModel):
    """Fragments extracted from one narrative document."""
    description: str = ""
    examples: List[CodeExample] = Field(default_factory=list)
    methods_by_subtype: Dict[str, List[ComponentMethod]] = Field(default_factory=dict)
    events_by_subtype: Dict[str, List[ComponentEvent]] = Field(default_factory=dict)


# ============================================================================
# OUTPUT SCHEMAS
# ============================================================================

class ExtractionOutput(BaseModel):
    """Summary of one pipeline run."""
    catalog_path: str = Field(description="Path of the written component catalog")
    docs_output_dir: str = Field(description="Directory holding filtered docs and declarations")
    timestamp: str = Field(description="ISO timestamp of the run")
    total_components: int = 0
    total_props: int = 0
    total_events: int = 0
    total_slots: int = 0
    total_methods: int = 0
    missing_catalog_entries: List[str] = Field(
        default_factory=list,
        description="Component identifiers without a catalog entry"
    )
    missing_docs: List[str] = Field(default_factory=list)
    missing_declarations: List[str] = Field(default_factory=list)
    failed_writes: List[str] = Field(
        default_factory=list,
        description="Tag names whose documents could not be written"
    )


# ============================================================================
# TYPE CLASSIFICATION
# ============================================================================

_PRIMITIVE_KINDS: Dict[str, TypeKind] = {
    "string": "string",
    "number": "number",
    "boolean": "boolean",
    "object": "object",
    "function": "function",
}

_QUOTED_LITERAL = re.compile(r"""^(['"])(.*)\1$""")


def classify_type(raw: str, ts: Optional[str] = None) -> TypeInfo:
    """
    Build a TypeInfo for `raw` with a best-effort kind.

    Examples:
        >>> classify_type("'primary'|'success'").enum_values
        ['primary', 'success']
        >>> classify_type("string | number").kind
        'union'
    """
    text = raw.strip()
    members = [m.strip() for m in text.split("|") if m.strip()]
    kind: TypeKind = "unknown"
    enum_values = None

    if "=>" in text or text.lower() == "function":
        kind = "function"
    elif members and all(_QUOTED_LITERAL.match(m) for m in members):
        kind = "enum"
        enum_values = [_QUOTED_LITERAL.match(m).group(2) for m in members]
    elif len(members) > 1:
        kind = "union"
    elif text.startswith("{") or text.lower() in ("object", "record"):
        kind = "object"
    else:
        kind = _PRIMITIVE_KINDS.get(text.lower(), "unknown")

    return TypeInfo(raw=raw, kind=kind, enum_values=enum_values, ts=ts)
