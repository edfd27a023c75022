import json

import pytest

from eldocs.exceptions import CatalogFormatError, CatalogNotFoundError
from eldocs.readers import ComponentCatalog, SourceReader, pascal_case
from eldocs.schemas import CatalogEntry


def _write_catalog(path, components, key="vue-components"):
    path.write_text(json.dumps({"contributions": {"html": {key: components}}}), encoding="utf-8")
    return path


def test_missing_catalog_is_fatal(tmp_path):
    with pytest.raises(CatalogNotFoundError):
        ComponentCatalog.load(tmp_path / "web-types.json")


def test_missing_catalog_is_a_file_not_found_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        ComponentCatalog.load(tmp_path / "web-types.json")


def test_invalid_json_catalog(tmp_path):
    path = tmp_path / "web-types.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogFormatError):
        ComponentCatalog.load(path)


def test_catalog_without_component_list(tmp_path):
    path = tmp_path / "web-types.json"
    path.write_text(json.dumps({"contributions": {}}), encoding="utf-8")
    with pytest.raises(CatalogFormatError):
        ComponentCatalog.load(path)


def test_legacy_tags_namespace_and_malformed_entries(tmp_path):
    path = _write_catalog(
        tmp_path / "web-types.json",
        [{"name": "el-tag"}, {"description": "no name"}],
        key="tags",
    )
    catalog = ComponentCatalog.load(path)
    assert len(catalog) == 1
    assert catalog.find("tag").name == "el-tag"


def test_find_prefers_case_insensitive_tag_match():
    catalog = ComponentCatalog([
        CatalogEntry(name="ElButton", description="pascal"),
        CatalogEntry(name="EL-BUTTON", description="tag"),
    ])
    assert catalog.find("button").description == "tag"


def test_find_pascal_case_with_prefix():
    catalog = ComponentCatalog([CatalogEntry(name="ElDatePicker")])
    assert catalog.find("date-picker").name == "ElDatePicker"
    assert catalog.find("picker") is None


def test_pascal_case():
    assert pascal_case("button") == "Button"
    assert pascal_case("date-picker") == "DatePicker"
    assert pascal_case("el") == "El"


def test_declared_events_prefer_js_events():
    entry = CatalogEntry(name="el-a", events=[{"name": "top"}], js={"events": [{"name": "js"}]})
    assert [e["name"] for e in entry.declared_events] == ["js"]
    assert CatalogEntry(name="el-b", events=[{"name": "top"}]).declared_events == [{"name": "top"}]


def test_component_identifiers_are_subdirectories(source_root):
    reader = SourceReader(source_root / "packages", source_root / "docs", source_root / "types")
    assert reader.component_identifiers() == ["button", "cascader", "input", "rate"]


def test_missing_components_dir(tmp_path):
    reader = SourceReader(tmp_path / "packages", tmp_path, tmp_path)
    with pytest.raises(ValueError):
        reader.component_identifiers()


def test_soft_misses_return_empty_defaults(source_root, caplog):
    reader = SourceReader(
        source_root / "packages",
        source_root / "examples" / "docs" / "zh-CN",
        source_root / "types",
    )

    with caplog.at_level("WARNING"):
        assert reader.read_doc("input") == ""
        assert reader.read_declaration("input") is None

    assert "input" in caplog.text
    assert reader.read_doc("button").startswith("## Button")
    assert "ElButton" in reader.read_declaration("button")


def test_undecodable_files_are_soft_misses(source_root, caplog):
    docs_dir = source_root / "examples" / "docs" / "zh-CN"
    (docs_dir / "input.md").write_bytes(b"## Input\n\xff\xfe bad bytes\n")
    (source_root / "types" / "input.d.ts").write_bytes(b"\xff")
    reader = SourceReader(source_root / "packages", docs_dir, source_root / "types")

    with caplog.at_level("WARNING"):
        assert reader.read_doc("input") == ""
        assert reader.read_declaration("input") is None

    assert "input.md" in caplog.text
    assert "input.d.ts" in caplog.text
