import json
import shutil

import pytest

from eldocs.exceptions import CatalogNotFoundError
from eldocs.generator import ComponentDocsGenerator


def _catalog(config):
    return json.loads(config.output_path.read_text(encoding="utf-8"))


def test_generates_one_record_per_component(config):
    result = ComponentDocsGenerator(config).generate()
    data = _catalog(config)

    assert list(data) == ["el-button", "el-cascader", "el-input", "el-rate"]
    assert result.total_components == 4
    for identifier in ("button", "cascader", "input", "rate"):
        record = data[f"el-{identifier}"]
        assert record["tagName"] == f"el-{identifier}"
        assert record["docUrl"] == f"https://element.eleme.cn/#/zh-CN/component/{identifier}"


def test_button_props_follow_catalog_with_declared_types(config):
    ComponentDocsGenerator(config).generate()
    props = {p["name"]: p for p in _catalog(config)["el-button"]["props"]}

    assert list(props) == ["type", "size"]
    assert props["type"]["type"]["raw"] == "'primary'|'success'"
    assert props["type"]["default"] == "primary"
    assert props["type"]["required"] is False
    assert props["size"]["description"] == "尺寸"
    assert props["size"]["required"] is True


def test_button_events_union_without_duplicates(config):
    ComponentDocsGenerator(config).generate()
    events = _catalog(config)["el-button"]["events"]

    assert [e["name"] for e in events] == ["click", "focus", "hover"]
    assert events[0] == {
        "name": "click",
        "description": "点击时触发",
        "parameters": [{"raw": "event: Event"}],
    }
    assert events[2]["ts"] == "onHover?: (event: MouseEvent)"


def test_button_description_falls_back_to_markdown(config):
    ComponentDocsGenerator(config).generate()
    button = _catalog(config)["el-button"]

    assert button["description"] == "常用的操作按钮。"
    assert button["slots"] == [{"name": "default", "description": "按钮内容"}]


def test_cascader_methods_top_level_only(config):
    ComponentDocsGenerator(config).generate()
    cascader = _catalog(config)["el-cascader"]

    assert cascader["description"] == "级联选择器"
    assert [m["name"] for m in cascader["methods"]] == ["getCheckedNodes"]
    assert [e["name"] for e in cascader["events"]] == ["change", "expand-change"]


def test_component_without_doc_or_declaration(config):
    result = ComponentDocsGenerator(config).generate()
    component = _catalog(config)["el-input"]

    assert [p["name"] for p in component["props"]] == ["value"]
    assert component["props"][0]["required"] is True
    assert [e["name"] for e in component["events"]] == ["blur"]
    assert component["events"][0]["parameters"] == [{"raw": "FocusEvent"}]
    assert component["methods"] == []
    assert "input" in result.missing_docs
    assert "input" in result.missing_declarations


def test_component_without_catalog_entry(config):
    result = ComponentDocsGenerator(config).generate()
    rate = _catalog(config)["el-rate"]

    assert rate["props"] == []
    assert rate["events"] == []
    assert result.missing_catalog_entries == ["rate"]


def test_documents_written(config):
    ComponentDocsGenerator(config).generate()
    docs = config.docs_output_dir

    button_doc = (docs / "el-button.md").read_text(encoding="utf-8")
    assert "### Attributes" not in button_doc
    assert '<el-button type="primary">主要按钮</el-button>' in button_doc

    declaration = (config.types_dir / "button.d.ts").read_text(encoding="utf-8")
    assert (docs / "el-button.d.ts").read_text(encoding="utf-8") == declaration
    assert not (docs / "el-input.d.ts").exists()
    assert (docs / "el-input.md").read_text(encoding="utf-8") == ""


def test_metadata_written(config):
    ComponentDocsGenerator(config).generate()
    metadata = json.loads(
        (config.output_path.parent / "generation_metadata.json").read_text(encoding="utf-8")
    )
    assert metadata["total_components"] == 4
    assert metadata["total_methods"] == 1


def test_missing_catalog_aborts_without_output(config):
    config.catalog_path.unlink()

    with pytest.raises(CatalogNotFoundError):
        ComponentDocsGenerator(config).generate()

    assert not config.output_path.exists()
    assert not config.docs_output_dir.exists()


def test_failed_document_write_does_not_stop_run(config):
    config.docs_output_dir.parent.mkdir(parents=True)
    config.docs_output_dir.write_text("blocker", encoding="utf-8")

    result = ComponentDocsGenerator(config).generate()

    assert result.failed_writes == ["el-button", "el-cascader", "el-input", "el-rate"]
    assert config.output_path.exists()


def test_build_records_writes_nothing(config):
    records = ComponentDocsGenerator(config).build_records()

    assert [r.tag_name for r in records] == ["el-button", "el-cascader", "el-input", "el-rate"]
    assert not config.output_path.exists()


def test_rerun_is_deterministic(config):
    ComponentDocsGenerator(config).generate()
    first = config.output_path.read_text(encoding="utf-8")
    shutil.rmtree(config.docs_output_dir)

    ComponentDocsGenerator(config).generate()
    assert config.output_path.read_text(encoding="utf-8") == first


def test_declaration_copied_byte_for_byte(config):
    raw = b"export declare class ElButton {\r\n  type?: string\r\n}\r\n"
    (config.types_dir / "button.d.ts").write_bytes(raw)

    ComponentDocsGenerator(config).generate()

    assert (config.docs_output_dir / "el-button.d.ts").read_bytes() == raw
    assert _catalog(config)["el-button"]["props"][0]["type"]["raw"] == "string"


def test_undecodable_document_is_a_soft_miss(config, caplog):
    (config.docs_dir / "input.md").write_bytes(b"## Input\n\xff\xfe bad bytes\n")
    (config.types_dir / "input.d.ts").write_bytes(b"  value: \xff\n")

    with caplog.at_level("WARNING"):
        result = ComponentDocsGenerator(config).generate()

    assert result.total_components == 4
    assert "input" in result.missing_declarations
    assert (config.docs_output_dir / "el-input.md").read_text(encoding="utf-8") == ""
    assert "undecodable" in caplog.text
