from eldocs.extractors import MarkdownAnalyzer, SubtypeTracker, analyze_markdown
from eldocs.schemas import ComponentMethod, TypeInfo

from tests._fixtures.source_tree import BUTTON_MD, CASCADER_MD


def test_description_is_first_paragraph():
    analysis = analyze_markdown(BUTTON_MD, "button")
    assert analysis.description == "常用的操作按钮。"


def test_empty_document():
    analysis = analyze_markdown("", "button")
    assert analysis.description == ""
    assert analysis.examples == []
    assert analysis.methods_by_subtype == {}
    assert analysis.events_by_subtype == {}


def test_examples_keep_code_and_skip_empty_blocks():
    text = "intro\n\n```html\n<el-tag>a</el-tag>\n```\n\n```js\n```\n\n```js\nconst b = 1\n```\n"
    analysis = analyze_markdown(text, "tag")

    assert [e.code for e in analysis.examples] == ["<el-tag>a</el-tag>", "const b = 1"]
    assert analysis.examples[0].title == "Example 1"
    assert analysis.examples[1].title == "Example 3"


def test_events_table_directly_after_heading():
    analysis = analyze_markdown(BUTTON_MD, "button")
    events = analysis.events_by_subtype["button"]

    assert len(events) == 1
    assert events[0].name == "click"
    assert events[0].description == "点击时触发"
    assert events[0].parameters == [TypeInfo(raw="event: Event")]


def test_tables_are_keyed_by_subtype():
    analysis = analyze_markdown(CASCADER_MD, "cascader")

    assert [m.name for m in analysis.methods_by_subtype["cascader"]] == ["getCheckedNodes"]
    assert [m.name for m in analysis.methods_by_subtype["cascader-panel"]] == ["clearCheckedNodes"]
    assert [e.name for e in analysis.events_by_subtype["cascader"]] == ["change"]


def test_placeholder_parameters_become_empty_list():
    analysis = analyze_markdown(CASCADER_MD, "cascader")
    panel_method = analysis.methods_by_subtype["cascader-panel"][0]
    assert panel_method.parameters == []


def test_table_found_after_intervening_blocks():
    text = (
        "### Methods\n\n"
        "Call these on the component instance.\n\n"
        "| 方法名 | 说明 | 参数 |\n"
        "|---|---|---|\n"
        "| focus | 使 input 获取焦点 | — |\n"
    )
    analysis = analyze_markdown(text, "input")
    assert [m.name for m in analysis.methods_by_subtype["input"]] == ["focus"]


def test_non_matching_header_is_ignored():
    text = (
        "### Methods\n\n"
        "| 参数 | 说明 | 类型 |\n"
        "|---|---|---|\n"
        "| value | 绑定值 | string |\n"
    )
    analysis = analyze_markdown(text, "input")
    assert analysis.methods_by_subtype == {}


def test_generic_heading_keeps_active_subtype():
    text = CASCADER_MD + (
        "\n### 方法\n"
        "| 方法名 | 说明 | 参数 |\n"
        "|------|------|------|\n"
        "| refresh | 刷新 | - |\n"
    )
    analysis = analyze_markdown(text, "cascader")
    assert [m.name for m in analysis.methods_by_subtype["cascader-panel"]] == [
        "clearCheckedNodes",
        "refresh",
    ]


def test_tables_for_same_subtype_accumulate():
    text = (
        "### Table Events\n"
        "| 事件名 | 说明 | 参数 |\n"
        "|---|---|---|\n"
        "| select | 勾选时触发 | selection, row |\n\n"
        "### Table 事件\n"
        "| Event | Description | Parameters |\n"
        "|---|---|---|\n"
        "| sort-change | 排序变化 | { column, prop, order } |\n"
    )
    analysis = analyze_markdown(text, "table")
    assert [e.name for e in analysis.events_by_subtype["table"]] == ["select", "sort-change"]


def test_missing_identifier_uses_default_key():
    analysis = MarkdownAnalyzer().analyze(
        "### Methods\n| Method | Description | Parameters |\n|---|---|---|\n| blur | 失焦 | — |\n"
    )
    assert list(analysis.methods_by_subtype) == ["default"]


def test_subtype_tracker_state():
    tracker = SubtypeTracker(active="table")
    tracker.observe_heading("Methods")
    assert tracker.active == "table"

    tracker.observe_heading("Tree Events")
    tracker.add_methods([ComponentMethod(name="filter")])
    assert tracker.active == "tree"
    assert list(tracker.methods) == ["tree"]
