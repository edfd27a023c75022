import os
from pathlib import Path

import pytest

from eldocs.config import DEFAULT_DOC_URL_TEMPLATE, PipelineConfig


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in PipelineConfig.model_fields:
        monkeypatch.delenv(f"ELDOCS_{name.upper()}", raising=False)


def test_defaults_follow_source_layout():
    config = PipelineConfig(source_root=Path("/src/element"))

    assert config.components_dir == Path("/src/element/packages")
    assert config.docs_dir == Path("/src/element/examples/docs/zh-CN")
    assert config.types_dir == Path("/src/element/types")
    assert config.catalog_path == Path("/src/element/web-types.json")
    assert config.tag_prefix == "el"
    assert config.doc_url_template == DEFAULT_DOC_URL_TEMPLATE


def test_explicit_paths_are_kept():
    config = PipelineConfig(source_root=Path("/src"), catalog_path=Path("/other/web-types.json"))
    assert config.catalog_path == Path("/other/web-types.json")


def test_from_env_reads_prefixed_variables(monkeypatch):
    monkeypatch.setenv("ELDOCS_SOURCE_ROOT", "/env/element")
    monkeypatch.setenv("ELDOCS_TAG_PREFIX", "my")

    config = PipelineConfig.from_env()

    assert config.source_root == Path("/env/element")
    assert config.tag_prefix == "my"


def test_overrides_win_and_none_is_ignored(monkeypatch):
    monkeypatch.setenv("ELDOCS_SOURCE_ROOT", "/env/element")
    monkeypatch.setenv("ELDOCS_OUTPUT_PATH", "/env/out.json")

    config = PipelineConfig.from_env(source_root="/cli/element", output_path=None)

    assert config.source_root == Path("/cli/element")
    assert config.output_path == Path("/env/out.json")


def test_dotenv_file_is_loaded(tmp_path):
    (tmp_path / ".env").write_text("ELDOCS_SOURCE_ROOT=/dotenv/element\n", encoding="utf-8")

    try:
        config = PipelineConfig.from_env()
    finally:
        # load_dotenv writes straight to os.environ
        os.environ.pop("ELDOCS_SOURCE_ROOT", None)

    assert config.source_root == Path("/dotenv/element")


def test_missing_source_root():
    with pytest.raises(ValueError, match="ELDOCS_SOURCE_ROOT"):
        PipelineConfig.from_env()
