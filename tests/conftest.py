import pytest

from eldocs.config import PipelineConfig
from tests._fixtures.source_tree import write_source_tree


@pytest.fixture
def source_root(tmp_path):
    return write_source_tree(tmp_path / "element")


@pytest.fixture
def config(source_root, tmp_path):
    return PipelineConfig(
        source_root=source_root,
        output_path=tmp_path / "out" / "components.json",
        docs_output_dir=tmp_path / "out" / "docs",
    )
