"""
Pipeline configuration.

Paths default to the layout of an Element UI source checkout:

    <source_root>/
    ├── packages/<component>/      # one directory per component
    ├── examples/docs/zh-CN/*.md   # narrative documentation
    ├── types/*.d.ts               # type declarations
    └── web-types.json             # structured catalog

Values can come from ELDOCS_* environment variables (a .env file is picked
up automatically) and are overridden by explicit keyword arguments.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any
import logging

from dotenv import load_dotenv, find_dotenv
from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)

ENV_PREFIX = "ELDOCS_"

DEFAULT_DOC_URL_TEMPLATE = "https://element.eleme.cn/#/zh-CN/component/{name}"


class PipelineConfig(BaseModel):
    """Locations and naming conventions for one extraction run."""

    source_root: Path = Field(description="Root of the component library checkout")
    components_dir: Optional[Path] = Field(None, description="Default: <root>/packages")
    docs_dir: Optional[Path] = Field(None, description="Default: <root>/examples/docs/zh-CN")
    types_dir: Optional[Path] = Field(None, description="Default: <root>/types")
    catalog_path: Optional[Path] = Field(None, description="Default: <root>/web-types.json")
    output_path: Path = Field(Path("data/components.json"), description="Generated catalog")
    docs_output_dir: Path = Field(Path("data/docs"), description="Filtered docs and declarations")
    tag_prefix: str = Field("el", description="Namespace prefix for tag names")
    doc_url_template: str = Field(
        DEFAULT_DOC_URL_TEMPLATE,
        description="URL template; {name} is the bare component identifier"
    )

    @model_validator(mode="after")
    def _fill_defaults(self) -> "PipelineConfig":
        root = Path(self.source_root)
        if self.components_dir is None:
            self.components_dir = root / "packages"
        if self.docs_dir is None:
            self.docs_dir = root / "examples" / "docs" / "zh-CN"
        if self.types_dir is None:
            self.types_dir = root / "types"
        if self.catalog_path is None:
            self.catalog_path = root / "web-types.json"
        return self

    @classmethod
    def from_env(cls, **overrides: Any) -> "PipelineConfig":
        """
        Build a config from ELDOCS_* variables plus explicit overrides.

        Overrides whose value is None are ignored so CLI options that were
        not given fall through to the environment.

        Raises:
            ValueError: If no source root is configured
        """
        load_dotenv(find_dotenv(usecwd=True))

        values: Dict[str, Any] = {}
        for name in cls.model_fields:
            env_value = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if env_value:
                values[name] = env_value

        values.update({k: v for k, v in overrides.items() if v is not None})

        if not values.get("source_root"):
            raise ValueError(
                f"No source root configured (pass --source or set {ENV_PREFIX}SOURCE_ROOT)"
            )

        config = cls(**values)
        logger.debug(f"Loaded config: {config.model_dump()}")
        return config
