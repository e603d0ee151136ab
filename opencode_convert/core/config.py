"""Static conversion settings: source layout, output layout and model defaults."""

from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MAIN_MODEL: Final[str] = "opencode/minimax-m2.5-free"
DEFAULT_FAST_MODEL: Final[str] = "opencode/minimax-m2.5-free"

DEFAULT_SCHEMA_URL: Final[str] = "https://opencode.ai/config.json"

DEFAULT_CATEGORY_DIRS: Final[dict[str, str]] = {
    "agents": "agents",
    "commands": "commands",
    "skills": "skills",
    "rules": "rules",
}


class ConversionConfig(BaseModel):
    """
    Where the source tree lives, where the output goes, and which models
    the generated configuration defaults to.

    There are no environment overrides: the defaults are fixed so that
    every run over the same inputs produces the same output.
    """

    model_config = ConfigDict(frozen=True)

    project_root: Path = Field(
        default_factory=Path.cwd,
        description="Directory holding the source tree and the marker file.",
    )
    marker_file: str = Field(
        default="package.json",
        description="File whose presence confirms the project root.",
    )
    category_dirs: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_CATEGORY_DIRS),
        description=(
            "Source directory per category, relative to the project root. "
            "The output uses the same names under the output root."
        ),
    )
    mcp_config: str = Field(
        default="mcp-configs/mcp-servers.json",
        description="MCP server registry document, relative to the project root.",
    )
    output_dir_name: str = Field(
        default=".opencode",
        description="Output root, relative to the project root. Rebuilt every run.",
    )
    main_model: str = Field(default=DEFAULT_MAIN_MODEL)
    fast_model: str = Field(default=DEFAULT_FAST_MODEL)
    agent_description_prefix: str = Field(
        default="ECC",
        description="Prefix of the description generated for agents without one.",
    )
    schema_url: str = Field(default=DEFAULT_SCHEMA_URL)
    instructions: list[str] = Field(default_factory=lambda: ["rules/**/*.md"])

    @field_validator("main_model", "fast_model")
    def validate_qualified_model(cls, v: str) -> str:
        v = v.strip()
        if "/" not in v:
            raise ValueError(
                f"Default model '{v}' must be fully qualified (provider/model)"
            )
        return v

    @property
    def marker_path(self) -> Path:
        return self.project_root / self.marker_file

    @property
    def output_root(self) -> Path:
        return self.project_root / self.output_dir_name

    @property
    def mcp_config_path(self) -> Path:
        return self.project_root / self.mcp_config

    @property
    def settings_path(self) -> Path:
        return self.output_root / "opencode.json"

    @property
    def summary_path(self) -> Path:
        return self.output_root / "GENERATED.md"

    def source_path(self, category: str) -> Path:
        """Source directory for a category."""
        return self.project_root / self.category_dirs[category]

    def output_path(self, category: str) -> Path:
        """Output directory for a category."""
        return self.output_root / self.category_dirs[category]
