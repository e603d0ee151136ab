import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator

from .servers import McpServer


class OpenCodeSettings(BaseModel):
    """
    The generated opencode.json document.

    'mcp' is omitted entirely, rather than written as an empty object, when
    no server could be converted.
    """

    model_config = ConfigDict(populate_by_name=True)

    schema_url: str = Field(..., alias="$schema")
    model: str = Field(..., description="Default model for the main agent.")
    small_model: str = Field(..., description="Model used for lightweight tasks.")
    instructions: list[str] = Field(
        default_factory=list,
        description="Glob patterns of instruction files, relative to the config dir.",
    )
    mcp: dict[str, McpServer] | None = Field(default=None)

    @field_validator("mcp")
    def drop_empty_mcp(
        cls, v: dict[str, McpServer] | None
    ) -> dict[str, McpServer] | None:
        return v or None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"


class ConversionSummary(BaseModel):
    """Counts reported at the end of a run."""

    agents: NonNegativeInt = 0
    commands: NonNegativeInt = 0
    skills: NonNegativeInt = 0
    rule_sets: NonNegativeInt = 0
    mcp_servers: NonNegativeInt = 0

    def format_line(self, output_dir_name: str) -> str:
        return (
            f"Generated {output_dir_name}/: {self.agents} agents, "
            f"{self.commands} commands, {self.skills} skills, "
            f"{self.rule_sets} rule sets"
        )
