from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class AgentHeader(BaseModel):
    """
    Header block of a generated OpenCode subagent document.

    Field order is the emitted key order.
    """

    description: str = Field(..., description="Human readable agent summary.")
    mode: Literal["subagent"] = Field(
        default="subagent",
        description="Generated agents are always invoked as subagents.",
    )
    model: str = Field(..., description="Fully qualified provider/model identifier.")
    tools: dict[str, bool] = Field(
        default_factory=dict,
        description=(
            "Tool restrictions. Only disabled tools are listed; tools not "
            "mentioned keep the OpenCode default."
        ),
    )

    @field_validator("tools")
    def validate_tools(cls, v: dict[str, bool]) -> dict[str, bool]:
        enabled = [name for name, allowed in v.items() if allowed]
        if enabled:
            raise ValueError(
                f"Tool overrides may only disable tools, got enabled: {enabled}"
            )
        return v

    def to_frontmatter(self) -> dict[str, Any]:
        return self.model_dump()


class CommandHeader(BaseModel):
    """
    Header block of a generated OpenCode command document.

    A command routed to an agent always runs as a subtask; a command
    without an agent carries only its description.
    """

    description: str = Field(..., description="Human readable command summary.")
    agent: str | None = Field(
        default=None,
        description="Agent that handles the command, if one is mapped.",
    )
    subtask: bool | None = Field(
        default=None,
        description="Run the command as a subtask of the mapped agent.",
    )

    @model_validator(mode="after")
    def validate_subtask(self) -> "CommandHeader":
        if self.subtask is not None and self.agent is None:
            raise ValueError("'subtask' requires an 'agent'")
        return self

    @classmethod
    def for_agent(cls, description: str, agent: str | None) -> "CommandHeader":
        if agent:
            return cls(description=description, agent=agent, subtask=True)
        return cls(description=description)

    def to_frontmatter(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
