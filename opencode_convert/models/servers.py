from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator


class RemoteServer(BaseModel):
    """An MCP server reached over HTTP."""

    type: Literal["remote"] = "remote"
    url: str = Field(..., min_length=1, description="Server endpoint.")
    enabled: bool = Field(
        default=False,
        description="Generated servers start disabled; users opt in.",
    )


class LocalServer(BaseModel):
    """An MCP server started as a local process."""

    type: Literal["local"] = "local"
    command: list[str] = Field(
        ...,
        min_length=1,
        description="Executable followed by its arguments.",
    )
    enabled: bool = Field(
        default=False,
        description="Generated servers start disabled; users opt in.",
    )
    environment: dict[str, str] | None = Field(
        default=None,
        description=(
            "Environment for the process. Values are '{env:NAME}' placeholders "
            "so secrets are always read from the user's environment."
        ),
    )

    @field_validator("environment")
    def drop_empty_environment(
        cls, v: dict[str, str] | None
    ) -> dict[str, str] | None:
        return v or None


McpServer = Annotated[Union[RemoteServer, LocalServer], Field(discriminator="type")]
