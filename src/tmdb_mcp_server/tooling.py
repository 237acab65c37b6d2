"""Tool definitions shared by every TMDB tool."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from tmdb_mcp_server.errors import InvalidInputError


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools.

    Unknown arguments are rejected, so every schema is closed-world.
    """

    model_config = ConfigDict(extra="forbid")


@dataclass(frozen=True)
class TextContent:
    """A single text content block of a tool result."""

    text: str
    type: Literal["text"] = "text"

    def to_dict(self) -> dict[str, str]:
        """Return the wire representation of the block."""
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ToolResult:
    """Envelope returned by tool execution.

    Attributes:
        content: Ordered content blocks; every TMDB tool returns one text block
            holding a JSON document.

    """

    content: list[TextContent] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> ToolResult:
        """Serialize ``payload`` as the sole text block of a result."""
        text = json.dumps(payload, indent=2, ensure_ascii=False)
        return cls(content=[TextContent(text=text)])

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        """Return the wire representation of the result."""
        return {"content": [block.to_dict() for block in self.content]}

    def to_json(self) -> str:
        """Serialize the result to JSON.

        Returns:
            JSON representation of the tool result.

        """
        return json.dumps(self.to_dict())


ToolHandler = Callable[[dict[str, Any]], Awaitable[ToolResult]]


@dataclass(frozen=True)
class ToolDefinition:
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique name of the tool.
        description: Human-readable description of the tool purpose, read by the
            caller during discovery.
        parameters_model: Pydantic model used to validate input parameters.
        handler: Coroutine function that executes the tool logic.
    """

    name: str
    description: str
    parameters_model: type[ToolParameters]
    handler: ToolHandler

    def validate(self, parameters: dict[str, Any]) -> dict[str, Any]:
        """Validate and coerce incoming tool parameters.

        Args:
            parameters: Input parameters provided for the tool.

        Raises:
            InvalidInputError: If parameter validation fails.

        Returns:
            Validated parameter dictionary keyed by wire names.
        """

        try:
            model = self.parameters_model.model_validate(parameters)
        except ValidationError as error:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in issue['loc']) or '<root>'}: "
                f"{issue['msg']}"
                for issue in error.errors()
            )
            raise InvalidInputError(
                f"Invalid parameters for tool '{self.name}': {problems}",
                details=str(error),
            ) from error
        return model.model_dump(by_alias=True)

    def input_schema(self) -> dict[str, Any]:
        """Return the JSON schema of accepted arguments."""

        return self.parameters_model.model_json_schema(by_alias=True)

    def metadata(self) -> dict[str, Any]:
        """Return a discovery-friendly description of the tool."""

        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema(),
        }
