"""Common interface for the tools exposed by the MCP server."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

ToolCallArguments = dict[str, Any]


class ToolError(Exception):
    """Raised by a tool for invalid arguments or a failed operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class ToolExecResult:
    """Result of a tool execution."""

    output: str | None = None
    error: str | None = None
    error_code: int = 0


@dataclass
class ToolParameter:
    """Describes one argument of a tool."""

    name: str
    type: str | list[str]
    description: str
    enum: list[str] | None = None
    items: dict[str, Any] = field(default_factory=dict)
    required: bool = True


class Tool(ABC):
    """Base class for all tools."""

    def __init__(self, model_provider: str | None = None) -> None:
        self._model_provider = model_provider

    def get_model_provider(self) -> str | None:
        return self._model_provider

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_parameters(self) -> list[ToolParameter]:
        pass

    @abstractmethod
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        pass

    def json_definition(self) -> dict[str, Any]:
        """The tool's name, description and JSON-schema parameters."""
        properties: dict[str, Any] = {}
        for param in self.get_parameters():
            schema: dict[str, Any] = {"type": param.type, "description": param.description}
            if param.enum:
                schema["enum"] = param.enum
            if param.items:
                schema["items"] = param.items
            properties[param.name] = schema
        return {
            "name": self.get_name(),
            "description": self.get_description(),
            "parameters": {
                "type": "object",
                "properties": properties,
                "required": [p.name for p in self.get_parameters() if p.required],
            },
        }
