"""Schema helpers for MCP tool exposure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from adb_control.tools.registry import TOOL_ARG_MODELS, TOOL_DESCRIPTIONS, TOOL_HANDLERS


@dataclass
class ToolParameter:
    type: str
    properties: dict[str, Any]
    required: list[str]

    def as_json_schema(self) -> dict[str, Any]:
        return {"type": self.type, "properties": self.properties, "required": self.required}


@dataclass
class Tool:
    function: str
    description: str
    parameters: ToolParameter


def tool_from_model(name: str, description: str, model: Any) -> Tool:
    schema = model.model_json_schema()
    return Tool(
        function=name,
        description=description,
        parameters=ToolParameter(
            type="object",
            properties=schema.get("properties", {}),
            required=schema.get("required", []),
        ),
    )


def get_tools() -> List[Tool]:
    """Return descriptions of the built-in tools from their pydantic models."""
    return [
        tool_from_model(name, TOOL_DESCRIPTIONS.get(name, ""), TOOL_ARG_MODELS[name])
        for name in TOOL_HANDLERS
        if name in TOOL_ARG_MODELS
    ]
