"""Built-in tool registry, schemas, and execution helpers."""

from __future__ import annotations

from adb_control.tools.executor import run_tool
from adb_control.tools.registry import (
    TOOL_ARG_MODELS,
    TOOL_DESCRIPTIONS,
    TOOL_HANDLERS,
    TOOL_REQUIRED_ARGS,
    ToolHandler,
)
from adb_control.tools.run_command import exec_command
from adb_control.tools.schema import Tool, ToolParameter, get_tools, tool_from_model
from adb_control.tools.tool_io import error_result, format_tool_result

__all__ = [
    "TOOL_ARG_MODELS",
    "TOOL_DESCRIPTIONS",
    "TOOL_HANDLERS",
    "TOOL_REQUIRED_ARGS",
    "Tool",
    "ToolHandler",
    "ToolParameter",
    "error_result",
    "exec_command",
    "format_tool_result",
    "get_tools",
    "run_tool",
    "tool_from_model",
]
