"""Convert tool result dicts into the text payload returned to MCP callers."""

from __future__ import annotations

import json
from typing import Any

SUCCESS_TEXT = "Command executed successfully."

COMMAND_EXECUTION_ERROR = "CommandExecutionError"
MALFORMED_COMMAND_ERROR = "MalformedCommandError"
INVALID_ARGUMENTS = "InvalidArguments"
UNKNOWN_TOOL = "UnknownTool"


def error_result(kind: str, message: str) -> dict[str, Any]:
    """Build a failed tool result tagged with a short error kind."""
    return {"content": "", "error": message, "error_kind": kind}


def format_tool_result(result: dict[str, Any]) -> str:
    """Render a tool result as text.

    Failures become a JSON object ``{"error": <kind>, "message": <text>}``;
    successes return stdout, falling back to stderr and then a fixed message.
    """

    error = result.get("error")
    if error:
        kind = result.get("error_kind") or COMMAND_EXECUTION_ERROR
        return json.dumps({"error": kind, "message": error})
    return result.get("content") or result.get("stderr") or SUCCESS_TEXT
