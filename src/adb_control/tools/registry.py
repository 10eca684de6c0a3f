"""Registry and metadata for the built-in tools."""

from __future__ import annotations

from typing import Awaitable, Callable, Dict, Type

from pydantic import BaseModel

from .adb import adb_devices, adb_logcat, inspect_ui
from .args import (
    AdbLogcatArgs,
    ExecuteActionArgs,
    ExecuteBatchArgs,
    InspectUiArgs,
    NoArgs,
    RunAiScriptArgs,
)
from .scripts import (
    check_env,
    execute_action,
    execute_batch,
    get_screen,
    get_screen_summary,
    run_ai_script,
)

ToolHandler = Callable[..., Awaitable[dict]]

TOOL_HANDLERS: Dict[str, ToolHandler] = {
    "get_screen": get_screen,
    "get_screen_summary": get_screen_summary,
    "execute_action": execute_action,
    "check_env": check_env,
    "run_ai_script": run_ai_script,
    "execute_batch": execute_batch,
    "adb_devices": adb_devices,
    "inspect_ui": inspect_ui,
    "adb_logcat": adb_logcat,
}

# Pydantic argument models for each tool, used for schema generation and validation.
TOOL_ARG_MODELS: Dict[str, Type[BaseModel]] = {
    "get_screen": NoArgs,
    "get_screen_summary": NoArgs,
    "execute_action": ExecuteActionArgs,
    "check_env": NoArgs,
    "run_ai_script": RunAiScriptArgs,
    "execute_batch": ExecuteBatchArgs,
    "adb_devices": NoArgs,
    "inspect_ui": InspectUiArgs,
    "adb_logcat": AdbLogcatArgs,
}

TOOL_DESCRIPTIONS: Dict[str, str] = {
    "get_screen": "Get the current screen state of the Android device as JSON.",
    "get_screen_summary": (
        "Get a summarized version of the screen state. Faster and uses fewer tokens. "
        "Recommended for initial exploration."
    ),
    "execute_action": "Execute an action on the Android device.",
    "check_env": "Check the ADB environment and Android device connection.",
    "run_ai_script": (
        "Execute a Python script for complex ADB logic. Use this for multi-step actions to avoid "
        "round-trip latency. Available functions: click(text/id/point), type(text, enter=True), "
        "wait(seconds), wait_for(text, timeout), home(), back(), find(text/id)."
    ),
    "execute_batch": (
        "Execute a sequence of ADB actions in one go. Useful for simple multi-step tasks like filling a form."
    ),
    "adb_devices": "Lists all connected Android devices and emulators with their status and details.",
    "inspect_ui": (
        "Captures the complete UI hierarchy of the current screen as an XML document. "
        "Essential for UI automation and identifying interactive elements. "
        'On failure returns a JSON payload {"error": "CommandExecutionError", '
        '"message": "Error inspecting UI: <reason>"}.'
    ),
    "adb_logcat": "Retrieves Android system and application logs from a connected device.",
}

TOOL_REQUIRED_ARGS: Dict[str, list[str]] = {
    name: list(model.model_json_schema().get("required", [])) for name, model in TOOL_ARG_MODELS.items()
}

__all__ = [
    "TOOL_ARG_MODELS",
    "TOOL_DESCRIPTIONS",
    "TOOL_HANDLERS",
    "TOOL_REQUIRED_ARGS",
    "ToolHandler",
]
