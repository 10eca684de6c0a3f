from __future__ import annotations

import json
from pathlib import Path

import pytest

from adb_control.commands import catalog as catalog_module
from adb_control.commands import build_catalog
from adb_control.commands.loader import ToolDefinition
from adb_control.server import ToolServer
from adb_control.tools import TOOL_HANDLERS
from adb_control.tools import adb as adb_tools
from tests.utils import RecordingExecutor, make_config

WIFI_PROMPT = """Toggle wifi.
Example execution: adb shell svc wifi <state>
"""


def _server(tmp_path: Path, *definitions: ToolDefinition) -> ToolServer:
    return ToolServer(make_config(tmp_path), build_catalog(definitions))


def test_tools_include_builtin_and_dynamic(tmp_path: Path):
    server = _server(tmp_path, ToolDefinition("set_wifi", "Toggle wifi", WIFI_PROMPT))

    names = server.tool_names
    assert names[: len(TOOL_HANDLERS)] == list(TOOL_HANDLERS)
    assert names[-1] == "set_wifi"

    described = {tool.name: tool for tool in server.describe_tools()}
    schema = described["set_wifi"].inputSchema
    assert schema["properties"]["state"]["type"] == "number"
    assert described["set_wifi"].description == "Toggle wifi"
    assert described["execute_action"].inputSchema["required"] == ["action_json"]


@pytest.mark.asyncio
async def test_list_tools_handler(tmp_path: Path):
    server = _server(tmp_path)
    tools = await server.list_tools()
    assert [tool.name for tool in tools] == list(TOOL_HANDLERS)


def test_dynamic_tool_replaces_builtin_with_same_name(tmp_path: Path):
    definition = ToolDefinition("adb_devices", "Custom devices", "Example execution: adb devices")
    server = _server(tmp_path, definition)

    assert server.tool_names.count("adb_devices") == 1
    described = {tool.name: tool for tool in server.describe_tools()}
    assert described["adb_devices"].description == "Custom devices"


@pytest.mark.asyncio
async def test_call_dynamic_tool(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    executor = RecordingExecutor({"content": "", "stderr": "", "error": None, "returncode": 0})
    monkeypatch.setattr(catalog_module, "exec_command", executor)
    server = _server(tmp_path, ToolDefinition("set_wifi", "Toggle wifi", WIFI_PROMPT))

    content = await server.call_tool("set_wifi", {"state": 1})

    assert executor.calls == [("adb", ["shell", "svc", "wifi", "1"])]
    assert content[0].type == "text"
    assert content[0].text == "Command executed successfully."


@pytest.mark.asyncio
async def test_call_dynamic_tool_failure_is_structured(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    executor = RecordingExecutor({"content": "", "stderr": "error: no devices", "error": "error: no devices", "returncode": 1})
    monkeypatch.setattr(catalog_module, "exec_command", executor)
    server = _server(tmp_path, ToolDefinition("set_wifi", "Toggle wifi", WIFI_PROMPT))

    content = await server.call_tool("set_wifi", {"state": 0})

    assert json.loads(content[0].text) == {"error": "CommandExecutionError", "message": "error: no devices"}


@pytest.mark.asyncio
async def test_call_builtin_tool(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    executor = RecordingExecutor({"content": "List of devices attached\n", "stderr": "", "error": None, "returncode": 0})
    monkeypatch.setattr(adb_tools, "exec_command", executor)
    server = _server(tmp_path)

    content = await server.call_tool("adb_devices", {})

    assert executor.calls == [("adb", ["devices", "-l"])]
    assert content[0].text == "List of devices attached\n"


@pytest.mark.asyncio
async def test_call_unknown_tool(tmp_path: Path):
    server = _server(tmp_path)
    content = await server.call_tool("missing", None)
    assert json.loads(content[0].text)["error"] == "UnknownTool"


@pytest.mark.asyncio
async def test_call_dynamic_tool_with_null_byte_argument(tmp_path: Path):
    definition = ToolDefinition("say", "Echo text", "Example execution: echo <text>")
    server = _server(tmp_path, definition)

    content = await server.call_tool("say", {"text": "a\x00b"})

    assert json.loads(content[0].text)["error"] == "CommandExecutionError"
