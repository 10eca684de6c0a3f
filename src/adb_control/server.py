"""MCP server exposing the built-in tools plus the synthesized command catalog."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from adb_control import __version__
from adb_control.commands import DynamicTool
from adb_control.config import ServerConfig
from adb_control.log_utils import log_context, log_event
from adb_control.tools import Tool, error_result, format_tool_result, get_tools, run_tool
from adb_control.tools.tool_io import UNKNOWN_TOOL

logger = logging.getLogger(__name__)

SERVER_NAME = "adb-control"


class ToolServer:
    """Owns the tool table and wires it onto an MCP low-level server.

    The table is fixed at construction: built-in tools first, then the dynamic
    catalog, where a dynamic tool replaces a built-in tool of the same name.
    """

    def __init__(self, config: ServerConfig, catalog: Mapping[str, DynamicTool]) -> None:
        self._config = config
        self._static: dict[str, Tool] = {tool.function: tool for tool in get_tools()}
        self._dynamic: dict[str, DynamicTool] = {}
        for name, tool in catalog.items():
            if self._static.pop(name, None) is not None:
                log_event(logger, "tool.replaced", level=logging.WARNING, tool=name, source="definition")
            self._dynamic[name] = tool
            log_event(logger, "tool.registered", tool=name, parameters=list(tool.parameters))

        self.server: Server = Server(SERVER_NAME, version=__version__)
        self.server.list_tools()(self.list_tools)
        self.server.call_tool()(self.call_tool)

    @property
    def tool_names(self) -> list[str]:
        return [*self._static, *self._dynamic]

    def describe_tools(self) -> list[types.Tool]:
        described = [
            types.Tool(name=name, description=tool.description, inputSchema=tool.parameters.as_json_schema())
            for name, tool in self._static.items()
        ]
        described.extend(
            types.Tool(name=name, description=tool.description, inputSchema=tool.input_schema())
            for name, tool in self._dynamic.items()
        )
        return described

    async def list_tools(self) -> list[types.Tool]:
        return self.describe_tools()

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        result = await self.dispatch(name, arguments)
        return [types.TextContent(type="text", text=format_tool_result(result))]

    async def dispatch(self, name: str, arguments: Mapping[str, Any] | None) -> dict:
        with log_context(tool=name):
            dynamic = self._dynamic.get(name)
            if dynamic is not None:
                return await dynamic.invoke(arguments)
            if name in self._static:
                return await run_tool(name, self._config, arguments)
            log_event(logger, "tool.unknown", level=logging.WARNING)
            return error_result(UNKNOWN_TOOL, f"Unknown tool: {name}")

    async def run_stdio(self) -> None:
        log_event(logger, "server.starting", tools=len(self.tool_names))
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(read_stream, write_stream, self.server.create_initialization_options())
