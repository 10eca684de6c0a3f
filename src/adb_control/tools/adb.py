"""Tools that call ``adb`` directly."""

from __future__ import annotations

import time
from typing import Optional

from adb_control.config import ServerConfig
from adb_control.tools.run_command import exec_command
from adb_control.tools.tool_io import COMMAND_EXECUTION_ERROR, error_result


def device_args(device: Optional[str]) -> list[str]:
    return ["-s", device] if device else []


async def adb_devices(config: ServerConfig) -> dict:
    return await exec_command(config.adb, ["devices", "-l"])


async def inspect_ui(config: ServerConfig, device: Optional[str] = None) -> dict:
    """Dump the UI hierarchy to a temp file on the device, read it back, then remove it."""
    shell = [*device_args(device), "shell"]
    remote_file = f"/tmp/view-{int(time.time() * 1000)}.xml"

    result = await exec_command(config.adb, [*shell, "uiautomator", "dump", remote_file])
    if result.get("error"):
        return _inspect_failed(result)
    hierarchy = await exec_command(config.adb, [*shell, "cat", remote_file])
    if hierarchy.get("error"):
        return _inspect_failed(hierarchy)
    result = await exec_command(config.adb, [*shell, "rm", remote_file])
    if result.get("error"):
        return _inspect_failed(result)
    return {"content": hierarchy["content"], "error": None, "returncode": 0}


def _inspect_failed(result: dict) -> dict:
    return error_result(COMMAND_EXECUTION_ERROR, f"Error inspecting UI: {result['error']}")


async def adb_logcat(
    config: ServerConfig,
    device: Optional[str] = None,
    lines: int = 50,
    filter: Optional[str] = None,  # noqa: A002 - matches the advertised argument name
) -> dict:
    args = [*device_args(device), "logcat", "-d", "-t", str(lines)]
    if filter:
        args.append(filter)
    return await exec_command(config.adb, args)
