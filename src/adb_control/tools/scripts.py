"""Tools backed by the Python helper scripts shipped in ``<extension>/utils``."""

from __future__ import annotations

import base64

from adb_control.config import ServerConfig
from adb_control.tools.run_command import exec_command


def _encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


async def _run_script(config: ServerConfig, script: str, *args: str) -> dict:
    return await exec_command(config.python, [config.utils_path(script), *args])


async def get_screen(config: ServerConfig) -> dict:
    """Dump the current screen state as JSON."""
    return await _run_script(config, "get_screen.py")


async def get_screen_summary(config: ServerConfig) -> dict:
    return await _run_script(config, "get_screen_summary.py")


async def check_env(config: ServerConfig) -> dict:
    return await _run_script(config, "check_env.py")


# Payloads are base64 encoded so JSON and source code survive argv intact.
async def execute_action(config: ServerConfig, action_json: str) -> dict:
    return await _run_script(config, "execute_action.py", _encode(action_json))


async def execute_batch(config: ServerConfig, actions_json: str) -> dict:
    return await _run_script(config, "execute_batch.py", _encode(actions_json))


async def run_ai_script(config: ServerConfig, code: str) -> dict:
    return await _run_script(config, "run_ai_script.py", _encode(code))
