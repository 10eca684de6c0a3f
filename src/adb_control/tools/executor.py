"""Run built-in tools with argument validation."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Mapping

from pydantic import ValidationError

from adb_control.config import ServerConfig
from adb_control.log_utils import log_event
from adb_control.tools.registry import TOOL_ARG_MODELS, TOOL_HANDLERS, TOOL_REQUIRED_ARGS
from adb_control.tools.tool_io import COMMAND_EXECUTION_ERROR, INVALID_ARGUMENTS, UNKNOWN_TOOL, error_result

logger = logging.getLogger(__name__)


async def run_tool(function_name: str, config: ServerConfig, arguments: Mapping[str, Any] | None = None) -> dict:
    """Run a built-in tool by name; every failure comes back as an error result."""
    kwargs = dict(arguments or {})
    handler = TOOL_HANDLERS.get(function_name)
    if not handler:
        return error_result(UNKNOWN_TOOL, f"Unknown tool function: {function_name}")

    required = TOOL_REQUIRED_ARGS.get(function_name, [])
    missing_required = [name for name in required if name not in kwargs or kwargs.get(name) in ("", None)]
    if missing_required:
        log_event(logger, "tool.missing_args", level=logging.WARNING, tool=function_name, missing=missing_required)
        return error_result(INVALID_ARGUMENTS, f"Missing required arguments: {', '.join(missing_required)}")

    args_model = TOOL_ARG_MODELS.get(function_name)
    if args_model is not None:
        try:
            call_kwargs: dict[str, Any] = args_model.model_validate(kwargs).model_dump()
        except ValidationError as exc:
            log_event(logger, "tool.invalid_args", level=logging.WARNING, tool=function_name, error=str(exc))
            return error_result(INVALID_ARGUMENTS, f"Invalid arguments: {exc}")
    else:
        call_kwargs = dict(kwargs)

    sig = inspect.signature(handler)
    if "config" in sig.parameters:
        call_kwargs["config"] = config
    filtered_kwargs = {k: v for k, v in call_kwargs.items() if k in sig.parameters}

    try:
        return await handler(**filtered_kwargs)
    except Exception as exc:
        logger.exception("Tool %s raised", function_name)
        return error_result(COMMAND_EXECUTION_ERROR, str(exc))
