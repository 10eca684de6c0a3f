"""Dynamic tools synthesized from TOML command definitions."""

from __future__ import annotations

from adb_control.commands.catalog import DynamicTool, build_catalog, build_tool, load_catalog
from adb_control.commands.errors import DefinitionParseError, MalformedCommandError
from adb_control.commands.loader import ToolDefinition, load_definitions
from adb_control.commands.params import (
    NUMERIC_KEYWORDS,
    ParamKind,
    ParameterSpec,
    build_parameters,
    canonical_name,
    extract_placeholders,
    infer_kind,
)
from adb_control.commands.template import (
    EXAMPLE_MARKER,
    SynthesizedCommand,
    extract_template,
    synthesize_command,
)

__all__ = [
    "EXAMPLE_MARKER",
    "NUMERIC_KEYWORDS",
    "DefinitionParseError",
    "DynamicTool",
    "MalformedCommandError",
    "ParamKind",
    "ParameterSpec",
    "SynthesizedCommand",
    "ToolDefinition",
    "build_catalog",
    "build_parameters",
    "build_tool",
    "canonical_name",
    "extract_placeholders",
    "extract_template",
    "infer_kind",
    "load_catalog",
    "load_definitions",
    "synthesize_command",
]
