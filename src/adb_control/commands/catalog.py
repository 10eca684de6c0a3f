"""Build callable tools from TOML command definitions.

Derivation is kept free of side effects: ``build_catalog`` turns loaded
definitions into an immutable name -> DynamicTool mapping, and the server
registers that mapping separately.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Iterable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model

from adb_control.commands.errors import DefinitionParseError, MalformedCommandError
from adb_control.commands.loader import ToolDefinition, load_definitions
from adb_control.commands.params import NUMERIC_KEYWORDS, ParamKind, ParameterSpec, build_parameters
from adb_control.commands.template import SynthesizedCommand, extract_template, synthesize_command
from adb_control.log_utils import log_event
from adb_control.tools.run_command import exec_command
from adb_control.tools.tool_io import INVALID_ARGUMENTS, MALFORMED_COMMAND_ERROR, error_result

logger = logging.getLogger(__name__)

Executor = Callable[[str, Sequence[str]], Awaitable[dict]]

_KIND_TYPES: dict[ParamKind, type] = {
    ParamKind.NUMBER: float,
    ParamKind.TEXT: str,
}


@dataclass(frozen=True)
class DynamicTool:
    definition: ToolDefinition
    template: str
    placeholders: tuple[ParameterSpec, ...]
    parameters: Mapping[str, ParameterSpec]
    args_model: type[BaseModel]

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def description(self) -> str:
        return self.definition.description

    def input_schema(self) -> dict[str, Any]:
        return self.args_model.model_json_schema(by_alias=True)

    def build_command(self, arguments: Mapping[str, Any]) -> SynthesizedCommand:
        return synthesize_command(self.template, self.placeholders, arguments)

    async def invoke(self, arguments: Mapping[str, Any] | None, executor: Executor | None = None) -> dict:
        """Validate arguments, fill the template, and run the resulting command."""
        try:
            values = self.args_model.model_validate(dict(arguments or {})).model_dump(by_alias=True)
        except ValidationError as exc:
            log_event(logger, "tool.invalid_args", level=logging.WARNING, tool=self.name, error=str(exc))
            return error_result(INVALID_ARGUMENTS, f"Invalid arguments: {exc}")

        try:
            command = self.build_command(values)
        except MalformedCommandError as exc:
            log_event(logger, "command.malformed", level=logging.WARNING, tool=self.name, template=self.template)
            return error_result(MALFORMED_COMMAND_ERROR, str(exc))

        log_event(logger, "tool.invoked", tool=self.name, command=command.display())
        run = executor or exec_command
        return await run(command.executable, list(command.argv))


def build_args_model(tool_name: str, parameters: Mapping[str, ParameterSpec]) -> type[BaseModel]:
    """Create a pydantic model whose JSON schema is the tool's parameter schema.

    Canonical names may not be valid identifiers, so fields get positional
    names and carry the canonical name as their alias.
    """

    fields: dict[str, Any] = {}
    for index, spec in enumerate(parameters.values()):
        fields[f"param_{index}"] = (
            _KIND_TYPES[spec.kind],
            Field(..., alias=spec.canonical_name, description=spec.description),
        )
    return create_model(
        f"{tool_name}_args",
        __config__=ConfigDict(extra="ignore"),
        **fields,
    )


def build_tool(
    definition: ToolDefinition,
    table: Mapping[str, ParamKind] = NUMERIC_KEYWORDS,
) -> DynamicTool | None:
    """Synthesize a tool from a definition, or None if it has no example command."""
    template = extract_template(definition.instruction_text)
    if template is None:
        return None
    placeholders, parameters = build_parameters(definition.instruction_text, table)
    return DynamicTool(
        definition=definition,
        template=template,
        placeholders=placeholders,
        parameters=MappingProxyType(parameters),
        args_model=build_args_model(definition.name, parameters),
    )


def build_catalog(definitions: Iterable[ToolDefinition]) -> Mapping[str, DynamicTool]:
    catalog: dict[str, DynamicTool] = {}
    for definition in definitions:
        tool = build_tool(definition)
        if tool is None:
            log_event(logger, "definition.skipped", level=logging.DEBUG, tool=definition.name, reason="no template")
            continue
        if definition.name in catalog:
            log_event(logger, "tool.replaced", level=logging.WARNING, tool=definition.name)
        catalog[definition.name] = tool
    return MappingProxyType(catalog)


def load_catalog(directory: Path) -> Mapping[str, DynamicTool]:
    """Load and synthesize every definition in ``directory``.

    A single malformed definition aborts dynamic registration entirely: the
    error is logged once and an empty catalog is returned.
    """

    try:
        definitions = load_definitions(directory)
    except DefinitionParseError as exc:
        log_event(
            logger,
            "definitions.parse_failed",
            level=logging.ERROR,
            path=str(exc.path),
            error=exc.reason,
        )
        return MappingProxyType({})
    return build_catalog(definitions)
