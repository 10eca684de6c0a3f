"""Load TOML command definitions from the extension's commands directory."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from adb_control.commands.errors import DefinitionParseError
from adb_control.log_utils import log_event

logger = logging.getLogger(__name__)

DEFINITION_SUFFIX = ".toml"


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    instruction_text: str


def load_definitions(directory: Path) -> list[ToolDefinition]:
    """Parse every ``*.toml`` file in ``directory`` into a ToolDefinition.

    A missing directory yields an empty list. Files are visited in sorted name
    order, and the first unreadable or malformed file raises
    DefinitionParseError so callers never see a partial set.
    """

    if not directory.exists():
        log_event(logger, "definitions.missing_dir", level=logging.DEBUG, directory=str(directory))
        return []

    definitions: list[ToolDefinition] = []
    for path in sorted(directory.iterdir(), key=lambda p: p.name):
        if path.suffix != DEFINITION_SUFFIX or not path.is_file():
            continue
        definitions.append(parse_definition(path))
    log_event(logger, "definitions.loaded", directory=str(directory), count=len(definitions))
    return definitions


def parse_definition(path: Path) -> ToolDefinition:
    """Parse a single definition file."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise DefinitionParseError(path, str(exc)) from exc

    name = path.stem
    description = _string_field(path, data, "description") or f"Tool for {name}"
    prompt = _string_field(path, data, "prompt") or ""
    return ToolDefinition(name=name, description=description, instruction_text=prompt)


def _string_field(path: Path, data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise DefinitionParseError(path, f"field {key!r} must be a string, got {type(value).__name__}")
