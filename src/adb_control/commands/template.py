"""Command template extraction and per-call command synthesis."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Mapping

from adb_control.commands.errors import MalformedCommandError
from adb_control.commands.params import PLACEHOLDER_RE, ParameterSpec

EXAMPLE_MARKER = "Example execution: "
_EXAMPLE_RE = re.compile(re.escape(EXAMPLE_MARKER) + r"(.+)")


@dataclass(frozen=True)
class SynthesizedCommand:
    executable: str
    argv: tuple[str, ...]

    def display(self) -> str:
        return " ".join((self.executable, *self.argv))


def extract_template(text: str) -> str | None:
    """Return the trimmed remainder of the first ``Example execution:`` line."""
    match = _EXAMPLE_RE.search(text)
    if match is None:
        return None
    template = match.group(1).strip()
    return template or None


def format_argument(value: Any) -> str:
    """Render an argument value in plain decimal form (``120.0`` -> ``120``, ``5e-05`` -> ``0.00005``)."""
    if isinstance(value, float) and math.isfinite(value):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)


def synthesize_command(
    template: str,
    placeholders: Iterable[ParameterSpec],
    arguments: Mapping[str, Any],
) -> SynthesizedCommand:
    """Fill ``template`` with ``arguments`` and split it into executable + argv.

    Tokens without a supplied value are removed, and the result is split on
    whitespace instead of being handed to a shell, so values can never inject
    shell syntax. Quoted arguments containing spaces are not supported.
    """

    command = template
    for spec in placeholders:
        if spec.canonical_name in arguments:
            command = command.replace(spec.placeholder, format_argument(arguments[spec.canonical_name]))

    parts = PLACEHOLDER_RE.sub("", command).split()
    if not parts:
        raise MalformedCommandError(f"Command template {template!r} produced an empty command")
    return SynthesizedCommand(executable=parts[0], argv=tuple(parts[1:]))
