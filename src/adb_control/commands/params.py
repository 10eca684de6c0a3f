"""Placeholder extraction, canonical names, and parameter type inference."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

PLACEHOLDER_RE = re.compile(r"<([^>]+)>")
_WHITESPACE_RE = re.compile(r"\s")
_NAME_MARKER = "param name"


class ParamKind(str, Enum):
    NUMBER = "number"
    TEXT = "text"


# Substring -> kind. Any hit in the canonical name or the raw token wins.
NUMERIC_KEYWORDS: Mapping[str, ParamKind] = {
    "level": ParamKind.NUMBER,
    "port": ParamKind.NUMBER,
    "duration": ParamKind.NUMBER,
    "limit": ParamKind.NUMBER,
    "brightness": ParamKind.NUMBER,
    "state": ParamKind.NUMBER,
    "pid": ParamKind.NUMBER,
    "width": ParamKind.NUMBER,
    "height": ParamKind.NUMBER,
    "seconds": ParamKind.NUMBER,
    "ms": ParamKind.NUMBER,
    "dpi": ParamKind.NUMBER,
}


@dataclass(frozen=True)
class ParameterSpec:
    canonical_name: str
    original_token: str
    kind: ParamKind

    @property
    def placeholder(self) -> str:
        return f"<{self.original_token}>"

    @property
    def description(self) -> str:
        return self.original_token.replace("_", " ")


def extract_placeholders(text: str) -> list[str]:
    """Return distinct ``<...>`` token texts in first-occurrence order."""
    return list(dict.fromkeys(PLACEHOLDER_RE.findall(text)))


def canonical_name(token: str) -> str:
    """Normalize a raw placeholder into a schema key.

    ``"param name: package"`` -> ``"__package"``; ``"screen width"`` ->
    ``"screen_width"``. Applying it to its own output is a no-op.
    """

    name = token.replace(_NAME_MARKER, "", 1).strip()
    name = _WHITESPACE_RE.sub("_", name)
    return name.replace(":", "_")


def infer_kind(
    canonical: str,
    original: str,
    table: Mapping[str, ParamKind] = NUMERIC_KEYWORDS,
) -> ParamKind:
    for keyword, kind in table.items():
        if keyword in canonical or keyword in original:
            return kind
    return ParamKind.TEXT


def build_parameters(
    text: str,
    table: Mapping[str, ParamKind] = NUMERIC_KEYWORDS,
) -> tuple[tuple[ParameterSpec, ...], dict[str, ParameterSpec]]:
    """Derive parameter specs from instruction text.

    Returns ``(placeholders, parameters)``. ``placeholders`` holds one spec per
    distinct token that normalizes to a non-empty name and drives substitution.
    ``parameters`` is keyed by canonical name for the advertised schema; when
    several tokens share a name the last one wins, keeping the slot of the first.
    """

    placeholders: list[ParameterSpec] = []
    parameters: dict[str, ParameterSpec] = {}
    for token in extract_placeholders(text):
        name = canonical_name(token)
        if not name:
            continue
        spec = ParameterSpec(canonical_name=name, original_token=token, kind=infer_kind(name, token, table))
        placeholders.append(spec)
        parameters[name] = spec
    return tuple(placeholders), parameters
