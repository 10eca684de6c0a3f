"""Errors raised while loading definitions and synthesizing commands."""

from __future__ import annotations

from pathlib import Path


class DefinitionParseError(Exception):
    """A command definition file could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedCommandError(ValueError):
    """Placeholder substitution left nothing to execute."""
