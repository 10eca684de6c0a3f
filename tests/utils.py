from __future__ import annotations

from pathlib import Path
from typing import Sequence

from adb_control.config import ServerConfig


def write_definition(directory: Path, name: str, prompt: str | None = None, description: str | None = None) -> Path:
    """Write a TOML command definition the way extensions ship them."""

    directory.mkdir(parents=True, exist_ok=True)
    lines = []
    if description is not None:
        lines.append(f"description = {_toml_string(description)}")
    if prompt is not None:
        lines.append(f"prompt = {_toml_string(prompt)}")
    path = directory / f"{name}.toml"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def _toml_string(value: str) -> str:
    return '"""\n' + value.replace("\\", "\\\\") + '"""'


def make_config(extension: Path) -> ServerConfig:
    return ServerConfig(extension_path=extension, commands_dir=extension / "commands" / "android")


class RecordingExecutor:
    """Stand-in for exec_command that records calls instead of spawning processes."""

    def __init__(self, result: dict | None = None) -> None:
        self.calls: list[tuple[str, list[str]]] = []
        self.result = result or {"content": "ok", "stderr": "", "error": None, "returncode": 0}

    async def __call__(self, executable: str, argv: Sequence[str] = ()) -> dict:
        self.calls.append((executable, list(argv)))
        return dict(self.result)
