"""Server configuration loaded from the environment (and optional .env files)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from adb_control.paths import config_dir

DEFAULT_PYTHON = "python3"
DEFAULT_ADB = "adb"
COMMANDS_SUBDIR = Path("commands") / "android"
UTILS_SUBDIR = "utils"


class ConfigError(RuntimeError):
    """Raised when required configuration is missing."""


@dataclass(frozen=True)
class ServerConfig:
    extension_path: Path
    commands_dir: Path
    python: str = DEFAULT_PYTHON
    adb: str = DEFAULT_ADB

    def utils_path(self, script: str) -> str:
        """Return the path of a helper script shipped with the extension."""
        return str(self.extension_path / UTILS_SUBDIR / script)


def env_file() -> Path:
    return config_dir() / ".env"


def load_config() -> ServerConfig:
    """Build the server config from ``EXTENSION_PATH`` and ``ADB_CONTROL_*`` variables.

    Values already present in the process environment take precedence over
    the user-level .env file, which in turn wins over a .env in the cwd.
    """

    load_dotenv(env_file(), override=False)
    load_dotenv(find_dotenv(usecwd=True))

    raw_extension = os.getenv("EXTENSION_PATH")
    if not raw_extension:
        raise ConfigError("EXTENSION_PATH environment variable is not set.")
    extension_path = Path(raw_extension).expanduser()

    commands_override = os.getenv("ADB_CONTROL_COMMANDS_DIR")
    commands_dir = Path(commands_override).expanduser() if commands_override else extension_path / COMMANDS_SUBDIR

    return ServerConfig(
        extension_path=extension_path,
        commands_dir=commands_dir,
        python=os.getenv("ADB_CONTROL_PYTHON") or DEFAULT_PYTHON,
        adb=os.getenv("ADB_CONTROL_ADB") or DEFAULT_ADB,
    )
