import argparse
import asyncio
import logging
import sys
from typing import Mapping

from rich.console import Console
from rich.table import Table

from adb_control.commands import DynamicTool, load_catalog
from adb_control.config import ConfigError, load_config
from adb_control.log_utils import build_log_config, configure_logging
from adb_control.server import ToolServer

logger = logging.getLogger(__name__)


def print_catalog(catalog: Mapping[str, DynamicTool], console: Console | None = None) -> None:
    """Render synthesized tools with their parameters and command template."""
    console = console or Console(markup=False, highlight=False)
    table = Table(title="Synthesized tools", border_style="cyan")
    table.add_column("Tool", style="bold")
    table.add_column("Parameters")
    table.add_column("Template", style="green")
    for name, tool in catalog.items():
        params = "\n".join(f"{spec.canonical_name}: {spec.kind.value}" for spec in tool.parameters.values())
        table.add_row(name, params or "-", tool.template)
    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="MCP server for Android device control over adb")
    parser.add_argument(
        "--list-tools",
        action="store_true",
        help="Print the tools synthesized from command definitions and exit",
    )
    parser.add_argument(
        "--log-stderr",
        action="store_true",
        default=None,
        help="Mirror log output to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(build_log_config(stderr=args.log_stderr))

    try:
        config = load_config()
    except ConfigError as exc:
        print(f"FATAL: {exc}", file=sys.stderr)
        logger.error("Startup aborted: %s", exc)
        return 1

    catalog = load_catalog(config.commands_dir)
    if args.list_tools:
        print_catalog(catalog)
        return 0

    server = ToolServer(config, catalog)
    try:
        asyncio.run(server.run_stdio())
    except KeyboardInterrupt:
        pass
    return 0


def main_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
