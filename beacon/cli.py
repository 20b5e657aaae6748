from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from rich.console import Console as RichConsole
from rich.table import Table
from rich import box

from beacon.core.errors import LoggerError
from beacon.core.levels import (
    LOG_LEVELS, SEVERITY_CHANNELS, SEVERITY_COLORS_HEX, SeverityLevel, parse_level,
)
from beacon.core.logging import Logger, logger
from beacon.system.settings import Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="beacon", description="Leveled, colored console logging")
    parser.add_argument("--settings", default=None, help="Path to a settings JSON file")
    sub = parser.add_subparsers(dest="command", required=True)

    emit = sub.add_parser("emit", help="Emit a message at a severity")
    emit.add_argument("message", nargs="*", help="Values to print")
    emit.add_argument("--level", default="verbose", help="Severity of the message (verbose/debug/warn/error)")
    emit.add_argument("--threshold", default=None, help="Override the configured threshold")
    emit.add_argument("--group", action="store_true", help="Wrap the message in a collapsed group")

    sub.add_parser("levels", help="Show the available severity levels")
    return parser


def show_levels(active: SeverityLevel, console: Optional[RichConsole] = None):
    console = console or RichConsole()
    table = Table(title="Log levels", box=box.ROUNDED)
    table.add_column("Name")
    table.add_column("Ordinal", justify="right")
    table.add_column("Channel")
    table.add_column("Color")
    for name, ordinal in LOG_LEVELS.items():
        level = SeverityLevel(ordinal)
        hex_val = SEVERITY_COLORS_HEX[level]
        label = f"{name} (active)" if level == active else name
        table.add_row(label, str(ordinal), SEVERITY_CHANNELS[level], f"[{hex_val}]{hex_val}[/]")
    console.print(table)


def emit_message(target: Logger, level: SeverityLevel, values: List[str], group: bool = False):
    channel = getattr(target, SEVERITY_CHANNELS[level])
    if group:
        channel.group_collapsed(*values)
        channel.emit(*values)
        channel.group_end()
    else:
        channel.emit(*values)


def main(argv: Optional[List[str]] = None, target: Optional[Logger] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    target = target or logger
    settings = Settings.load(args.settings)
    settings.apply(target)

    if args.command == "levels":
        show_levels(target.log_level)
        return 0

    try:
        level = parse_level(args.level, "level")
        if args.threshold is not None:
            target.set_level(args.threshold)
    except LoggerError as e:
        parser.error(str(e))
    emit_message(target, level, args.message, group=args.group)
    return 0


def run():
    sys.exit(main())
