"""Command-line arguments, IPC request bodies and shell completion."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence


class CommandKind(enum.Enum):
    """Subcommands; each value is the name used on the command line."""

    SCHEMA = "schema"
    DAEMON = "daemon"
    ADD = "add"
    REMOVE = "rm"
    TOGGLE_PIN = "togglepin"
    RELOAD = "reload"
    EXIT = "quit"


_NO_IPC = {CommandKind.SCHEMA, CommandKind.DAEMON}


@dataclass(frozen=True)
class Command:
    """A parsed subcommand; ``name`` holds its single argument if any."""

    kind: CommandKind
    name: Optional[str] = None

    def ipc_body(self) -> Optional[dict]:
        """The request sent to a running instance, or None if none is sent."""
        if self.kind in _NO_IPC:
            return None
        args: List[str] = []
        if self.kind is CommandKind.TOGGLE_PIN:
            if self.name is None or ":" not in self.name:
                raise ValueError(
                    "widget must be specified with: `group_name:widget_name`"
                )
            group_name, widget_name = self.name.split(":", 1)
            args = [group_name, widget_name]
        elif self.kind in (CommandKind.ADD, CommandKind.REMOVE):
            args = [self.name or ""]
        return {"command": self.kind.value, "args": args}


@dataclass(frozen=True)
class Cli:
    """Top-level options."""

    mouse_debug: bool = False
    command: Optional[Command] = None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="way-edges", description="Hidden widget on the screen edges"
    )
    parser.add_argument("--version", action="version", version="%(prog)s pre")
    parser.add_argument(
        "-d",
        "--mouse-debug",
        action="store_true",
        help="print the mouse button key to the log when press and release.",
    )
    sub = parser.add_subparsers(dest="subcommand")

    def add(kind: CommandKind, help_text: str, aliases: Sequence[str] = (), arg=None):
        p = sub.add_parser(kind.value, aliases=list(aliases), help=help_text)
        if arg is not None:
            p.add_argument("name", metavar=arg[0], help=arg[1])
        p.set_defaults(kind=kind)

    add(CommandKind.SCHEMA, "print json schema of the configurations to the stdout")
    add(CommandKind.DAEMON, "(deprecated) run daemon", aliases=["d"])
    add(CommandKind.ADD, "add group of widgets given group name", ["a"], ("name", "group name"))
    add(
        CommandKind.REMOVE,
        "remove group of widgets given group name",
        ["r"],
        ("name", "group name"),
    )
    add(
        CommandKind.TOGGLE_PIN,
        "toggle pin of a widget under certain group",
        (),
        ("group_and_widget_name", "format: <group_name>:<widget_name>"),
    )
    add(CommandKind.RELOAD, "reload widget configuration")
    add(CommandKind.EXIT, "close daemon", ["q"])
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Cli:
    """Parse command-line arguments; invalid input exits via SystemExit."""
    namespace = _build_parser().parse_args(argv)
    command = None
    kind = getattr(namespace, "kind", None)
    if kind is not None:
        command = Command(kind, getattr(namespace, "name", None))
    return Cli(mouse_debug=namespace.mouse_debug, command=command)


Groups = Mapping[str, Iterable[Optional[str]]]


def complete_only_group(current: str, groups: Groups) -> List[str]:
    """Group names starting with ``current``."""
    return [name for name in groups if name.startswith(current)]


def complete_group_and_widget(current: str, groups: Groups) -> List[str]:
    """Complete ``group:widget``; before the colon only groups are offered."""
    if ":" in current:
        group_name, widget_name = current.split(":", 1)
        if group_name not in groups:
            return []
        return [
            f"{group_name}:{widget}"
            for widget in groups[group_name]
            if widget and widget.startswith(widget_name)
        ]
    return [f"{name}:" for name in groups if name.startswith(current)]