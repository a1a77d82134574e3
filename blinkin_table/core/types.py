"""Shared types for blinkin-table: NotFound, Command, Report."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


class NotFound(KeyError):
    """A label, value, code or command name is not in its closed table."""

    def __str__(self) -> str:
        # KeyError repr()s its argument; show the message as written
        return str(self.args[0]) if self.args else ''


@dataclass
class Report:
    """Accumulates the rows and summary fields a command produces for text/JSON output."""

    command: str = ''
    rows: list[dict[str, Any]] = field(default_factory=list)
    summary: dict[str, Any] = field(default_factory=dict)

    def add(self, row: dict[str, Any]) -> None:
        """Append one result row."""
        self.rows.append(row)

    def set(self, key: str, value: Any) -> None:
        """Set a summary field shown after the rows."""
        self.summary[key] = value


class Command:
    """A self-registering CLI subcommand.

    Usage in a command module:

        command = Command(name='value', help='Look up the duty value for a label')

        @command.arguments
        def arguments(parser):
            parser.add_argument('label')

        @command.run
        def run(args, report):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._arguments_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the function that adds this command's arguments."""
        self._arguments_fn = fn
        return fn

    def configure(self, parser: argparse.ArgumentParser) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, args: Any, report: Report) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, report)
