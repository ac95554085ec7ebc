# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

COMMAND_ORDER = [
    "status, st",
    "log, l",
    "add, a",
    "remove, rm",
    "calendar, cal",
    "start, s",
    "reset",
    "type, t",
    "start-date, sd",
    "history, h",
    "config, c",
]


class AliasedTyperGroup(typer.core.TyperGroup):
    """Custom TyperGroup that supports comma-separated command aliases"""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Override to resolve aliases to the full command name"""
        cmd_name = self._group_cmd_name(cmd_name)
        return super().get_command(ctx, cmd_name)

    def _group_cmd_name(self, default_name: str) -> str:
        for cmd in self.commands.values():
            name = cmd.name
            if name and default_name in self._CMD_SPLIT_P.split(name):
                return name
        return default_name

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return commands in workflow order, then any extras"""
        result = [name for name in COMMAND_ORDER if name in self.commands]
        result.extend(name for name in self.commands if name not in result)
        return result
