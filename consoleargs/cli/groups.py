"""
Click command classes that let the root command take positional arguments.

A click group reads its first positional token as a subcommand name, so it
cannot also accept positional arguments of its own. The root command's
arguments and options therefore live on a hidden subcommand, and the group
routes every invocation that doesn't name a visible subcommand (or start with
a help flag) to it:

    ConsoleArgs foo bar -o x          -> <root> foo bar -o x
    ConsoleArgs -o x                  -> <root> -o x
    ConsoleArgs                       -> <root>
    ConsoleArgs simple-command        -> simple-command
    ConsoleArgs Simple-Command        -> simple-command
    ConsoleArgs -o x simple-command   -> simple-command
    ConsoleArgs foo simple-command    -> <root> foo simple-command
    ConsoleArgs --help                -> group help (lists the subcommands)

A subcommand is looked up case-insensitively at the first positional token,
after any root options and their values. Root options given ahead of a
subcommand are dropped, since the root command doesn't run.
"""

from __future__ import annotations

import click
from loguru import logger
from typer.core import TyperCommand, TyperGroup

ROOT_COMMAND_NAME = "root"


class RootCommandGroup(TyperGroup):
    """TyperGroup that falls back to a hidden root command."""

    root_command_name = ROOT_COMMAND_NAME

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if args and args[0] in ctx.help_option_names:
            return super().parse_args(ctx, args)

        found = self.locate_subcommand(args)
        if found is None:
            logger.debug(f"Routing {args!r} to the root command")
            args = [self.root_command_name, *args]
        else:
            index, name = found
            if index:
                logger.debug(f"Ignoring root options {args[:index]!r} ahead of {name}")
            args = [name, *args[index + 1 :]]

        return super().parse_args(ctx, args)

    def routes_to_root(self, ctx: click.Context, args: list[str]) -> bool:
        """
        Decide whether ``args`` belong to the root command.

        A token naming the hidden root command is a plain value, so
        ``ConsoleArgs root`` sets argOne to "root".
        """
        if args and args[0] in ctx.help_option_names:
            return False
        return self.locate_subcommand(args) is None

    def locate_subcommand(self, args: list[str]) -> tuple[int, str] | None:
        """
        Find the subcommand named by the first positional token.

        Returns the token's index and the registered command name, or None
        when the tokens belong to the root command. Scanning stops at the
        first token that isn't a known root option.
        """
        takes_value, flags = self._root_options()

        index = 0
        while index < len(args):
            token = args[index]
            if token in ("-", "--") or not token.startswith("-"):
                name = self.match_command_name(token)
                return None if name is None else (index, name)

            opt = token.split("=", 1)[0]
            if opt in takes_value:
                index += 1 if "=" in token else 2
            elif token in flags:
                index += 1
            elif not token.startswith("--") and token[:2] in takes_value:
                # Attached short value, e.g. -ohello
                index += 1
            else:
                return None

        return None

    def match_command_name(self, token: str) -> str | None:
        """Registered name of the visible subcommand ``token`` names, ignoring case."""
        wanted = token.lower()
        for name, command in self.commands.items():
            if not command.hidden and name.lower() == wanted:
                return name
        return None

    def _root_options(self) -> tuple[set[str], set[str]]:
        """Root option names, split into those taking a value and flags."""
        takes_value: set[str] = set()
        flags: set[str] = set()

        root = self.commands.get(self.root_command_name)
        if root is None:
            return takes_value, flags

        for param in root.params:
            if isinstance(param, click.Option):
                names = {*param.opts, *param.secondary_opts}
                (flags if param.is_flag else takes_value).update(names)
        return takes_value, flags


class RootCommand(TyperCommand):
    """Hidden command whose usage line reads as the program itself."""

    def format_usage(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        prog = ctx.parent.command_path if ctx.parent is not None else ctx.command_path
        formatter.write_usage(prog, " ".join(self.collect_usage_pieces(ctx)))
