"""
Typer CLI for the ConsoleArgs sample app.

Shows the three ways a command line carries input: positional arguments,
options (single value, repeatable, flag) and subcommands with their own
option sets. Every command just prints what it was given.

Usage:
    ConsoleArgs                                   # Both arguments print as null
    ConsoleArgs "first value" "second value"      # Positional arguments
    ConsoleArgs -o hello                          # Single-value option
    ConsoleArgs simple-command                    # Subcommand, no options
    ConsoleArgs complex-command -m a -m b -s x -b # Subcommand with options
    ConsoleArgs -h                                # Help (also -? and --help)
"""

from __future__ import annotations

import sys
from typing import Annotated, Sequence

import click
import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from consoleargs.cli.groups import ROOT_COMMAND_NAME, RootCommand, RootCommandGroup
from consoleargs.config import Settings, get_settings

HELP_OPTION_NAMES = ["-?", "-h", "--help"]

EXTENDED_HELP = (
    "This is a sample console app to demonstrate argument, option and subcommand parsing. "
    "Depending on how it was installed, run it as 'consoleargs', 'python -m consoleargs' "
    "or 'python main.py'."
)

app = typer.Typer(
    name="consoleargs",
    cls=RootCommandGroup,
    help="Console app with argument parsing.",
    epilog=EXTENDED_HELP,
    context_settings={"help_option_names": HELP_OPTION_NAMES},
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console(highlight=False, soft_wrap=True, emoji=False)


def say(message: str) -> None:
    """Print a line of plain text; parsed values are never read as markup or emoji codes."""
    console.print(escape(message))


def _or_null(value: str | None) -> str:
    return "null" if value is None else value


# =============================================================================
# Root Command
# =============================================================================


@app.command(ROOT_COMMAND_NAME, cls=RootCommand, hidden=True, epilog=EXTENDED_HELP)
def root(
    ctx: typer.Context,
    arg_one: Annotated[
        str | None, typer.Argument(metavar="argOne", help="App argument one")
    ] = None,
    arg_two: Annotated[
        str | None, typer.Argument(metavar="argTwo", help="App argument two")
    ] = None,
    option: Annotated[
        str | None,
        typer.Option("--option", "-o", metavar="optionvalue", help="Some option value"),
    ] = None,
) -> None:
    """
    Console app with argument parsing.

    Arguments are parsed in the order they are given, e.g.
    ConsoleArgs "first value" "second value". Options are usually the
    better choice since they avoid that ordering confusion.
    """
    logger.debug(f"root: arg_one={arg_one!r} arg_two={arg_two!r} option={option!r}")

    say(f"Argument value one: {_or_null(arg_one)}")
    say(f"Argument value two: {_or_null(arg_two)}")

    # Walk the declared arguments rather than the named parameters
    for param in ctx.command.params:
        if isinstance(param, click.Argument):
            say(f"Arguments collection value: {_or_null(ctx.params.get(param.name))}")

    if option is not None:
        say(f"Option was selected, value: {option}")
    else:
        say("No options specified.")
        show_hint(ctx)


def show_hint(ctx: click.Context) -> None:
    """Point the user at the longest help flag, e.g. --help."""
    help_flag = max(ctx.help_option_names, key=len)
    say(f"Specify {help_flag} for a list of available options and commands.")


# =============================================================================
# Subcommands
# =============================================================================


@app.command(
    "simple-command",
    epilog="This is the extended help text for simple-command.",
)
def simple_command() -> None:
    """This is the description for simple-command."""
    say("simple-command is executing")

    # The command's work would go here, or in another object/function

    say("simple-command has finished.")


@app.command(
    "complex-command",
    epilog="This is the extended help text for complex-command.",
)
def complex_command(
    multiple_option: Annotated[
        list[str] | None,
        typer.Option(
            "--multiple-option",
            "-m",
            metavar="value",
            help="A multiple-value option that can be specified multiple times",
        ),
    ] = None,
    single_option: Annotated[
        str | None,
        typer.Option("--single-option", "-s", metavar="value", help="A basic single-value option"),
    ] = None,
    boolean_option: Annotated[
        bool, typer.Option("--boolean-option", "-b", help="A true-false, no value option")
    ] = False,
) -> None:
    """
    This is the description for complex-command.

    Examples:
        ConsoleArgs complex-command -m one -m two
        ConsoleArgs complex-command -s value -b
    """
    say("complex-command is executing")
    logger.debug(
        f"complex-command: multiple={multiple_option!r} single={single_option!r} "
        f"boolean={boolean_option!r}"
    )

    # Only report the options that were actually supplied
    if boolean_option:
        say(f"booleanOption option: {boolean_option}")

    if multiple_option:
        say(f"multipleValueOption option(s): {','.join(multiple_option)}")

    if single_option is not None:
        say(f"singleValueOption option: {single_option}")

    say("complex-command has finished.")


# =============================================================================
# Entry Point
# =============================================================================


def configure_logging(settings: Settings) -> None:
    """Replace loguru's default handler with the configured sinks."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<level>{message}</level>",
    )
    if settings.log_file:
        logger.add(
            settings.log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="1 MB",
            retention=3,
        )


def run(argv: Sequence[str] | None = None) -> int:
    """
    Parse ``argv`` and execute the selected command.

    Parse failures print the parser's message and any other error prints an
    "Unable to execute application" line. Neither escapes, so the return
    value is always 0.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        settings = get_settings()
        say(f"{settings.app_name} app executing...")
        app(args=args, prog_name=settings.app_name, standalone_mode=False)
    except click.UsageError as e:
        # Usually "No such option: ..." or "Got unexpected extra argument (...)"
        logger.debug(f"Parsing failed for {args!r}: {e.format_message()}")
        say(e.format_message())
    except Exception as e:
        logger.opt(exception=e).debug("Command failed")
        say(f"Unable to execute application: {e}")

    return 0


def main() -> None:
    """CLI entry point."""
    try:
        settings = get_settings()
    except ValidationError:
        # Fall back to the defaults; run() reports the bad value
        settings = Settings.model_construct()
    configure_logging(settings)
    sys.exit(run())


if __name__ == "__main__":
    main()
