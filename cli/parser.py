"""Command parser for CLI input."""

import shlex

from cli.constants import DIR_MARKER
from cli.models import CommandRequest, SetTokenCommand, ShareCommand


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object (ShareCommand or SetTokenCommand)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]

    if command_name == "share":
        return _parse_share(tokens[1:])
    elif command_name == "set-token":
        return _parse_set_token(tokens[1:])
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_share(args: list[str]) -> ShareCommand:
    """Parse 'share <blobref>[/] ...' command. A trailing slash marks a directory."""
    if not args:
        raise ParseError("share requires at least one blobref")

    items = []
    for arg in args:
        if arg.endswith(DIR_MARKER):
            items.append((arg[:-len(DIR_MARKER)], "true"))
        else:
            items.append((arg, "false"))

    return ShareCommand(items=tuple(items))


def _parse_set_token(args: list[str]) -> SetTokenCommand:
    """Parse 'set-token <token>' command."""
    if len(args) != 1:
        raise ParseError("set-token requires exactly 1 argument: <token>")

    return SetTokenCommand(token=args[0])
