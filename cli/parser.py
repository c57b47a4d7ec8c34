"""Command parser for CLI input."""

import shlex

from cli.models import CommandRequest, RestoreCommand, SplitCommand


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL or the joined command-line arguments

    Returns:
        CommandRequest object (SplitCommand or RestoreCommand)

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

    if command_name == "split":
        return _parse_split(tokens[1:])
    elif command_name == "restore":
        return _parse_restore(tokens[1:])
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_split(args: list[str]) -> SplitCommand:
    """Parse 'split <file>... [-s BYTES] [-o DIR] [-c]' command."""
    files = []
    size_limit = None
    output_dir = None
    compress = False

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("-s", "--size-limit"):
            size_limit = _parse_size_limit(_option_value(args, i))
            i += 2
        elif arg in ("-o", "--output-dir"):
            output_dir = _option_value(args, i)
            i += 2
        elif arg in ("-c", "--compress"):
            compress = True
            i += 1
        elif arg.startswith("-") and arg != "-":
            raise ParseError(f"Unknown option for split: {arg}")
        else:
            files.append(arg)
            i += 1

    if not files:
        raise ParseError("split requires at least one file")

    return SplitCommand(
        files=tuple(files),
        size_limit=size_limit,
        output_dir=output_dir,
        compress=compress,
    )


def _parse_restore(args: list[str]) -> RestoreCommand:
    """Parse 'restore <manifest.json>... [-i DIR] [-o DIR] [--strict]' command."""
    info_files = []
    input_dir = None
    output_dir = None
    strict = False

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("-i", "--input-dir"):
            input_dir = _option_value(args, i)
            i += 2
        elif arg in ("-o", "--output-dir"):
            output_dir = _option_value(args, i)
            i += 2
        elif arg == "--strict":
            strict = True
            i += 1
        elif arg.startswith("-") and arg != "-":
            raise ParseError(f"Unknown option for restore: {arg}")
        else:
            info_files.append(arg)
            i += 1

    if not info_files:
        raise ParseError("restore requires at least one split info JSON file")

    return RestoreCommand(
        info_files=tuple(info_files),
        input_dir=input_dir,
        output_dir=output_dir,
        strict=strict,
    )


def _option_value(args: list[str], index: int) -> str:
    """Return the value following the option at index."""
    if index + 1 >= len(args):
        raise ParseError(f"{args[index]} requires a value")
    return args[index + 1]


def _parse_size_limit(value: str) -> int:
    try:
        size_limit = int(value)
    except ValueError:
        raise ParseError(f"Invalid size limit: {value}")
    if size_limit <= 0:
        raise ParseError(f"Size limit must be a positive number of bytes, got {size_limit}")
    return size_limit
