"""CLI entry point."""

import os
import shlex
import sys
from typing import Optional

from common.logging_config import setup_logging
from cli.constants import HELP_TEXT
from cli.parser import ParseError, parse_command
from cli.repl import dispatch_command, repl_loop


def run_once(args: list[str]) -> int:
    """
    Execute a single command given as command-line arguments.

    Args:
        args: Command name followed by its arguments

    Returns:
        Process exit status, 0 on success
    """
    if args[0] in ("help", "-h", "--help"):
        print(HELP_TEXT)
        return 0

    try:
        cmd_obj = parse_command(shlex.join(args))
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    result = dispatch_command(cmd_obj)
    print(result.message)
    return 0 if result.success else 1


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for CLI."""
    args = list(sys.argv[1:] if argv is None else argv)

    debug = bool(args) and args[0] == '--debug'
    log_level = 'DEBUG' if debug else os.getenv('LOG_LEVEL', 'INFO')
    logger = setup_logging('cli', log_level=log_level)

    if debug:
        logger.info("Debug logging enabled")
        args = args[1:]

    if args:
        return run_once(args)

    logger.info("CLI starting...")
    try:
        repl_loop()
    except Exception as e:
        logger.error(f"CLI error: {e}", exc_info=True)
        raise
    finally:
        logger.info("CLI exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())
