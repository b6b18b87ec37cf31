"""
Main CLI entry point for crosspath.

This module parses the command line, sets up logging and dispatches to the
command handlers. Library exceptions are mapped to exit codes here.
"""

import logging

from crosspath.cli.commands import (
    BaseCommand,
    CheckCommand,
    ConfigShowCommand,
    ConvertCommand,
    DetectCommand,
    SanitizeCommand,
    ToUnixCommand,
    ToWindowsCommand,
)
from crosspath.cli.exit_codes import ExitCode, exit_code_for
from crosspath.cli.logging_utils import setup_logging
from crosspath.cli.output import print_error
from crosspath.cli.parser import build_parser
from crosspath.exceptions import CrossPathError

logger = logging.getLogger(__name__)

COMMANDS: list[BaseCommand] = [
    ToUnixCommand(),
    ToWindowsCommand(),
    ConvertCommand(),
    CheckCommand(),
    SanitizeCommand(),
    DetectCommand(),
    ConfigShowCommand(),
]


def main(argv: list[str] | None = None) -> int:
    """
    Run the crosspath CLI.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code (see crosspath.cli.exit_codes)
    """
    parser = build_parser(COMMANDS)
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    command = next(c for c in COMMANDS if c.name == args.command)
    is_valid, message = command.validate_args(args)
    if not is_valid:
        print_error(message)
        return ExitCode.ERROR

    try:
        return command.execute(args)
    except KeyboardInterrupt:
        return ExitCode.INTERRUPTED
    except CrossPathError as e:
        logger.debug(f"{command.name} failed: {e!r}")
        print_error(str(e))
        return exit_code_for(e)
    except OSError as e:
        print_error(str(e))
        return ExitCode.ERROR
