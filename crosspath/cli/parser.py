"""
Argument parsing for the crosspath CLI.

Every subcommand shares one set of options (config file, logging,
pipeline switches, extra drive mappings, stdin input). Usage errors exit
with ExitCode.ERROR so they never collide with the security exit code.
"""

import argparse
import sys
from typing import TYPE_CHECKING, NoReturn

from crosspath import __version__
from crosspath.cli.exit_codes import ExitCode
from crosspath.config import PathConfig, load_config
from crosspath.exceptions import InvalidConfigError

if TYPE_CHECKING:
    from crosspath.cli.commands.base import BaseCommand


class CrossPathArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with ExitCode.ERROR."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(ExitCode.ERROR, f"{self.prog}: error: {message}\n")


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)

    group = common.add_argument_group("configuration")
    group.add_argument("--config", metavar="FILE", help="Config file (YAML or JSON)")
    group.add_argument(
        "--map",
        dest="mappings",
        action="append",
        default=[],
        metavar="DRIVE=MOUNT",
        help="Extra drive mapping, checked before configured ones (repeatable)",
    )
    group.add_argument("--no-security", action="store_true", help="Skip the security check")
    group.add_argument("--no-normalize", action="store_true", help="Keep '.' and '..' segments")
    group.add_argument(
        "--strict-encoding",
        action="store_true",
        help="Fail on undecodable bytes instead of replacing them",
    )

    group = common.add_argument_group("input")
    group.add_argument(
        "--stdin", action="store_true", help="Read raw path bytes from stdin, one per line"
    )
    group.add_argument(
        "-0",
        "--null",
        action="store_true",
        help="With --stdin, paths are separated by NUL instead of newline",
    )

    group = common.add_argument_group("logging")
    group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Console log level (default: $CROSSPATH_LOG_LEVEL or WARNING)",
    )
    group.add_argument("--log-file", metavar="FILE", help="Also log everything to FILE")
    return common


def build_parser(commands: "list[BaseCommand]") -> CrossPathArgumentParser:
    """Build the top-level parser with one subparser per command."""
    parser = CrossPathArgumentParser(
        prog="crosspath",
        description="Convert paths between Windows and Unix styles.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = _common_options()
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for command in commands:
        subparser = subparsers.add_parser(
            command.name,
            parents=[common],
            help=command.description,
            description=command.description,
        )
        command.add_arguments(subparser)
    return parser


def parse_mapping(value: str) -> tuple[str, str]:
    """
    Parse a DRIVE=MOUNT option value.

    Raises:
        InvalidConfigError: If there is no '=' in the value
    """
    drive, sep, mount = value.partition("=")
    if not sep:
        raise InvalidConfigError("--map", f"expected DRIVE=MOUNT, got {value!r}")
    return drive.strip(), mount.strip()


def build_config(args: argparse.Namespace) -> PathConfig:
    """
    Effective config: the loaded file with command line overrides applied.

    Raises:
        InvalidConfigError: If the file or any override is invalid
    """
    config = load_config(args.config)

    changes = {}
    if args.no_security:
        changes["security_check"] = False
    if args.no_normalize:
        changes["normalize"] = False
    if args.strict_encoding:
        changes["preserve_encoding"] = False
    if args.mappings:
        extra = tuple(parse_mapping(value) for value in args.mappings)
        changes["drive_mappings"] = extra + config.drive_mappings
    if getattr(args, "style", None):
        changes["style"] = args.style

    return config.replace(**changes) if changes else config


def read_stdin_paths(null_separated: bool = False) -> list[bytes]:
    """Split raw stdin bytes into path items, dropping empty ones."""
    data = sys.stdin.buffer.read()
    if null_separated:
        items = data.split(b"\0")
    else:
        items = [line.rstrip(b"\r") for line in data.split(b"\n")]
    return [item for item in items if item]
