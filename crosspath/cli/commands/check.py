"""Security commands: check and sanitize."""

from argparse import ArgumentParser, Namespace

from crosspath.cli.commands.base import BaseCommand, PathsCommand
from crosspath.cli.exit_codes import ExitCode, exit_code_for
from crosspath.cli.output import print_error, print_result
from crosspath.cli.parser import build_config
from crosspath.cross_path import CrossPath
from crosspath.exceptions import CrossPathError
from crosspath.security import sanitize_path


class CheckCommand(PathsCommand):
    """crosspath check PATH...

    Prints "ok: PATH" or the violation for every path. Exits with
    SECURITY_VIOLATION when any path fails.
    """

    @property
    def name(self) -> str:
        return "check"

    @property
    def description(self) -> str:
        return "Check paths for traversal, reserved names and other dangerous patterns"

    def execute(self, args: Namespace) -> int:
        # Violations are reported, not raised
        config = build_config(args).replace(security_check=False)

        exit_code = ExitCode.SUCCESS
        for item in self.inputs(args):
            try:
                path = CrossPath(item, config)
            except CrossPathError as e:
                print_error(str(e))
                if exit_code == ExitCode.SUCCESS:
                    exit_code = exit_code_for(e)
                continue

            violation = path.security_violation()
            if violation is None:
                print_result(f"ok: {path.canonical}")
                continue
            print_result(str(violation))
            if exit_code == ExitCode.SUCCESS:
                exit_code = ExitCode.SECURITY_VIOLATION
        return exit_code


class SanitizeCommand(BaseCommand):
    """crosspath sanitize SEGMENT..."""

    @property
    def name(self) -> str:
        return "sanitize"

    @property
    def description(self) -> str:
        return "Make path segments safe to use as file names"

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("segments", nargs="+", metavar="SEGMENT", help="Segments to sanitize")

    def execute(self, args: Namespace) -> int:
        for segment in args.segments:
            print_result(sanitize_path(segment))
        return ExitCode.SUCCESS
