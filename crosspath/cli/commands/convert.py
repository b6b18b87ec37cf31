"""Style conversion commands: to-unix, to-windows, convert."""

import logging
from argparse import ArgumentParser, Namespace

from crosspath.cli.commands.base import PathsCommand
from crosspath.cli.exit_codes import ExitCode, exit_code_for
from crosspath.cli.output import print_error, print_result
from crosspath.cli.parser import build_config
from crosspath.cross_path import CrossPath
from crosspath.exceptions import CrossPathError
from crosspath.models import PathStyle

logger = logging.getLogger(__name__)


class _ConvertPathsCommand(PathsCommand):
    """Converts each input path and prints one result per line.

    A failing path is reported on stderr and processing continues; the exit
    code is that of the first failure.
    """

    def target(self, args: Namespace) -> PathStyle | None:
        """Style to convert to; None means the config's style."""
        return None

    def execute(self, args: Namespace) -> int:
        config = build_config(args)
        target = self.target(args)

        exit_code = ExitCode.SUCCESS
        for item in self.inputs(args):
            try:
                path = CrossPath(item, config)
                result = path.convert() if target is None else path.to_style(target)
            except CrossPathError as e:
                print_error(str(e))
                if exit_code == ExitCode.SUCCESS:
                    exit_code = exit_code_for(e)
                continue
            print_result(result)

        logger.debug(f"{self.name} finished with exit code {exit_code}")
        return exit_code


class ToUnixCommand(_ConvertPathsCommand):
    """crosspath to-unix PATH..."""

    @property
    def name(self) -> str:
        return "to-unix"

    @property
    def description(self) -> str:
        return "Convert paths to Unix style"

    def target(self, args: Namespace) -> PathStyle:
        return PathStyle.UNIX


class ToWindowsCommand(_ConvertPathsCommand):
    """crosspath to-windows PATH..."""

    @property
    def name(self) -> str:
        return "to-windows"

    @property
    def description(self) -> str:
        return "Convert paths to Windows style"

    def target(self, args: Namespace) -> PathStyle:
        return PathStyle.WINDOWS


class ConvertCommand(_ConvertPathsCommand):
    """crosspath convert PATH... [--style STYLE]"""

    @property
    def name(self) -> str:
        return "convert"

    @property
    def description(self) -> str:
        return "Convert paths to the configured style (default: the opposite style)"

    def add_arguments(self, parser: ArgumentParser) -> None:
        super().add_arguments(parser)
        parser.add_argument(
            "--style",
            choices=[style.value.lower() for style in PathStyle],
            type=str.lower,
            help="Target style, overriding the config",
        )
