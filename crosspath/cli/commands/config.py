from argparse import ArgumentParser, Namespace

from crosspath.cli.commands.base import BaseCommand
from crosspath.cli.exit_codes import ExitCode
from crosspath.cli.output import print_result
from crosspath.cli.parser import build_config


class ConfigShowCommand(BaseCommand):
    """crosspath config [--format yaml|json]"""

    @property
    def name(self) -> str:
        return "config"

    @property
    def description(self) -> str:
        return "Show the effective configuration"

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--format", choices=["yaml", "json"], default="yaml", help="Output format"
        )

    def execute(self, args: Namespace) -> int:
        config = build_config(args)
        if args.format == "json":
            print_result(config.to_json())
        else:
            print_result(config.to_yaml().rstrip("\n"))
        return ExitCode.SUCCESS
