from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace

from crosspath.cli.parser import read_stdin_paths


class BaseCommand(ABC):
    """Base class for all CLI commands."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name (e.g., 'to-unix', 'check')."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Command description for help text."""
        pass

    def add_arguments(self, parser: ArgumentParser) -> None:
        """Register command specific arguments on its subparser."""
        pass

    @abstractmethod
    def execute(self, args: Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed command arguments

        Returns:
            Exit code (0 = success, non-zero = failure)
        """
        pass

    def validate_args(self, args: Namespace) -> tuple[bool, str]:
        """
        Validate command arguments.

        Args:
            args: Parsed arguments

        Returns:
            (is_valid, error_message) tuple
        """
        return (True, "")


class PathsCommand(BaseCommand):
    """A command taking paths from positional arguments or stdin."""

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("paths", nargs="*", metavar="PATH", help="Paths to process")

    def validate_args(self, args: Namespace) -> tuple[bool, str]:
        if args.stdin and args.paths:
            return (False, "PATH arguments cannot be combined with --stdin")
        if not args.stdin and not args.paths:
            return (False, f"{self.name} requires at least one PATH (or --stdin)")
        if args.null and not args.stdin:
            return (False, "-0/--null only applies to --stdin")
        return (True, "")

    def inputs(self, args: Namespace) -> list[str] | list[bytes]:
        """Positional paths as text, or stdin items as raw bytes."""
        if args.stdin:
            return read_stdin_paths(null_separated=args.null)
        return list(args.paths)
