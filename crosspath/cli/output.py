"""Console output for the crosspath CLI.

Results go to stdout without markup, wrapping or highlighting so they can
be piped; diagnostics go to stderr.
"""

from rich.console import Console
from rich.markup import escape

_stdout = Console(highlight=False, emoji=False, soft_wrap=True)
_stderr = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def print_result(text: str) -> None:
    """Print one result line to stdout."""
    _stdout.print(text, markup=False)


def print_error(message: str) -> None:
    _stderr.print(f"[red]Error:[/red] {escape(message)}")


def print_field(label: str, value: str) -> None:
    """Print a "label: value" line to stdout."""
    _stdout.print(f"[bold]{escape(label)}:[/bold] {escape(value)}")
