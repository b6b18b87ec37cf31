"""Command line interface for crosspath."""

from crosspath.cli.main import main

__all__ = ["main"]
