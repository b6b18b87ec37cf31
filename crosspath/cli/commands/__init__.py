"""CLI commands."""

from crosspath.cli.commands.base import BaseCommand
from crosspath.cli.commands.check import CheckCommand, SanitizeCommand
from crosspath.cli.commands.config import ConfigShowCommand
from crosspath.cli.commands.convert import (
    ConvertCommand,
    ToUnixCommand,
    ToWindowsCommand,
)
from crosspath.cli.commands.detect import DetectCommand

__all__ = [
    "BaseCommand",
    "CheckCommand",
    "ConfigShowCommand",
    "ConvertCommand",
    "DetectCommand",
    "SanitizeCommand",
    "ToUnixCommand",
    "ToWindowsCommand",
]
