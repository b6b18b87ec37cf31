"""
Exit code definitions for the crosspath CLI.

All commands MUST use these constants instead of magic numbers.

Exit Codes:
    0   - SUCCESS: Every path was processed
    1   - ERROR: General error (invalid arguments, unconvertible path)
    2   - SECURITY_VIOLATION: A path failed the security check
    3   - ENCODING_ERROR: Path bytes could not be decoded
    4   - CONFIG_ERROR: Invalid config file or option
    130 - INTERRUPTED: User pressed Ctrl+C (SIGINT)

Usage:
    from crosspath.cli.exit_codes import ExitCode

    return ExitCode.SUCCESS
"""

from crosspath.exceptions import EncodingError, InvalidConfigError, SecurityViolation


class ExitCode:
    """Exit code constants for the crosspath CLI."""

    SUCCESS = 0
    """Every path was processed."""

    ERROR = 1
    """General error: invalid arguments, unconvertible path, etc."""

    SECURITY_VIOLATION = 2
    """A path failed the security check."""

    ENCODING_ERROR = 3
    """Path bytes could not be decoded."""

    CONFIG_ERROR = 4
    """Invalid config file, drive mapping or option value."""

    # Signal-based exits (128 + signal number)
    INTERRUPTED = 130
    """User pressed Ctrl+C (128 + SIGINT=2)."""


def exit_code_for(error: Exception) -> int:
    """Map a library exception to its exit code."""
    if isinstance(error, SecurityViolation):
        return ExitCode.SECURITY_VIOLATION
    if isinstance(error, EncodingError):
        return ExitCode.ENCODING_ERROR
    if isinstance(error, InvalidConfigError):
        return ExitCode.CONFIG_ERROR
    return ExitCode.ERROR
