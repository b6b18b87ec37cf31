"""Host platform detection."""

import os

from crosspath.models import PathStyle


def current_style() -> PathStyle:
    """Path style of the running interpreter's platform."""
    return PathStyle.WINDOWS if os.name == "nt" else PathStyle.UNIX
