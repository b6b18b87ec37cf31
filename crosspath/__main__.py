"""Allow running crosspath as a module: python -m crosspath."""

import sys

from crosspath.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
