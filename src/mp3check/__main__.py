"""Allow ``python -m mp3check``."""

import sys

from mp3check.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
