"""Allow ``python -m autoupdate``."""

import sys

from autoupdate.cli import main

if __name__ == "__main__":
    sys.exit(main())
