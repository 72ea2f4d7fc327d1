"""Allow ``python -m pathext``."""

import sys

from pathext.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
