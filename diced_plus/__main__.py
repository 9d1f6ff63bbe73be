"""python -m diced_plus 入口."""

import sys

from diced_plus.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
