"""Entry point for ``python -m fluentstr``."""

import sys

from fluentstr.cli import main

if __name__ == "__main__":
    sys.exit(main())
