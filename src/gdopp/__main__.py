"""Module entry point for `python -m gdopp`.

This forwards to the CLI implementation in `gdopp.api.cli.main`.
"""

import sys

from .api.cli import main

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
