"""Module entrypoint for ``python -m dirsize``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and reporting happen in ``dirsize.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
