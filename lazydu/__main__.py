"""Module entrypoint for ``python -m lazydu``.

Argument parsing, tree building and the browser session all live in
``lazydu.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
