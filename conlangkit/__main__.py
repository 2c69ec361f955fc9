"""Entry point for ``python -m conlangkit``."""

import sys

from conlangkit.cli import main

sys.exit(main())
