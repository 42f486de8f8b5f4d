"""Allow running forge-bindings with `python -m forge_bindings`."""

import sys

from .cli import main

sys.exit(main())
