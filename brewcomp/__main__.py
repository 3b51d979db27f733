"""Allow running brewcomp with `python -m brewcomp`."""

import sys

from .command import main

sys.exit(main())
