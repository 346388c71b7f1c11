"""Allow ``python -m peres``."""

import sys

from peres.cli import main

sys.exit(main())
