"""Allow ``python -m numops``."""

import sys

from numops.cli import main

sys.exit(main())
