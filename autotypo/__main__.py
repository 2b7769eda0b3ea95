"""Allow ``python -m autotypo``."""

import sys

from autotypo.cli import main

sys.exit(main())
