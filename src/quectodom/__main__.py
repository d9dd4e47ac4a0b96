"""Allow ``python -m quectodom``."""

import sys

from quectodom.cli import main

sys.exit(main())
