"""Allow ``python -m bigdec``."""

import sys

from bigdec.cli import main

sys.exit(main())
