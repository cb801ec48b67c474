"""Allow running as `python -m hexdiff`."""

import sys

from hexdiff.cli import main

sys.exit(main())
