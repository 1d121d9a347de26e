"""Allow running the feed as ``python -m quakefeed``."""

import sys

from quakefeed.main import main

sys.exit(main())
