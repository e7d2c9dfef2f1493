"""Allow ``python -m agentic_engine``."""

import sys

from agentic_engine.cli import main

sys.exit(main())
