"""
Entry point for ``python -m blakeout``; see runner.main.
"""

import sys

from .runner import main

sys.exit(main())
