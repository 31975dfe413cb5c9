"""
Roster Ranker CLI entry point.

Usage:
    python -m roster.cli rank --student Alice=90 --student Bob=70
    python -m roster.cli shell
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
