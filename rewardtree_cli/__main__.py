"""
Module execution entry point.

Allows running with: python -m rewardtree_cli
"""

import sys
from rewardtree_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
