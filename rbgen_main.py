#!/usr/bin/env python3
"""
Entry point for running rbgen from a source checkout.
"""

import sys
from pathlib import Path

# Add the package directory to the path for imports
sys.path.insert(0, str(Path(__file__).parent))

from rbgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
