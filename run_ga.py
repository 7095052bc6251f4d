#!/usr/bin/env python3
"""
Weighted bit-sum Genetic Algorithm runner

Example:
    python run_ga.py 200 40 0.05 5 --seed 7 --plots-dir plots
"""

import sys

from bitga.cli import main


if __name__ == "__main__":
    sys.exit(main())
