"""
Cookie Analyzer CLI entry point.

Usage:
    python -m cookieanalyzer.cli -f cookie_log.csv -d 2018-12-09
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
