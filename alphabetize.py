#!/usr/bin/env python3
"""
alpha-dirs - Sort files into first-letter directories.

Usage:
    python alphabetize.py DEST_DIR SOURCE [SOURCE ...]          # Move files
    python alphabetize.py DEST_DIR SOURCE --dry-run             # Preview only
    python alphabetize.py DEST_DIR ~/Movies -r -t --link        # Link, skip "The"

Example:
    python alphabetize.py /media/tv ~/Movies --ignore-the --dry-run

    /media/tv/g/The Great Gatsby.mkv
    /media/tv/j/Jaws.mkv
"""

import sys

from alpha_dirs.cli import main


if __name__ == "__main__":
    sys.exit(main())
