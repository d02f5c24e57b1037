"""Module entry point for running with python -m mdtree."""

import sys

from mdtree.cli import main

if __name__ == "__main__":
    sys.exit(main())
