"""Main entry point for running ccsubdiv as a module."""

import sys

from ccsubdiv.cli.app import main

if __name__ == "__main__":
    sys.exit(main())
