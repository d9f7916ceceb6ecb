"""Entry point for running mobile-bootstrap as a module."""

import sys

from mobile_bootstrap.cli import main

if __name__ == "__main__":
    sys.exit(main())
