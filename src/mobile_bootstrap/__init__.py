"""mobile-bootstrap: build and run mobile apps written in Go."""

__version__ = "0.1.0"

PROGRAM_NAME = "mobile-bootstrap"
