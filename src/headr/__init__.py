"""headr: print the first lines or bytes of files."""

__version__ = "1.0.0"

PROG_NAME = "headr"
