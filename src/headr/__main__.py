"""Allow ``python -m headr``."""

from headr.cli import cli

cli(prog_name="headr")
