"""Allow ``python -m wwt``."""

from wwt.cli import run

run()
