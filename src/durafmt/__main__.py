"""Allow running durafmt as ``python -m durafmt``."""

from durafmt.cli import app

app()
