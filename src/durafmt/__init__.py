"""durafmt - date and duration formatting helpers."""

from importlib.metadata import version

try:
    __version__ = version("durafmt")
except Exception:
    __version__ = "0.0.0-dev"
