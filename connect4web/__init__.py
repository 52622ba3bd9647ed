"""Two-player Connect Four served over HTTP."""

__version__ = "0.1.0"
