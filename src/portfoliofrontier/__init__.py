"""Two-asset portfolio frontier explorer."""
__version__ = "0.1.0"
