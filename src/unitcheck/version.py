"""Version information for unitcheck."""

__version__ = "0.1.0"
