"""Edit, filter, analyze and print Unix PATH-like strings."""

__version__ = "0.3.0"
__all__ = ["analysis", "cli", "paths"]