"""Store shell commands behind keywords and find them again later."""

__version__ = "1.0.0"
