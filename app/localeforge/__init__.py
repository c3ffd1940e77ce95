"""localeforge - locale resolution, pluralization and translation lookup."""

__version__ = "1.0.0"
