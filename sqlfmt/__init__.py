"""Parameterized SQL statements built printf-style, with pluggable placeholder styles."""

__version__ = "0.1.0"

__all__ = ["bindvar", "query"]