"""Formatting of database server metrics as JSON or aligned text."""

__version__ = "0.1.0"
__all__ = ["metrics"]