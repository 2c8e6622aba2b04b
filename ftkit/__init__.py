"""Character, conversion, string, memory, linked-list, line-reading and formatting helpers."""

__version__ = "0.1.0"