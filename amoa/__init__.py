"""Character, string, integer, memory, line-reading, linked-list and formatted-output helpers."""

__version__ = "0.1.0"