"""Signal-based messaging between processes, with small string, memory and formatting helpers."""

__version__ = "0.1.0"