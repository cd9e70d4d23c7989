"""Small Unix-style tools, a shell command parser and teaching-kernel data formats."""

__version__ = "0.1.0"