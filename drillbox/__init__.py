"""Small data structures, iteration helpers and a binary pattern grep."""

__version__ = "0.1.0"