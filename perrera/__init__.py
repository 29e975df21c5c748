"""Dog shelter records, the collections that keep them in order, and command interpreters over them."""

__version__ = "0.1.0"