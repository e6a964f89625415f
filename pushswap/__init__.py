"""Two-stack integer sorting, with commands to print and check instruction lists."""

__version__ = "1.0.0"