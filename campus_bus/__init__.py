"""College bus seat booking service."""

__version__ = "1.0.0"
