"""String and path primitives for the local file history tool."""

__version__ = "0.1.0"
