"""Managed handles, raw byte helpers, nul-terminated strings, exact descriptor I/O, line reading, subnets and test temp directories."""

__version__ = "0.1.0"