"""Optimal 15-puzzle solver: bit-packed boards searched with IDA*."""

__version__ = "0.1.0"
