"""Bit-packed Pentago board engine."""

__version__ = "0.1.0"
