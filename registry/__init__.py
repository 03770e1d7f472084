"""Rights registry: writer search (index fast path) and edits (relational store + index sync)."""

__version__ = "1.0.0"
