"""Filterable directory of recommendations and library items."""

__version__ = "0.1.0"
