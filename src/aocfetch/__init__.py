"""Advent of Code puzzle input retriever."""

__version__ = "0.1.1"

__all__ = ["__version__"]
