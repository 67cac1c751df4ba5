"""Sorting, searching, binary trees, triage ranking and maze monsters for simple games."""

__version__ = "0.1.0"
__all__ = ["sorting", "searching", "tree", "triage", "maze"]