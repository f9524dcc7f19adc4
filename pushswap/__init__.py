"""Two-stack integer sorting, operation lists that sort, and a checker for them."""

__version__ = "0.1.0"
__all__ = ["checker", "parsing", "sorter", "stacks"]