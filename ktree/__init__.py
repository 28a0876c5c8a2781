"""K-ary trees with several traversal orders and a layout helper, and a complex-number value type."""

__version__ = "0.1.0"
__all__ = ["complexnum", "node", "tree", "main"]