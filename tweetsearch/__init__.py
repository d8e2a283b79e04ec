"""Word index and boolean AND/OR/NOT search over a CSV corpus of short texts."""

__version__ = "0.1.0"
__all__ = ["avl", "intset", "index", "search"]