"""Classic data-structure and algorithm exercises in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "containers",
    "expressions",
    "graphio",
    "grids",
    "hashing",
    "hull",
    "pathnav",
    "properties",
    "recursion",
    "shortest",
    "textops",
    "traversal",
]