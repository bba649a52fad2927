from .products import dot, multiply

__all__ = ["dot", "multiply"]
