from .simulator import CacheHierarchy

__all__ = ["CacheHierarchy"]
