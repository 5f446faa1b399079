from .access_results import AccessResult, AccessLine
from .cache_stats import CacheStats

__all__ = ["AccessResult", "AccessLine", "CacheStats"]
