from .cache_level import CacheLevel, L1CacheLevel, L2CacheLevel
from .main_mem_level import MainMemoryLevel

__all__ = ["CacheLevel", "L1CacheLevel", "L2CacheLevel", "MainMemoryLevel"]
