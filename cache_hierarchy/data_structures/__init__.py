from .caches import *
from .mem_levels import *
from .result_structures import *

__all__ = ["SetAssociativeCache", "InstructionCache", "DataCache", "L2Cache", "CacheLevel", "L1CacheLevel",
           "L2CacheLevel", "MainMemoryLevel", "AccessResult", "AccessLine", "CacheStats"]
