from .cache_core import SetAssociativeCache, InstructionCache, DataCache, L2Cache, INVALID_RECENCY
from .address import decode_address, reconstruct_address, VALID_BIT, EMPTY_TAG

__all__ = ["SetAssociativeCache", "InstructionCache", "DataCache", "L2Cache", "INVALID_RECENCY",
           "decode_address", "reconstruct_address", "VALID_BIT", "EMPTY_TAG"]
