from .level_core import MemoryLevel
from ..result_structures import AccessResult


class CacheLevel(MemoryLevel):
    """
    Access path shared by every cache level: probe, update LRU, and on a miss fetch from the lower level
    """
    def __init__(self, cache, stats, lower_level=None):
        super().__init__(cache.name, lower_level)
        self.cache = cache
        self.stats = stats

    def read_hit(self, address, tag, index, way):
        self.cache.touch(index, way)
        return AccessResult(self.name, address, True, self.cache.hit_time, tag, index)

    def read_miss(self, address, tag, index):
        self.stats.misses += 1
        evicted_tag = self.cache.fill(index, tag)
        lower_result = self.lower_level.access(address)
        self.stats.penalties += lower_result.latency
        return AccessResult(self.name, address, False, self.cache.hit_time + lower_result.latency, tag, index,
                            evicted_address=self.evicted_address(index, evicted_tag), lower=lower_result)

    def evicted_address(self, index, evicted_tag):
        # only the lowest cache reports its victims upward
        return None

    def access(self, address):
        """
        Access this level for an address
        :param address: int
        :return: AccessResult whose latency covers this level and everything below it
        """
        # a level without sets is bypassed entirely
        if not self.cache.enabled:
            return self.lower_level.access(address)

        self.stats.references += 1
        index, tag = self.cache.parse_address(address)
        way = self.cache.find_way(index, tag)
        if way is not None:
            return self.read_hit(address, tag, index, way)
        return self.read_miss(address, tag, index)

    def reset(self):
        self.cache.reset()
        self.stats.reset()

    def get_stats(self):
        return self.stats.as_dict()


class L2CacheLevel(CacheLevel):
    """
    Shared L2, backed by main memory. Reports the block address of a valid victim on every miss.
    """
    def evicted_address(self, index, evicted_tag):
        if evicted_tag is None:
            return None
        return self.cache.block_address(index, evicted_tag)


class L1CacheLevel(CacheLevel):
    """
    L1 instruction or data cache, backed by the L2 level
    """
    def __init__(self, cache, stats, inclusion_policy, lower_level=None):
        super().__init__(cache, stats, lower_level)
        self.inclusion_policy = inclusion_policy
        self.inclusions = 0

    def read_miss(self, address, tag, index):
        result = super().read_miss(address, tag, index)
        # inclusion on lower eviction
        if self.inclusion_policy.on_lower_eviction(self.cache, result.lower.evicted_address):
            self.inclusions += 1
        return result

    def reset(self):
        super().reset()
        self.inclusions = 0
