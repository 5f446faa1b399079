from cache_hierarchy.data_structures.caches.cache_core import InstructionCache, DataCache, L2Cache
from cache_hierarchy.data_structures.mem_levels.cache_level import L1CacheLevel, L2CacheLevel
from cache_hierarchy.data_structures.mem_levels.main_mem_level import MainMemoryLevel
from cache_hierarchy.data_structures.result_structures.access_results import AccessLine
from cache_hierarchy.data_structures.result_structures.cache_stats import CacheStats
from cache_hierarchy.protocols.policies import inclusion_policy_for


class CacheHierarchy:
    """
    Split L1 instruction and data caches over a shared L2 and main memory.
    Every instance owns its own storage and counters, so independent traces need independent instances.
    """
    def __init__(self, config):
        self.config = config
        self.memory = MainMemoryLevel(config.memspeed)
        inclusion_policy = inclusion_policy_for(config)

        # levels with zero sets are still built, they just pass every access down
        self.l2 = L2CacheLevel(L2Cache(config), CacheStats("L2"), lower_level=self.memory)
        self.icache = L1CacheLevel(InstructionCache(config), CacheStats("I-cache"), inclusion_policy,
                                   lower_level=self.l2)
        self.dcache = L1CacheLevel(DataCache(config), CacheStats("D-cache"), inclusion_policy,
                                   lower_level=self.l2)
        self.entry_points = {"I": self.icache, "D": self.dcache}

    @property
    def icache_stats(self):
        return self.icache.stats

    @property
    def dcache_stats(self):
        return self.dcache.stats

    @property
    def l2cache_stats(self):
        return self.l2.stats

    def access(self, kind, address):
        """
        Send one reference through the hierarchy
        :param kind: "I" for an instruction fetch, "D" for a data access
        :param address: int
        :return: AccessResult of the top level that handled it
        """
        level = self.entry_points.get(kind)
        if level is None:
            raise ValueError(f"Unknown access kind: {kind}")
        return level.access(address)

    def instruction_access(self, address):
        return self.icache.access(address).latency

    def data_access(self, address):
        return self.dcache.access(address).latency

    def l2_access(self, address):
        return self.l2.access(address)

    def run(self, accesses, verbose=False):
        """
        Feed an ordered stream of references through the hierarchy
        :param accesses: iterable of (kind, address) pairs
        :param verbose: print one line per reference
        :return: list of latencies, one per reference
        """
        if verbose:
            print(AccessLine.HEADER)
        latencies = []
        for kind, address in accesses:
            result = self.access(kind, address)
            latencies.append(result.latency)
            if verbose:
                line = AccessLine(kind, address)
                line.update(result)
                print(line)
        return latencies

    def get_stats(self):
        """
        Gathers and returns stats from all levels of the hierarchy.
        :return: dict of stats
        """
        stats = dict()
        stats["icache"] = self.icache.get_stats()
        stats["dcache"] = self.dcache.get_stats()
        stats["l2cache"] = self.l2.get_stats()
        stats["main memory"] = self.memory.get_stats()
        return stats

    def reset(self):
        for level in (self.icache, self.dcache, self.l2, self.memory):
            level.reset()
