from abc import abstractmethod, ABC


class InclusionPolicy(ABC):
    """
    Abstract base class for inclusion policies
    """
    @abstractmethod
    def on_lower_eviction(self, upper_cache, evicted_address):
        pass


class InclusivePolicy(InclusionPolicy):
    """
    Inclusive cache policy
    """
    def on_lower_eviction(self, upper_cache, evicted_address):
        """
        Invalidate the corresponding entry in the upper cache upon eviction from the lower cache
        :param upper_cache: SetAssociativeCache that issued the lower access
        :param evicted_address: int block address evicted from the lower cache, or None
        :return: boolean indicating if the upper cache dropped a block
        """
        if evicted_address is None:
            return False
        # decoded with the upper cache's own geometry
        return upper_cache.invalidate(evicted_address)


class NonInclusivePolicy(InclusionPolicy):
    """
    Non-inclusive policy, lower evictions leave the upper cache alone
    """
    def on_lower_eviction(self, upper_cache, evicted_address):
        return False


def inclusion_policy_for(config):
    if config.inclusive and config.l2cache.enabled:
        return InclusivePolicy()
    return NonInclusivePolicy()
