class CacheStats:
    """
    Reference, miss and penalty counters for one cache level
    """
    def __init__(self, name):
        self.name = name
        self.references = 0
        self.misses = 0
        # sum of the latencies returned by the lower level on misses
        self.penalties = 0

    @property
    def hits(self):
        return self.references - self.misses

    @property
    def miss_rate(self):
        return self.misses / self.references if self.references > 0 else 0

    @property
    def average_penalty(self):
        return self.penalties / self.misses if self.misses > 0 else 0

    def reset(self):
        self.references = 0
        self.misses = 0
        self.penalties = 0

    def as_dict(self):
        return {"references": self.references,
                "misses": self.misses,
                "penalties": self.penalties,
                "miss rate": self.miss_rate,
                "average penalty": self.average_penalty}

    def __str__(self):
        return f"CacheStats({self.name}: references={self.references}, misses={self.misses}, penalties={self.penalties})"
