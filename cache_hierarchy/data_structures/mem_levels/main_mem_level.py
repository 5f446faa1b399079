from .level_core import MemoryLevel
from ..result_structures import AccessResult

class MainMemoryLevel(MemoryLevel):
    def __init__(self, latency):
        super().__init__("Main Memory")
        self.latency = latency
        self.accesses = 0

    def access(self, address):
        self.accesses += 1
        return AccessResult(self.name, address, True, self.latency)

    def reset(self):
        self.accesses = 0

    def get_stats(self):
        return {"mem_accesses": self.accesses}
