import math

ADDRESS_BITS = 32


def is_power_of_two(n):
    """Check if a number is a power of two. uses bit operations."""
    return n > 0 and (n & (n - 1)) == 0

def safe_log_2(n):
    """Compute the base-2 logarithm of a number, ensuring the number is a power of two."""
    if not is_power_of_two(n):
        raise ValueError("Input must be a power of two.")
    return int(math.log2(n))

def safe_flag(flag):
    """Turn an inclusive flag given as bool, 0/1 or y/n into a boolean."""
    if isinstance(flag, str):
        flag = flag.strip().lower()
        if flag not in {'y', 'n', '0', '1'}:
            raise ValueError("Inclusive flag must be 'y', 'n', 0 or 1.")
        return flag in {'y', '1'}
    return bool(flag)


class BitCounts:
    def __init__(self):
        # initialize them all to zero to start, shared block offset first
        self.offset_bits = 0
        # L1 instruction cache
        self.icache_tag_bits = 0
        self.icache_index_bits = 0
        # L1 data cache
        self.dcache_tag_bits = 0
        self.dcache_index_bits = 0
        # L2 cache
        self.l2cache_tag_bits = 0
        self.l2cache_index_bits = 0


class CacheConfig:
    def __init__(self, num_sets, associativity, hit_time):
        self.num_sets = num_sets
        self.associativity = associativity
        self.hit_time = hit_time

    @property
    def enabled(self):
        return self.num_sets > 0


class Config:
    # option names as a driver would hand them over
    OPTION_NAMES = {
        "icacheSets": "icache_sets",
        "icacheAssoc": "icache_assoc",
        "icacheHitTime": "icache_hit_time",
        "dcacheSets": "dcache_sets",
        "dcacheAssoc": "dcache_assoc",
        "dcacheHitTime": "dcache_hit_time",
        "l2cacheSets": "l2cache_sets",
        "l2cacheAssoc": "l2cache_assoc",
        "l2cacheHitTime": "l2cache_hit_time",
        "inclusive": "inclusive",
        "blocksize": "blocksize",
        "memspeed": "memspeed",
    }

    def __init__(self,
                 icache_sets=0, icache_assoc=1, icache_hit_time=1,
                 dcache_sets=0, dcache_assoc=1, dcache_hit_time=1,
                 l2cache_sets=0, l2cache_assoc=1, l2cache_hit_time=1,
                 inclusive=False,
                 blocksize=64,
                 memspeed=100):
        self.icache = CacheConfig(int(icache_sets), int(icache_assoc), int(icache_hit_time))
        self.dcache = CacheConfig(int(dcache_sets), int(dcache_assoc), int(dcache_hit_time))
        self.l2cache = CacheConfig(int(l2cache_sets), int(l2cache_assoc), int(l2cache_hit_time))
        self.inclusive = safe_flag(inclusive)
        self.blocksize = int(blocksize)
        self.memspeed = int(memspeed)
        self.address_bits = ADDRESS_BITS
        self.bits = BitCounts()
        self.validate()
        self.derive_bits()

    @classmethod
    def from_options(cls, options):
        """
        Build a config from a mapping of option names (icacheSets, blocksize, ...).
        Snake case names are accepted as well.
        :param options: dict of option name to value
        :return: validated Config
        """
        kwargs = {}
        known = set(cls.OPTION_NAMES.values())
        for key, value in options.items():
            name = cls.OPTION_NAMES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown configuration option: {key}")
            kwargs[name] = value
        return cls(**kwargs)

    def levels(self):
        return {"icache": self.icache, "dcache": self.dcache, "l2cache": self.l2cache}

    def _validate_level(self, name, level):
        if level.num_sets < 0:
            raise ValueError(f"{name} number of sets must not be negative.")
        if not level.enabled:
            return
        # number of sets must be a power of two when the level is present
        if not is_power_of_two(level.num_sets):
            raise ValueError(f"{name} number of sets must be 0 or a power of two.")
        if level.associativity < 1:
            raise ValueError(f"{name} associativity must be at least 1.")
        if level.hit_time < 0:
            raise ValueError(f"{name} hit time must not be negative.")
        # top address bit is the valid flag, tag has to fit below it
        used_bits = safe_log_2(self.blocksize) + safe_log_2(level.num_sets)
        if used_bits < 1:
            raise ValueError(f"{name} needs at least one offset or index bit (block size and sets are both 1).")
        if used_bits > self.address_bits:
            raise ValueError(f"{name} offset and index bits exceed {self.address_bits} address bits.")

    def _validate_inclusion(self):
        if not (self.inclusive and self.l2cache.enabled):
            return
        for name, level in (("icache", self.icache), ("dcache", self.dcache)):
            if level.enabled and level.associativity > self.l2cache.associativity:
                raise ValueError(f"Inclusive L2 requires {name} associativity ({level.associativity}) "
                                 f"to not exceed L2 associativity ({self.l2cache.associativity}).")

    def validate(self):
        # block size is shared by every level
        if not is_power_of_two(self.blocksize):
            raise ValueError("Block size must be a power of two.")
        if self.memspeed < 0:
            raise ValueError("Memory latency must not be negative.")
        for name, level in self.levels().items():
            self._validate_level(name, level)
        self._validate_inclusion()

    def _bit_slicer(self, sets):
        index_bits = safe_log_2(sets) if sets else 0
        tag_bits = self.address_bits - index_bits - self.bits.offset_bits
        return {"tag": tag_bits, "index": index_bits}

    def derive_bits(self):
        self.bits.offset_bits = safe_log_2(self.blocksize)
        for name, level in self.levels().items():
            sliced = self._bit_slicer(level.num_sets)
            setattr(self.bits, f"{name}_tag_bits", sliced["tag"])
            setattr(self.bits, f"{name}_index_bits", sliced["index"])

    def __str__(self):
        print_str = ""
        for label, name in (("I-cache", "icache"), ("D-cache", "dcache"), ("L2 cache", "l2cache")):
            level = getattr(self, name)
            if not level.enabled:
                print_str += f"{label} is disabled.\n\n"
                continue
            print_str += f"{label} contains {level.num_sets} sets.\n"
            print_str += f"Each set contains {level.associativity} entries.\n"
            print_str += f"Hit time is {level.hit_time} cycles.\n"
            print_str += f"Number of bits used for the index is {getattr(self.bits, name + '_index_bits')}.\n"
            print_str += f"Number of bits used for the tag is {getattr(self.bits, name + '_tag_bits')}.\n\n"
        if self.l2cache.enabled:
            print_str += f"The L2 cache is {'' if self.inclusive else 'not '}inclusive.\n"
        print_str += f"Each block is {self.blocksize} bytes ({self.bits.offset_bits} offset bits).\n"
        print_str += f"Main memory latency is {self.memspeed} cycles.\n"
        return print_str
