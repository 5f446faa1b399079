from .address import EMPTY_TAG, decode_address, reconstruct_address, is_valid_tag

# recency of a slot emptied by inclusion, always picked as the next victim
INVALID_RECENCY = 0xFFFFFFFF


class SetAssociativeCache:
    """
    Tag-only set associative cache with counter based LRU, shared by the I-cache, D-cache and L2
    """
    def __init__(self, name, num_sets, associativity, hit_time, *, offset_bits, index_bits):
        self.name = name
        self.num_sets = num_sets
        self.associativity = associativity
        self.hit_time = hit_time
        self.offset_bits = offset_bits
        self.index_bits = index_bits

        # storage, two flat arrays per set. recency 0 is the most recently used way
        self.tags = [[EMPTY_TAG] * self.associativity for _ in range(self.num_sets)]
        self.recency = [[0] * self.associativity for _ in range(self.num_sets)]

    @property
    def enabled(self):
        return self.num_sets > 0

    def parse_address(self, address):
        """
        Parse an address into its set index and flagged tag
        :param address: int
        :return: integer index and tag
        """
        return decode_address(address, self.offset_bits, self.index_bits)

    def block_address(self, index, tag):
        return reconstruct_address(index, tag, self.offset_bits, self.index_bits)

    def find_way(self, index, tag):
        """
        Scan a set for a tag
        :param index: set index
        :param tag: flagged tag
        :return: way holding the tag or None
        """
        tags = self.tags[index]
        for way in range(self.associativity):
            if tags[way] == tag:
                return way
        return None

    def touch(self, index, way):
        """
        Make a way the most recently used one after a hit. Forced-invalid slots keep their sentinel.
        :param index: set index
        :param way: way that hit
        :return: None
        """
        recency = self.recency[index]
        for i in range(self.associativity):
            if recency[i] != INVALID_RECENCY:
                recency[i] += 1
        recency[way] = 0

    def fill(self, index, tag):
        """
        Place a tag into its set after a miss, replacing the least recently used way.
        Victim search and aging happen in the same pass.
        :param index: set index
        :param tag: flagged tag to insert
        :return: the replaced tag if it was valid, else None
        """
        tags = self.tags[index]
        recency = self.recency[index]
        victim = 0
        largest = 0
        for way in range(self.associativity):
            if recency[way] > largest:
                largest = recency[way]
                victim = way
            if recency[way] != INVALID_RECENCY:
                recency[way] += 1

        evicted = tags[victim] if is_valid_tag(tags[victim]) else None
        tags[victim] = tag
        recency[victim] = 0
        return evicted

    def contains(self, address):
        index, tag = self.parse_address(address)
        return self.find_way(index, tag) is not None

    def invalidate(self, address):
        """
        Invalidate the entry that maps to this address, marking its slot as the next victim
        :param address: int
        :return: boolean indicating if an entry was invalidated
        """
        index, tag = self.parse_address(address)
        way = self.find_way(index, tag)
        if way is None:
            return False
        self.tags[index][way] = EMPTY_TAG
        self.recency[index][way] = INVALID_RECENCY
        return True

    def valid_count(self, index):
        return sum(1 for tag in self.tags[index] if is_valid_tag(tag))

    def resident_addresses(self):
        """
        Block addresses of every valid entry, in set then way order
        :return: list of int
        """
        addresses = []
        for index, tags in enumerate(self.tags):
            for tag in tags:
                if is_valid_tag(tag):
                    addresses.append(self.block_address(index, tag))
        return addresses

    def reset(self):
        for index in range(self.num_sets):
            self.tags[index][:] = [EMPTY_TAG] * self.associativity
            self.recency[index][:] = [0] * self.associativity


class InstructionCache(SetAssociativeCache):
    """
    lightweight wrapper around SetAssociativeCache for the L1 instruction cache
    """
    def __init__(self, config):
        super().__init__("I-cache", config.icache.num_sets, config.icache.associativity, config.icache.hit_time,
                         offset_bits=config.bits.offset_bits, index_bits=config.bits.icache_index_bits)


class DataCache(SetAssociativeCache):
    """
    lightweight wrapper around SetAssociativeCache for the L1 data cache
    """
    def __init__(self, config):
        super().__init__("D-cache", config.dcache.num_sets, config.dcache.associativity, config.dcache.hit_time,
                         offset_bits=config.bits.offset_bits, index_bits=config.bits.dcache_index_bits)


class L2Cache(SetAssociativeCache):
    """
    lightweight wrapper around SetAssociativeCache for the shared L2 cache
    """
    def __init__(self, config):
        super().__init__("L2", config.l2cache.num_sets, config.l2cache.associativity, config.l2cache.hit_time,
                         offset_bits=config.bits.offset_bits, index_bits=config.bits.l2cache_index_bits)
