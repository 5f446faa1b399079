class AccessResult:
    """
    Result of accessing one level of the hierarchy
    """
    def __init__(self, level, address, hit, latency, tag=None, index=None, evicted_address=None, lower=None):
        self.level = level
        self.addr = address
        self.hit = hit
        # total latency seen by the caller of this level, lower levels included
        self.latency = latency
        self.tag = tag
        self.index = index
        # block address a lower level pushed out, only ever set by L2
        self.evicted_address = evicted_address
        self.lower = lower

    def chain(self):
        """
        Walk this result and the results of the lower levels it consulted
        :return: yields AccessResult objects, top level first
        """
        result = self
        while result is not None:
            yield result
            result = result.lower


class AccessLine:
    """
    Class to encapsulate all the info about a single reference for verbose output
    """
    HEADER = ("Address  Kind L1 Tag   L1 Ind L1 Res. L2 Tag   L2 Ind L2 Res. Latency\n"
              "-------- ---- -------- ------ ------- -------- ------ ------- -------")

    def __init__(self, kind, address):
        self.kind = kind
        self.address = int(address) & 0xFFFFFFFF
        self.l1_tag = None
        self.l1_index = None
        self.l1_result = None
        self.l2_tag = None
        self.l2_index = None
        self.l2_result = None
        self.latency = None

    def update(self, result):
        """
        Copy tag, index and hit info out of a result chain
        :param result: AccessResult returned by the top level
        :return: None
        """
        self.latency = result.latency
        for level_result in result.chain():
            if level_result.level in ("I-cache", "D-cache"):
                self.l1_tag = level_result.tag
                self.l1_index = level_result.index
                self.l1_result = level_result.hit
            elif level_result.level == "L2":
                self.l2_tag = level_result.tag
                self.l2_index = level_result.index
                self.l2_result = level_result.hit

    @staticmethod
    def _format_numeric(value, width, zero_pad=False):
        """
        Helper to format numeric values as hex strings, with options for width and zero-padding
        :param value: int or None
        :param width: int
        :param zero_pad: bool
        :return: formatted string
        """
        if value is None:
            return " " * width
        if zero_pad:
            return f"{value:0{width}x}"
        return f"{value:>{width}x}"

    @staticmethod
    def _format_hit_miss(value, width):
        return (" " * width) if value is None else f"{'hit' if value else 'miss':>{width}s}"

    def __str__(self):
        return " ".join([
            self._format_numeric(self.address, 8, zero_pad=True),
            f"{self.kind:>4s}",
            self._format_numeric(self.l1_tag, 8), self._format_numeric(self.l1_index, 6),
            self._format_hit_miss(self.l1_result, 7),
            self._format_numeric(self.l2_tag, 8), self._format_numeric(self.l2_index, 6),
            self._format_hit_miss(self.l2_result, 7),
            f"{self.latency:>7d}" if self.latency is not None else " " * 7,
        ])
