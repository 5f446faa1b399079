ADDRESS_MASK = 0xFFFFFFFF
# top tag bit doubles as the valid flag, an empty slot holds 0
VALID_BIT = 0x80000000
EMPTY_TAG = 0


def decode_address(address, offset_bits, index_bits):
    """
    Split an address into the set index and the stored (flagged) tag
    :param address: int
    :param offset_bits: log2 of the block size
    :param index_bits: log2 of the number of sets
    :return: set index, tag with the valid bit set
    """
    block = (address & ADDRESS_MASK) >> offset_bits
    index = block & ((1 << index_bits) - 1)
    tag = (block >> index_bits) | VALID_BIT
    return index, tag


def reconstruct_address(index, tag, offset_bits, index_bits):
    """
    Rebuild the block aligned address that decodes to (index, tag)
    :param index: set index
    :param tag: stored tag, valid bit may or may not be set
    :param offset_bits: log2 of the block size
    :param index_bits: log2 of the number of sets
    :return: int address
    """
    return (((tag & ~VALID_BIT) << index_bits) | index) << offset_bits


def is_valid_tag(tag):
    return bool(tag & VALID_BIT)
