import unittest

from cache_hierarchy.data_structures.caches.address import (decode_address, reconstruct_address, VALID_BIT,
                                                            EMPTY_TAG, is_valid_tag)


class TestAddressDecoding(unittest.TestCase):

    def test_decode_splits_index_and_tag(self):
        # 16 byte blocks, 8 sets: 0b1011_101_0110 -> index 0b101, tag 0b1011
        index, tag = decode_address(0b1011_101_0110, offset_bits=4, index_bits=3)
        self.assertEqual(index, 0b101)
        self.assertEqual(tag, 0b1011 | VALID_BIT)

    def test_decoded_tag_never_matches_empty_slot(self):
        index, tag = decode_address(0, offset_bits=2, index_bits=1)
        self.assertEqual(index, 0)
        self.assertNotEqual(tag, EMPTY_TAG)
        self.assertTrue(is_valid_tag(tag))
        self.assertFalse(is_valid_tag(EMPTY_TAG))

    def test_addresses_wider_than_32_bits_are_masked(self):
        self.assertEqual(decode_address(0x1_0000_0040, 4, 2), decode_address(0x40, 4, 2))

    def test_reconstruct_inverts_decode(self):
        addresses = [0, 4, 0x40, 0x1234, 0xDEADBEEF, 0xFFFFFFFF, 0x80000000]
        geometries = [(2, 1), (2, 0), (6, 4), (4, 10), (0, 1), (12, 8)]
        for offset_bits, index_bits in geometries:
            for address in addresses:
                with self.subTest(address=hex(address), offset_bits=offset_bits, index_bits=index_bits):
                    index, tag = decode_address(address, offset_bits, index_bits)
                    block_base = address & ~((1 << offset_bits) - 1)
                    self.assertEqual(reconstruct_address(index, tag, offset_bits, index_bits), block_base)

    def test_reconstruct_ignores_missing_valid_bit(self):
        self.assertEqual(reconstruct_address(1, 3, 2, 1), reconstruct_address(1, 3 | VALID_BIT, 2, 1))
        self.assertEqual(reconstruct_address(1, 3, 2, 1), ((3 * 2) + 1) * 4)


if __name__ == '__main__':
    unittest.main()
