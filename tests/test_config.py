import unittest

from sim_config import Config, is_power_of_two, safe_log_2


class TestHelpers(unittest.TestCase):

    def test_is_power_of_two(self):
        self.assertTrue(is_power_of_two(1))
        self.assertTrue(is_power_of_two(64))
        self.assertFalse(is_power_of_two(0))
        self.assertFalse(is_power_of_two(12))

    def test_safe_log_2(self):
        self.assertEqual(safe_log_2(256), 8)
        with self.assertRaises(ValueError):
            safe_log_2(6)


class TestConfig(unittest.TestCase):

    def test_defaults_disable_every_cache(self):
        config = Config()
        self.assertFalse(config.icache.enabled)
        self.assertFalse(config.dcache.enabled)
        self.assertFalse(config.l2cache.enabled)
        self.assertEqual(config.blocksize, 64)
        self.assertFalse(config.inclusive)

    def test_derived_bits(self):
        config = Config(blocksize=32, icache_sets=128, dcache_sets=64, l2cache_sets=1024, l2cache_assoc=8)
        self.assertEqual(config.bits.offset_bits, 5)
        self.assertEqual(config.bits.icache_index_bits, 7)
        self.assertEqual(config.bits.dcache_index_bits, 6)
        self.assertEqual(config.bits.l2cache_index_bits, 10)
        self.assertEqual(config.bits.l2cache_tag_bits, 32 - 10 - 5)

    def test_from_options_accepts_driver_names(self):
        config = Config.from_options({"icacheSets": 16, "icacheAssoc": 2, "icacheHitTime": 3,
                                      "l2cacheSets": 32, "l2cacheAssoc": 4, "inclusive": "1",
                                      "blocksize": 16, "memspeed": 80})
        self.assertEqual(config.icache.num_sets, 16)
        self.assertEqual(config.icache.hit_time, 3)
        self.assertEqual(config.l2cache.associativity, 4)
        self.assertTrue(config.inclusive)
        self.assertEqual(config.memspeed, 80)

    def test_from_options_rejects_unknown_option(self):
        with self.assertRaises(ValueError):
            Config.from_options({"l3cacheSets": 4})

    def test_rejects_bad_geometry(self):
        bad = [
            {"blocksize": 24},
            {"dcache_sets": 12},
            {"icache_sets": -4},
            {"l2cache_sets": 8, "l2cache_assoc": 0},
            {"dcache_sets": 4, "dcache_hit_time": -1},
            {"memspeed": -5},
            {"blocksize": 1, "dcache_sets": 1},
            {"inclusive": "maybe"},
        ]
        for options in bad:
            with self.subTest(options=options):
                with self.assertRaises(ValueError):
                    Config(**options)

    def test_inclusive_requires_l1_assoc_within_l2(self):
        with self.assertRaises(ValueError):
            Config(dcache_sets=16, dcache_assoc=4, l2cache_sets=64, l2cache_assoc=2, inclusive=True)
        # fine without inclusion, or with L2 absent
        Config(dcache_sets=16, dcache_assoc=4, l2cache_sets=64, l2cache_assoc=2, inclusive=False)
        Config(dcache_sets=16, dcache_assoc=4, inclusive=True)

    def test_str_describes_levels(self):
        text = str(Config(dcache_sets=16, dcache_assoc=2, l2cache_sets=64, l2cache_assoc=4, inclusive=True))
        self.assertIn("I-cache is disabled.", text)
        self.assertIn("D-cache contains 16 sets.", text)
        self.assertIn("The L2 cache is inclusive.", text)


if __name__ == '__main__':
    unittest.main()
