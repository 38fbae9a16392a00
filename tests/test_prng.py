import unittest

from stochastic_l_systems.prng import MASK32, XorShift128


class TestXorShift128(unittest.TestCase):

    def test_same_seed_same_sequence(self):
        a = XorShift128(1234)
        b = XorShift128(1234)
        self.assertEqual([a.next_uint() for _ in range(50)], [b.next_uint() for _ in range(50)])

    def test_reseed_restarts_sequence(self):
        rng = XorShift128(42)
        first = [rng.next_uint() for _ in range(10)]
        rng.seed(42)
        self.assertEqual([rng.next_uint() for _ in range(10)], first)

    def test_different_seeds_differ(self):
        a = XorShift128(1)
        b = XorShift128(2)
        self.assertNotEqual([a.next_uint() for _ in range(10)], [b.next_uint() for _ in range(10)])

    def test_unspecified_seed_uses_timer(self):
        rng = XorShift128()
        self.assertGreaterEqual(rng.seed_value, 0)
        self.assertGreaterEqual(XorShift128(-1).seed_value, 0)

    def test_xorshift_step(self):
        rng = XorShift128(0)
        rng.state = [1, 2, 3, 4]
        s = 4
        s ^= (s << 11) & MASK32
        s ^= s >> 8
        s ^= 1
        s ^= 1 >> 19
        self.assertEqual(rng.next_uint(), s)
        self.assertEqual(rng.state, [s, 1, 2, 3])

    def test_state_stays_32_bit(self):
        rng = XorShift128(7)
        rng.state = [MASK32, MASK32, MASK32, MASK32]
        for _ in range(100):
            value = rng.next_uint()
            self.assertTrue(0 <= value <= MASK32)

    def test_range(self):
        rng = XorShift128(99)
        values = [rng.next_uint_in_range(3, 6) for _ in range(500)]
        self.assertTrue(all(3 <= v <= 6 for v in values))
        self.assertEqual(set(values), {3, 4, 5, 6})

    def test_float_in_unit_interval(self):
        rng = XorShift128(5)
        values = [rng.next_float01() for _ in range(1000)]
        self.assertTrue(all(0.0 <= v <= 1.0 for v in values))
        self.assertGreater(max(values) - min(values), 0.5)


if __name__ == "__main__":
    unittest.main()
