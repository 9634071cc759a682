"""Tests for the core module."""
import doctest
import unittest

from hypothesis import given
from hypothesis.strategies import booleans, integers, lists, data

from bigbits.bitvector.context import Validation
from bigbits.bitvector.core import BitVector


class TestBitVector(unittest.TestCase):
    """Tests of the BitVector class."""

    def test_empty(self):
        bv = BitVector()
        self.assertEqual(bv.length, 0)
        self.assertEqual(len(bv), 0)
        self.assertEqual(bv.get_length(), 0)
        self.assertEqual(bv.get_data(), [])
        self.assertEqual(bv.to_bytes(), b"")
        self.assertEqual(bv, BitVector.from_bools([]))

    def test_packing(self):
        bv = BitVector.from_bools([True, False, True, True, False, False, False, False,
                                   False, True])
        self.assertEqual(bv.to_bytes(), bytes([0b00001101, 0b00000010]))
        self.assertEqual(bv.length, 10)

    def test_push_allocation(self):
        bv = BitVector()
        for i in range(17):
            bv.push(i % 3 == 0)
            self.assertEqual(len(bv.to_bytes()), (i + 8) // 8)
        self.assertEqual(bv.get_data(), [i % 3 == 0 for i in range(17)])

    def test_invalid_index(self):
        bv = BitVector.from_bools([True, False, True])
        with self.assertRaises(IndexError):
            bv.get_bit(3)
        with self.assertRaises(IndexError):
            bv.get_bit(-1)
        with self.assertRaises(IndexError):
            bv.set_bit(3, True)
        with self.assertRaises(IndexError):
            bv[8]
        with self.assertRaises(IndexError):
            BitVector().get_bit(0)
        with self.assertRaises(TypeError):
            bv["0"]

    def test_invalid_index_without_validation(self):
        bv = BitVector.from_bools([True])
        with Validation(False):
            with self.assertRaises(IndexError):
                bv.get_bit(1)

    def test_invalid_bit(self):
        bv = BitVector.from_bools([True])
        with self.assertRaises(AssertionError):
            bv.push("1")
        with self.assertRaises(AssertionError):
            bv.set_bit(0, 2)
        with self.assertRaises(AssertionError):
            BitVector.from_bools([True, None])
        self.assertEqual(bv.get_data(), [True])

    def test_set_bit_clears(self):
        bv = BitVector.from_bools([True] * 9)
        bv.set_bit(3, False)
        bv[8] = False
        self.assertEqual(bv.get_data(), [True, True, True, False, True, True, True, True, False])
        bv.set_bit(3, True)
        self.assertTrue(bv.get_bit(3))

    def test_padding_is_ignored(self):
        bv = BitVector.from_bytes(b"\xff", 3)
        self.assertEqual(bv.get_data(), [True, True, True])
        self.assertEqual(bv, BitVector.from_bools([True, True, True]))
        bv.push(False)
        self.assertEqual(bv.get_data(), [True, True, True, False])

    def test_comparisons(self):
        bv = BitVector.from_bools([True, False, True])
        self.assertEqual(bv, BitVector.from_bools([True, False, True]))
        for i in range(3):
            other = BitVector.from_bools([True, False, True])
            other.set_bit(i, not other.get_bit(i))
            self.assertNotEqual(bv, other)
        self.assertNotEqual(bv, BitVector.from_bools([True, False, True, False]))
        self.assertNotEqual(bv, [True, False, True])

    def test_unhashable(self):
        with self.assertRaises(TypeError):
            hash(BitVector())

    def test_copy(self):
        bv = BitVector.from_bools([True, False])
        other = bv.copy()
        other.set_bit(1, True)
        other.push(True)
        self.assertEqual(bv.get_data(), [True, False])
        self.assertEqual(other.get_data(), [True, True, True])

    @given(lists(booleans()))
    def test_from_bools(self, bits):
        bv = BitVector.from_bools(bits)
        self.assertEqual(bv.get_data(), bits)
        self.assertEqual(list(bv), bits)
        self.assertEqual(bv.length, len(bits))
        self.assertEqual(len(bv.to_bytes()), (len(bits) + 7) // 8)
        self.assertEqual(BitVector.from_bytes(bv.to_bytes(), len(bits)), bv)

    @given(lists(booleans()))
    def test_push(self, bits):
        bv = BitVector()
        for i, b in enumerate(bits):
            bv.push(b)
            self.assertEqual(bv.length, i + 1)
            self.assertEqual(bv.get_bit(i), b)
        self.assertEqual(bv, BitVector.from_bools(bits))

    @given(lists(booleans(), min_size=1), data())
    def test_set_bit(self, bits, data_strategy):
        index = data_strategy.draw(integers(min_value=0, max_value=len(bits) - 1))
        value = data_strategy.draw(booleans())

        bv = BitVector.from_bools(bits)
        bv.set_bit(index, value)

        expected = list(bits)
        expected[index] = value
        self.assertEqual(bv.get_bit(index), value)
        self.assertEqual(bv.get_data(), expected)


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    import bigbits.bitvector.core
    tests.addTests(doctest.DocTestSuite(bigbits.bitvector.core))
    return tests
