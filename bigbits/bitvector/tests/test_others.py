"""Tests for the context and printing module."""
import doctest
import unittest

import bigbits.bitvector.context
import bigbits.bitvector.printing
from bigbits.biginteger.core import BigInteger
from bigbits.bitvector.context import CarryOut, Validation, Width
from bigbits.bitvector.core import BitVector


class TestContext(unittest.TestCase):
    """Tests of the context managers."""

    def test_restore(self):
        with Width(8):
            with Width(16):
                self.assertEqual(Width.current_context, 16)
            self.assertEqual(Width.current_context, 8)
        self.assertEqual(Width.current_context, 128)

        with CarryOut(False):
            self.assertFalse(CarryOut.current_context)
        self.assertTrue(CarryOut.current_context)

    def test_restore_on_error(self):
        with self.assertRaises(IndexError):
            with Validation(False):
                BitVector().get_bit(0)
        self.assertTrue(Validation.current_context)

    def test_invalid_args(self):
        with self.assertRaises(AssertionError):
            Width(-1)
        with self.assertRaises(AssertionError):
            CarryOut(None)
        with self.assertRaises(AssertionError):
            Validation("yes")


class TestPrinting(unittest.TestCase):
    """Tests of the printing module."""

    def test_bitvector(self):
        bv = BitVector.from_bools([True, False, False, False, False, False, False, False, True])
        self.assertEqual(str(bv), "0b100000001")
        self.assertEqual(repr(bv), str(bv))
        self.assertEqual(bv.vrepr(), "BitVector.from_bools({})".format(bv.get_data()))
        self.assertEqual(str(BitVector()), "0b")
        self.assertEqual(BitVector().vrepr(), "BitVector.from_bools([])")

    def test_biginteger(self):
        self.assertEqual(str(BigInteger(12)), "12")
        self.assertEqual(repr(BigInteger(0)), "0")
        self.assertEqual(BigInteger(12, width=8).vrepr(), "BigInteger(12, width=8)")
        self.assertEqual(str(BigInteger(2**128 - 1) + BigInteger(1)), str(2**128))


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    tests.addTests(doctest.DocTestSuite(bigbits.bitvector.printing))
    tests.addTests(doctest.DocTestSuite(bigbits.bitvector.context))
    return tests
