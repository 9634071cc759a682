"""Arbitrary-precision unsigned integers on packed bit-vectors.

The package is split in two layers:

- `bigbits.bitvector`: packed bit-vectors and the bitwise operators.
- `bigbits.biginteger`: non-negative integers of unbounded width built on
  top of the bit-vector layer.

"""
