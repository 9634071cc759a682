"""Non-negative integers of unbounded width.

A `BigInteger` stores its magnitude as a `BitVector` (least-significant
bit at index 0) and implements addition as a ripple-carry adder over
the bitwise operators of `bigbits.bitvector`.

"""
