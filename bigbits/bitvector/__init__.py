"""Manipulate packed bit-vectors.

This module stores sequences of bits packed eight per byte,
least-significant bit first, and implements the bitwise operators
AND, OR and XOR with zero-extension of the shorter operand.

"""
