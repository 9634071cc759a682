"""Provide the arbitrary-precision unsigned integer type."""
import warnings

from bigbits.bitvector import context
from bigbits.bitvector.core import BitVector
from bigbits.bitvector.operation import BvAnd, BvXor

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_PREFIXES = {"0b": 2, "0o": 8, "0x": 16}


class BigInteger(object):
    """Represent non-negative integers of unbounded width.

    The value is stored as a `BitVector`, the *magnitude*, where the bit
    at index ``i`` has weight ``2**i``. A big integer built from a plain
    integer keeps the full bit-width it was built with (the `Width`
    context, 128 by default); use `trimmed` to drop the leading zeros.

    Big integers are immutable: `add` (and ``+``) returns a new object,
    and the magnitude is copied both when it is stored and when it is
    returned.

        >>> from bigbits.biginteger.core import BigInteger
        >>> x = BigInteger(5) + BigInteger(3)
        >>> x
        8
        >>> x.width
        128
        >>> x.trimmed().magnitude
        0b1000
        >>> BigInteger(2**128 - 1) + BigInteger(1) == 2**128
        True

    Two big integers are equal if they represent the same number,
    regardless of their width. Compare the magnitudes to take the
    width into account.

    Args:
        value: the integer value.
        width: the bit-width (optional)
    """

    __slots__ = ["_magnitude"]

    def __init__(self, value, width=None):
        """Initialize a big integer from a fixed-width unsigned integer."""
        if width is None:
            width = context.Width.current_context

        assert isinstance(value, int) and not isinstance(value, bool)
        assert isinstance(width, int) and 0 <= width
        assert 0 <= value < 2 ** width

        self._magnitude = BitVector.from_bools(
            (value >> i) & 1 != 0 for i in range(width))

    @classmethod
    def from_bitvector(cls, bv):
        """Build a big integer whose magnitude is a copy of *bv*.

            >>> from bigbits.bitvector.core import BitVector
            >>> from bigbits.biginteger.core import BigInteger
            >>> BigInteger.from_bitvector(BitVector.from_bools([False, True]))
            2

        """
        assert isinstance(bv, BitVector)
        obj = cls.__new__(cls)
        obj._magnitude = bv.copy()
        return obj

    @classmethod
    def from_string(cls, literal):
        """Parse a textual literal into a big integer.

        Decimal literals are accepted, as well as binary, octal and
        hexadecimal literals with the prefixes ``0b``, ``0o`` and ``0x``.
        Underscores may separate digits. Each digit is accumulated as
        ``result = result * base + digit`` with bit-vector operations,
        so literals of any length are supported. The result is trimmed.

            >>> from bigbits.biginteger.core import BigInteger
            >>> BigInteger.from_string("340282366920938463463374607431768211456")
            340282366920938463463374607431768211456
            >>> BigInteger.from_string("0xff").vrepr()
            'BigInteger(255, width=8)'
            >>> BigInteger.from_string("-1")
            Traceback (most recent call last):
             ...
            NotImplementedError: signed literals are not supported

        Raises:
            NotImplementedError: if the literal has a sign
            ValueError: if the literal is malformed
        """
        if not isinstance(literal, str):
            msg = "cannot parse '{}' as a BigInteger"
            raise TypeError(msg.format(type(literal).__name__))

        text = literal.strip().lower()
        if text[:1] in ["-", "+"]:
            raise NotImplementedError("signed literals are not supported")

        base = _PREFIXES.get(text[:2], 10)
        if base != 10:
            text = text[2:]

        if not text or text.startswith("_") or text.endswith("_") or "__" in text:
            raise ValueError("invalid literal for BigInteger: {!r}".format(literal))

        result = cls.from_bitvector(BitVector())
        for char in text.replace("_", ""):
            digit = _DIGITS.find(char)
            if digit < 0 or digit >= base:
                msg = "invalid digit {!r} in base {} literal {!r}"
                raise ValueError(msg.format(char, base, literal))

            result = result._scale(base) + cls(digit, width=digit.bit_length())
            result = result.trimmed()

        return result

    def __int__(self):
        value = 0
        for i, bit in enumerate(self._magnitude):
            if bit:
                value |= 1 << i
        return value

    def __eq__(self, other):
        """Override == operator."""
        if isinstance(other, BigInteger):
            return int(self) == int(other)
        elif isinstance(other, int) and not isinstance(other, bool):
            return int(self) == other
        else:
            return NotImplemented

    def __hash__(self):
        return hash(int(self))

    def __add__(self, other):
        """Override + operator."""
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.add(other)

    def __str__(self):
        """Return the non-verbose string representation."""
        from bigbits.bitvector import printing
        return (printing.BvStrPrinter()).doprint(self)

    __repr__ = __str__

    def vrepr(self):
        """Return a verbose string representation."""
        from bigbits.bitvector import printing
        return (printing.BvReprPrinter()).doprint(self)

    @property
    def magnitude(self):
        """A copy of the bit-vector representing the integer."""
        return self._magnitude.copy()

    @property
    def width(self):
        """The bit-width of the magnitude."""
        return self._magnitude.length

    def trimmed(self):
        """Return the same integer with the leading zero bits removed.

            >>> from bigbits.biginteger.core import BigInteger
            >>> BigInteger(5).trimmed().width
            3
            >>> BigInteger(0).trimmed().width
            0

        """
        bits = self._magnitude.get_data()
        while bits and not bits[-1]:
            bits.pop()
        return type(self).from_bitvector(BitVector.from_bools(bits))

    def add(self, rhs):
        """Add two big integers with a ripple-carry adder.

        The sum of each position is split into the XOR of both
        magnitudes (the sum without carry) and their AND (the carry
        generated at each position, which weights the next position).
        The final carry is appended unless the `CarryOut` context is
        disabled, in which case the sum wraps around modulo
        ``2**width`` of the widest operand.

            >>> from bigbits.biginteger.core import BigInteger
            >>> int(BigInteger(5, width=3).add(BigInteger(3, width=2)))
            8

        """
        assert isinstance(rhs, BigInteger)

        x = BvXor(self._magnitude, rhs._magnitude)
        a = BvAnd(self._magnitude, rhs._magnitude)

        if x.length == 0:
            return type(self)(0)

        width = max(x.length, a.length)

        result = BitVector()
        result.push(x.get_bit(0))

        carry = False
        for i in range(width - 1):
            total = x.get_bit(i + 1) + a.get_bit(i) + carry
            result.push(total % 2 == 1)
            carry = total >= 2

        # a[width - 1] and carry cannot both be set
        carry = a.get_bit(width - 1) or carry
        if carry:
            if context.CarryOut.current_context:
                result.push(True)
            else:
                warnings.warn("discarding carry out of bit {}".format(width - 1),
                              RuntimeWarning)

        assert result.length in [width, width + 1]
        return type(self).from_bitvector(result)

    def _scale(self, factor):
        """Multiply by a small non-negative integer with shift-and-add."""
        assert isinstance(factor, int) and 0 <= factor

        result = type(self).from_bitvector(BitVector())
        data = self._magnitude.get_data()

        shift = 0
        while factor:
            if factor & 1:
                shifted = BitVector.from_bools([False] * shift + data)
                result = result + type(self).from_bitvector(shifted)
            factor >>= 1
            shift += 1

        return result
