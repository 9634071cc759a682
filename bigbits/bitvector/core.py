"""Provide the packed bit-vector type."""
from bigbits.bitvector import context


def _check_bit(value):
    if context.Validation.current_context:
        assert value in [True, False], "invalid bit value {}".format(value)


class BitVector(object):
    """Represent a growable sequence of bits packed into bytes.

    Bit ``i`` of the vector is stored in bit ``i % 8`` of byte ``i // 8``
    of the underlying buffer, that is, bits are packed
    least-significant bit first. The buffer always holds
    ``ceil(length / 8)`` bytes; the unused high bits of the last byte
    (the padding) are kept to zero and are never part of the value.

    Bit-vectors support the bitwise operators ``&``, ``|`` and ``^``
    (see `operation`), indexing with ``[]`` and comparison with ``==``.

        >>> from bigbits.bitvector.core import BitVector
        >>> bv = BitVector.from_bools([True, False, True])
        >>> bv
        0b101
        >>> len(bv), bv[0], bv[1]
        (3, True, False)
        >>> bv.push(True)
        >>> bv.get_data()
        [True, False, True, True]
        >>> bv.vrepr()
        'BitVector.from_bools([True, False, True, True])'

    Since bit-vectors can be modified in place with `push` and
    `set_bit`, they are not hashable.
    """

    __slots__ = ["_data", "_length"]

    def __init__(self):
        """Initialize an empty bit-vector."""
        self._data = bytearray()
        self._length = 0

    @classmethod
    def from_bools(cls, bits):
        """Pack a sequence of booleans into a new bit-vector.

            >>> from bigbits.bitvector.core import BitVector
            >>> BitVector.from_bools([False, False, True, True])
            0b1100
            >>> BitVector.from_bools([]).length
            0

        """
        bits = list(bits)
        data = bytearray((len(bits) + 7) // 8)

        for index, bit in enumerate(bits):
            _check_bit(bit)
            if bit:
                data[index // 8] |= 1 << (index % 8)

        obj = cls()
        obj._data = data
        obj._length = len(bits)
        return obj

    @classmethod
    def from_bytes(cls, data, length):
        """Build a bit-vector of given length from its packed bytes.

        This is the inverse of `to_bytes`. Bits of *data* beyond *length*
        are discarded.

            >>> from bigbits.bitvector.core import BitVector
            >>> BitVector.from_bytes(b"\\xff", 3)
            0b111

        """
        assert isinstance(length, int) and 0 <= length
        assert len(data) == (length + 7) // 8

        obj = cls()
        obj._data = bytearray(data)
        obj._length = length
        obj._clear_padding()
        return obj

    def __len__(self):
        return self._length

    def __getitem__(self, key):
        """Override [] operator."""
        return self.get_bit(key)

    def __setitem__(self, key, value):
        self.set_bit(key, value)

    def __iter__(self):
        for index in range(self._length):
            yield self.get_bit(index)

    def __eq__(self, other):
        """Override == operator."""
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._length == other._length and self.to_bytes() == other.to_bytes()

    __hash__ = None

    # Bitwise operators

    def __and__(self, other):
        """Override & operator."""
        from bigbits.bitvector import operation
        return operation.BvAnd(self, other)

    def __or__(self, other):
        """Override | operator."""
        from bigbits.bitvector import operation
        return operation.BvOr(self, other)

    def __xor__(self, other):
        """Override ^ operator."""
        from bigbits.bitvector import operation
        return operation.BvXor(self, other)

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
    def length(self):
        """The number of bits of the bit-vector."""
        return self._length

    def _locate(self, index):
        """Return the byte and the bit position of the given index."""
        if not isinstance(index, int):
            raise TypeError("invalid index")
        if index < 0 or index >= self._length:
            msg = "bit index {} out of range [0, {})"
            raise IndexError(msg.format(index, self._length))
        return index // 8, index % 8

    def _clear_padding(self):
        used = self._length % 8
        if used:
            self._data[-1] &= (1 << used) - 1

    def push(self, value):
        """Append a bit at the end (most significant side).

        A new byte is allocated only when the current length is a
        multiple of 8.
        """
        _check_bit(value)

        if self._length % 8 == 0:
            self._data.append(0)
        self._length += 1
        self.set_bit(self._length - 1, value)

    def get_data(self):
        """Return the list of bits, from index 0 to the last index."""
        return list(self)

    def get_bit(self, index):
        """Return the bit at the given index.

        Raises:
            IndexError: if index is not in [0, length)
        """
        byte_index, bit_index = self._locate(index)
        return self._data[byte_index] & (1 << bit_index) != 0

    def set_bit(self, index, value):
        """Set the bit at the given index to the given value.

        Raises:
            IndexError: if index is not in [0, length)
        """
        _check_bit(value)
        byte_index, bit_index = self._locate(index)

        if value:
            self._data[byte_index] |= 1 << bit_index
        else:
            self._data[byte_index] &= ~(1 << bit_index) & 0xFF

    def get_length(self):
        """Return the number of bits."""
        return self._length

    def copy(self):
        """Return an independent copy of the bit-vector."""
        return type(self).from_bytes(self._data, self._length)

    def to_bytes(self):
        """Return the packed bytes, least significant byte first.

            >>> from bigbits.bitvector.core import BitVector
            >>> BitVector.from_bools([True, False, False, False,
            ...                       False, False, False, False, True]).to_bytes()
            b'\\x01\\x01'

        """
        return bytes(self._data)
