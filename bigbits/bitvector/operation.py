"""Provide the bitwise bit-vector operators."""
import itertools

from bigbits.bitvector import context
from bigbits.bitvector import core


class Operation(object):
    """Represent bit-vector operations.

    A bit-vector operation takes some bit-vector operands and returns
    a new bit-vector. The operands are never modified and the result
    never shares its buffer with them.

    Operands of different lengths are allowed: the shorter operand is
    *zero-extended*, that is, the bits beyond its length are read as 0.
    The result has the length of the longest operand.

    This class is not meant to be instantiated but to provide a base
    class for the different types of bit-vector operations. Calling
    a subclass evaluates the operation and returns a `BitVector`.

    Attributes:
        arity: the number of bit-vector operands.
        is_symmetric: True if the operator is symmetric with respect to
            its operands.
        infix_symbol: the operator symbol (optional)
    """

    def __new__(cls, *args, **options):
        val_op = options.pop("validate_operands",
                             context.Validation.current_context)

        if val_op:
            args = cls._parse_args(*args)

        width = cls.output_width(*args)
        result = cls.eval(*args)

        assert result.length == width
        return result

    @classmethod
    def _parse_args(cls, *args):
        if len(args) != cls.arity:
            msg = "{} expects {} operands, {} given"
            raise TypeError(msg.format(cls.__name__, cls.arity, len(args)))

        for a in args:
            if not isinstance(a, core.BitVector):
                msg = "{} expects BitVector operands, not '{}'"
                raise TypeError(msg.format(cls.__name__, type(a).__name__))

        return args

    @classmethod
    def output_width(cls, *args):
        """Return the bit-width of the resulting bit-vector."""
        return max(a.length for a in args)

    @classmethod
    def eval(cls, *args):
        """Evaluate the operator with given operands.

        This is an internal method. To evaluate a bit-vector operation,
        use the operator ``()``.
        """
        raise NotImplementedError("subclasses need to override this method")


def _bytewise(doit, x, y, width):
    """Combine the packed bytes of two bit-vectors.

    Missing bytes of the shorter operand are read as 0. Since padding bits
    are always 0, this zero-extends the shorter operand bit by bit.
    """
    pairs = itertools.zip_longest(x.to_bytes(), y.to_bytes(), fillvalue=0)
    data = bytes(doit(a, b) for a, b in pairs)
    return core.BitVector.from_bytes(data, width)


class BvAnd(Operation):
    """Bitwise AND (logical conjunction) operation.

    It overrides the operator &. See `Operation` for more information.

        >>> from bigbits.bitvector.core import BitVector
        >>> from bigbits.bitvector.operation import BvAnd
        >>> x = BitVector.from_bools([False, True, False, True])
        >>> y = BitVector.from_bools([False, True, True])
        >>> BvAnd(x, y)
        0b0010
        >>> x & BitVector()
        0b0000

    """

    arity = 2
    is_symmetric = True
    infix_symbol = "&"

    @classmethod
    def eval(cls, x, y):
        def doit(x, y):
            """AND operation on two bytes."""
            return x & y

        return _bytewise(doit, x, y, cls.output_width(x, y))


class BvOr(Operation):
    """Bitwise OR (logical disjunction) operation.

    It overrides the operator |. See `Operation` for more information.

        >>> from bigbits.bitvector.core import BitVector
        >>> from bigbits.bitvector.operation import BvOr
        >>> x = BitVector.from_bools([False, True, False, True])
        >>> y = BitVector.from_bools([False, True, True])
        >>> BvOr(x, y)
        0b1110
        >>> x | BitVector()
        0b1010

    """

    arity = 2
    is_symmetric = True
    infix_symbol = "|"

    @classmethod
    def eval(cls, x, y):
        def doit(x, y):
            """OR operation on two bytes."""
            return x | y

        return _bytewise(doit, x, y, cls.output_width(x, y))


class BvXor(Operation):
    """Bitwise XOR (exclusive-or) operation.

    It overrides the operator ^. See `Operation` for more information.

        >>> from bigbits.bitvector.core import BitVector
        >>> from bigbits.bitvector.operation import BvXor
        >>> x = BitVector.from_bools([False, True, False, True])
        >>> y = BitVector.from_bools([False, True, True])
        >>> BvXor(x, y)
        0b1100
        >>> BvXor(BitVector(), BitVector())
        0b

    """

    arity = 2
    is_symmetric = True
    infix_symbol = "^"

    @classmethod
    def eval(cls, x, y):
        def doit(x, y):
            """XOR operation on two bytes."""
            return x ^ y

        return _bytewise(doit, x, y, cls.output_width(x, y))
