"""Provide context managers to modify the default behaviour."""
import contextlib


class StatefulContext(contextlib.AbstractContextManager):
    """Base class for context managers with history."""

    current_context = None

    def __init__(self, new_context):
        """Initialize the context."""
        self.new_context = new_context

    def __enter__(self):
        self.previous_context = type(self).current_context
        type(self).current_context = self.new_context

    def __exit__(self, *args):
        type(self).current_context = self.previous_context


class Width(StatefulContext):
    """Control the Width context.

    Control the bit-width used to build a `BigInteger` from a plain
    integer when no explicit width is given. By default, the width is 128.

        >>> from bigbits.biginteger.core import BigInteger
        >>> from bigbits.bitvector.context import Width
        >>> BigInteger(3).width
        128
        >>> with Width(16):
        ...     x = BigInteger(3)
        >>> x.width
        16

    """

    current_context = 128

    def __init__(self, new_context):
        """Initialize the context."""
        assert isinstance(new_context, int) and 0 <= new_context
        super().__init__(new_context)


class CarryOut(StatefulContext):
    """Control the CarryOut context.

    Control whether or not the carry leaving the most significant position
    of an addition is appended to the result. By default, it is appended,
    so that the sum of two integers never overflows.

    When the CarryOut context is disabled, addition wraps around modulo
    ``2**width`` (the width of the widest operand) and a `RuntimeWarning`
    is issued whenever a carry is discarded.

        >>> import warnings
        >>> from bigbits.biginteger.core import BigInteger
        >>> from bigbits.bitvector.context import CarryOut
        >>> x, y = BigInteger(255, width=8), BigInteger(1, width=8)
        >>> z = x + y
        >>> int(z), z.width
        (256, 9)
        >>> with CarryOut(False), warnings.catch_warnings():
        ...     warnings.simplefilter("ignore")
        ...     z = x + y
        >>> int(z), z.width
        (0, 8)

    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert new_context in [True, False]
        super().__init__(new_context)


class Validation(StatefulContext):
    """Control the Validation context.

    Control whether or not the arguments of bit-vector methods and
    operators are validated. By default, validation is enabled.

    Note that bounds checking of bit indices is never disabled.

        >>> from bigbits.bitvector.core import BitVector
        >>> from bigbits.bitvector.context import Validation
        >>> bv = BitVector()
        >>> bv.push(2)
        Traceback (most recent call last):
         ...
        AssertionError: invalid bit value 2
        >>> with Validation(False):
        ...     bv.push(2)
        >>> bv.get_data()
        [True]

    Note:
        Disabling `Validation` speeds up long sequences of bit-level
        operations.
    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert new_context in [True, False]
        super().__init__(new_context)
