"""Manage the representation of bit-vectors and big integers."""
from sympy.printing.repr import ReprPrinter
from sympy.printing.str import StrPrinter


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BvStrPrinter(StrPrinter):
    """Printing class that handles the `str` method of `BitVector`.

    Bit-vectors are printed in binary, most significant bit first,
    with one digit per bit (leading zeros included). Big integers are
    printed in decimal.

        >>> from bigbits.bitvector.core import BitVector
        >>> from bigbits.bitvector.printing import BvStrPrinter
        >>> BvStrPrinter().doprint(BitVector.from_bools([True, True, False]))
        '0b011'
        >>> BvStrPrinter().doprint(BitVector())
        '0b'

    """

    def _print_BitVector(self, bv):
        digits = ["1" if bit else "0" for bit in reversed(bv.get_data())]
        return "0b" + "".join(digits)

    def _print_BigInteger(self, n):
        return str(int(n))


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BvReprPrinter(ReprPrinter):
    """Printing class that handles the `vrepr` methods.

    The verbose representation is a Python expression that rebuilds
    the object.

        >>> from bigbits.biginteger.core import BigInteger
        >>> from bigbits.bitvector.printing import BvReprPrinter
        >>> BvReprPrinter().doprint(BigInteger(5, width=4))
        'BigInteger(5, width=4)'

    """

    def _print_BitVector(self, bv):
        return "{}.from_bools({})".format(type(bv).__name__, bv.get_data())

    def _print_BigInteger(self, n):
        return "{}({}, width={})".format(type(n).__name__, int(n), n.width)
