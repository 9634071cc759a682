"""Top-level script environment."""
import argparse

from bigbits.biginteger.core import BigInteger
from bigbits.bitvector.operation import BvAnd, BvOr, BvXor


list_operators = {
    "xor": lambda x, y: BvXor(x.magnitude, y.magnitude),
    "and": lambda x, y: BvAnd(x.magnitude, y.magnitude),
    "or": lambda x, y: BvOr(x.magnitude, y.magnitude),
    "add": lambda x, y: (x + y).magnitude,
}


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="bigbits",
        description="Combine two unsigned integers and print the resulting bits.")
    parser.add_argument("lhs", nargs="?", default="10")
    parser.add_argument("rhs", nargs="?", default="6")
    parser.add_argument("-o", "--operator", choices=list(list_operators.keys()),
                        default="xor")

    args = parser.parse_args(argv)

    try:
        lhs = BigInteger.from_string(args.lhs)
        rhs = BigInteger.from_string(args.rhs)
    except (ValueError, NotImplementedError) as e:
        parser.error(str(e))

    # widen the operands like plain integers
    lhs, rhs = lhs + BigInteger(0), rhs + BigInteger(0)

    result = list_operators[args.operator](lhs, rhs)

    print(result.get_data())
    print(int(BigInteger.from_bitvector(result)))


if __name__ == "__main__":
    main()
