"""Tests for the top-level script environment."""
import contextlib
import io
import unittest

from bigbits.__main__ import main


def run(*argv):
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        main(list(argv))
    return out.getvalue().splitlines()


class TestMain(unittest.TestCase):
    """Tests of the demonstration entry point."""

    def test_default(self):
        bits, value = run()
        expected = [False, False, True, True] + [False] * 124
        self.assertEqual(bits, str(expected))
        self.assertEqual(value, "12")

    def test_operators(self):
        self.assertEqual(run("5", "3", "-o", "add")[1], "8")
        self.assertEqual(run("12", "10", "--operator", "and")[1], "8")
        self.assertEqual(run("12", "10", "-o", "or")[1], "14")
        self.assertEqual(run(str(2 ** 128 - 1), "1", "-o", "add")[1], str(2 ** 128))

    def test_invalid_literal(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["-1", "3"])
            with self.assertRaises(SystemExit):
                main(["x", "3"])
