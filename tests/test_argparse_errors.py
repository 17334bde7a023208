import io
import unittest
from contextlib import redirect_stdout

from optionparser.argparsing import ArgumentParser, failure_from_message
from optionparser.errors import (
    InvalidArgumentError,
    MissingValueError,
    OptionMissingRequiredArgumentError,
    SystemExitError,
    UnrecognizedOptionError,
)


def _parser() -> ArgumentParser:
    p = ArgumentParser(prog="prog")
    p.add_argument("--count", type=int)
    p.add_argument("--mode", choices=["fast", "slow"])
    p.add_argument("--tags", nargs="+")
    p.add_argument("target")
    return p


class TestArgparseErrors(unittest.TestCase):
    def test_unrecognized_option(self):
        with self.assertRaises(UnrecognizedOptionError) as cm:
            _parser().parse_args(["x", "--bogus"])
        self.assertEqual(cm.exception.option_name, "--bogus")
        self.assertEqual(cm.exception.format(), "prog: unrecognized option '--bogus'")

    def test_missing_positional(self):
        with self.assertRaises(MissingValueError) as cm:
            _parser().parse_args([])
        self.assertEqual(cm.exception.message, "missing target")

    def test_invalid_type(self):
        with self.assertRaises(InvalidArgumentError) as cm:
            _parser().parse_args(["x", "--count", "abc"])
        self.assertEqual(cm.exception.arg_name, "--count")
        self.assertEqual(cm.exception.arg_value, "abc")
        self.assertEqual(cm.exception.message, "invalid --count: 'abc'")

    def test_invalid_value_with_quote_is_decoded_then_escaped(self):
        with self.assertRaises(InvalidArgumentError) as cm:
            _parser().parse_args(["x", "--count", "it's"])
        self.assertEqual(cm.exception.arg_value, "it's")
        self.assertEqual(cm.exception.message, "invalid --count: 'it\\'s'")

    def test_invalid_choice(self):
        with self.assertRaises(InvalidArgumentError) as cm:
            _parser().parse_args(["x", "--mode", "warp"])
        self.assertEqual(cm.exception.arg_name, "--mode")
        self.assertEqual(cm.exception.arg_value, "warp")

    def test_option_missing_argument(self):
        with self.assertRaises(OptionMissingRequiredArgumentError) as cm:
            _parser().parse_args(["x", "--count"])
        self.assertEqual(cm.exception.message, "option '--count' is missing a required argument")

    def test_option_missing_one_or_more(self):
        with self.assertRaises(OptionMissingRequiredArgumentError) as cm:
            _parser().parse_args(["x", "--tags"])
        self.assertEqual(cm.exception.opt_name, "--tags")

    def test_blank_extra_argument(self):
        with self.assertRaises(UnrecognizedOptionError) as cm:
            _parser().parse_args(["x", " "])
        self.assertEqual(cm.exception.option_name, " ")

    def test_extra_argument_with_space_is_kept_whole(self):
        with self.assertRaises(UnrecognizedOptionError) as cm:
            _parser().parse_args(["x", "--name=a b"])
        self.assertEqual(cm.exception.option_name, "--name=a b")
        self.assertEqual(cm.exception.message, "unrecognized option '--name=a b'")

    def test_blank_unrecognized_message(self):
        e = failure_from_message("prog", "unrecognized arguments:  ")
        self.assertIsInstance(e, UnrecognizedOptionError)
        self.assertEqual(e.exit_code, 2)

    def test_unknown_message_falls_back_to_base(self):
        e = failure_from_message("prog", "argument --quiet: not allowed with argument --verbose")
        self.assertIs(type(e), SystemExitError)
        self.assertEqual(e.exit_code, 2)
        self.assertEqual(e.format(), "prog: argument --quiet: not allowed with argument --verbose")

    def test_help_still_exits_zero(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with self.assertRaises(SystemExit) as cm:
                _parser().parse_args(["--help"])
        self.assertEqual(cm.exception.code, 0)
        self.assertIn("usage: prog", out.getvalue())


if __name__ == "__main__":
    unittest.main()
