import unittest

from optionparser.escaping import escape_string


class TestEscapeString(unittest.TestCase):
    def test_plain_ascii_untouched(self):
        self.assertEqual(escape_string("hello world 42 -_=+[]{}"), "hello world 42 -_=+[]{}")
        self.assertEqual(escape_string(""), "")

    def test_quotes_and_backslash(self):
        self.assertEqual(escape_string("'"), "\\'")
        self.assertEqual(escape_string('"'), '\\"')
        self.assertEqual(escape_string("\\"), "\\\\")

    def test_short_control_escapes(self):
        self.assertEqual(escape_string("\b\t\n\f\r"), "\\b\\t\\n\\f\\r")

    def test_other_control_characters(self):
        self.assertEqual(escape_string("\x00"), "\\u0000")
        self.assertEqual(escape_string("\x1b"), "\\u001B")
        self.assertEqual(escape_string("\x7f"), "\\u007F")

    def test_non_ascii(self):
        self.assertEqual(escape_string("café"), "caf\\u00E9")
        self.assertEqual(escape_string("\u2028"), "\\u2028")

    def test_astral_characters_become_surrogate_pairs(self):
        self.assertEqual(escape_string("\U0001F600"), "\\uD83D\\uDE00")

    def test_result_is_printable_ascii(self):
        out = escape_string("x\u0000yÿz\U0010FFFF'\"\\\n")
        self.assertTrue(all(" " <= ch < "\x7f" for ch in out))


if __name__ == "__main__":
    unittest.main()
