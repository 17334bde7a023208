from __future__ import annotations

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "'": "\\'",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def escape_string(value: str) -> str:
    """
    Escape a value the way a string-literal escaper would.

    Quotes, backslashes and the common control characters get their short
    escapes; every other code point outside printable ASCII becomes \\uXXXX,
    with astral characters split into a UTF-16 surrogate pair. The result is
    always a single line of printable ASCII.
    """
    out = []
    for ch in value:
        short = _ESCAPES.get(ch)
        if short is not None:
            out.append(short)
        elif " " <= ch < "\x7f":
            out.append(ch)
        else:
            out.append(_unicode_escape(ord(ch)))
    return "".join(out)


def _unicode_escape(code: int) -> str:
    if code > 0xFFFF:
        code -= 0x10000
        return "\\u%04X\\u%04X" % (0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF))
    return "\\u%04X" % code
