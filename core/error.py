""" core/error.py """

from typing import Union

# Kinds of decode errors.  Callers can switch on Decode.kind; the message text
# is for humans and may change.
TRAILING_BACKSLASH = 'TrailingBackslash'
UNRECOGNIZED_ESCAPE = 'UnrecognizedEscape'
MALFORMED_HEX_DIGITS = 'MalformedHexDigits'
VALUE_OUT_OF_RANGE = 'ValueOutOfRangeForWidth'
INVALID_TEXT = 'InvalidText'  # lone surrogate in str, or bad UTF-8 in bytes

# Text being decoded.  bytes only when the UTF-8 reader rejected it.
DecodeInput = Union[str, bytes]


class Decode(Exception):
    """
    List of STFU-8 decode errors:
    - \\ at the end of the input
    - \\ followed by something other than \\ t n r x u, e.g. \\b
    - \\x and \\u that aren't followed by exactly 2 or 6 hex digits
    - \\u00DEED with the u8 decoder: not a scalar value, and too big for a
      byte.  The u16 decoder accepts it.
    - input that isn't well-formed text in the first place
    """

    def __init__(self, msg, kind, s, start_pos, end_pos, line_num):
        # type: (str, str, DecodeInput, int, int, int) -> None
        Exception.__init__(self, msg)
        self.msg = msg
        self.kind = kind
        self.s = s  # string being decoded
        self.start_pos = start_pos
        self.end_pos = end_pos
        self.line_num = line_num

    def Message(self):
        # type: () -> str

        # Show 4 chars of context on each side
        start = max(0, self.start_pos - 4)
        end = min(len(self.s), self.end_pos + 4)

        part = self.s[start:end]
        return self.msg + ' (line %d, offset %d-%d: %r)' % (
            self.line_num, self.start_pos, self.end_pos, part)

    def __str__(self):
        # type: () -> str
        return self.Message()

    def __repr__(self):
        # type: () -> str
        return '<Decode %s %d-%d>' % (self.kind, self.start_pos, self.end_pos)
