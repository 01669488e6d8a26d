"""
lexer.py: Decode STFU-8 text into raw bytes or u16 units.

Grammar:

    text     := token*
    token    := literal_scalar | escape
    escape   := \\\\ | \\t | \\n | \\r
              | \\x hex{2}
              | \\u hex{6}        # 21 bits fits in 6 hex digits

The language is regular, so the lexer is a list of regexes tried in order.
Each token is decoded as soon as it's read, and the first bad token fails the
whole decode.  There's no resynchronization.

Escapes never chain.  \\x01\\x02 is two elements, even for u16 where they
could be read as 0x0102.  Every escape token does exactly one append (or one
expansion of a scalar value) on the output buffer.
"""

import re

from core import error
from core.util import log
from stfu8_.width import ElementBuffer, IsScalarValue, Width

from typing import List, Tuple, Any

_ = log

# Token IDs
Lit_Chars = 0  # run of characters without \
Char_OneChar = 1  # \\ \t \n \r
Char_Hex2 = 2  # \xff
Char_Hex6 = 3  # \u01F600
Bad_HexDigits = 4  # \x or \u without the right digits
Bad_Escape = 5  # \b and everything else
Bad_Backslash = 6  # \ at the end of the input

TOKEN_NAMES = [
    'Lit_Chars', 'Char_OneChar', 'Char_Hex2', 'Char_Hex6', 'Bad_HexDigits',
    'Bad_Escape', 'Bad_Backslash'
]


def MakeLexer(rules):
    # type: (List[Tuple[str, int]]) -> List[Tuple[Any, int]]
    # DOTALL: \ followed by a newline is a bad escape, not a trailing backslash
    return [(re.compile(pat, re.DOTALL), i) for (pat, i) in rules]


# Order matters: the first match wins, not the longest.
STFU8_LEX = [
    (r'[^\\]+', Lit_Chars),
    (r'\\[\\tnr]', Char_OneChar),
    (r'\\x[0-9a-fA-F]{2}', Char_Hex2),
    (r'\\u[0-9a-fA-F]{6}', Char_Hex6),
    (r'\\[xu]', Bad_HexDigits),
    (r'\\.', Bad_Escape),
    (r'\\', Bad_Backslash),
]

STFU8_LEX_COMPILED = MakeLexer(STFU8_LEX)

# Python strings can hold lone surrogates, which aren't text
_SURROGATE_RE = re.compile('[\ud800-\udfff]')

_ONE_CHAR = {
    '\\': 0x5C,
    't': 0x09,
    'n': 0x0A,
    'r': 0x0D,
}


class LexerDecoder(object):
    """STFU-8 lexer and decoder.

    Next() decodes one token and returns its ID.  The decoded elements
    accumulate in self.decoded.
    """

    def __init__(self, s, width):
        # type: (str, Width) -> None
        self.s = s
        self.width = width

        self.pos = 0

        # current line being lexed -- for error messages
        self.cur_line_num = 1

        self.decoded = width.new_buffer()  # type: ElementBuffer

    def _Error(self, msg, kind, end_pos):
        # type: (str, str, int) -> error.Decode

        # Use the current position as start pos
        return error.Decode(msg, kind, self.s, self.pos, end_pos,
                            self.cur_line_num)

    def _Read(self):
        # type: () -> Tuple[int, int]
        for pat, tok_id in STFU8_LEX_COMPILED:
            m = pat.match(self.s, self.pos)
            if m:
                return tok_id, m.end()
        else:
            raise AssertionError('Bad_Backslash rule should have matched')

    def _AppendValue(self, value, end_pos):
        # type: (int, int) -> None
        """Resolve the numeric value of \\uXXXXXX."""
        if IsScalarValue(value):
            self.width.expand(value, self.decoded)
        elif self.width.Fits(value):
            # e.g. an unpaired surrogate for u16
            self.decoded.append(value)
        else:
            raise self._Error(
                '\\u%06X is neither a scalar value nor a valid %s element' %
                (value, self.width.name), error.VALUE_OUT_OF_RANGE, end_pos)

    def Next(self):
        # type: () -> int
        """Decode one token, and return its ID.  Updates self.pos."""
        tok_id, end_pos = self._Read()

        if tok_id == Lit_Chars:
            part = self.s[self.pos:end_pos]
            m = _SURROGATE_RE.search(part)
            if m:
                self.cur_line_num += part.count('\n', 0, m.start())
                self.pos += m.start()
                raise self._Error('Unpaired surrogate in STFU-8 text',
                                  error.INVALID_TEXT, self.pos + 1)
            self.width.expand_text(part, self.decoded)
            self.cur_line_num += part.count('\n')

        elif tok_id == Char_OneChar:
            ch = self.s[self.pos + 1]
            self.decoded.append(_ONE_CHAR[ch])

        elif tok_id == Char_Hex2:
            # Never UTF-8 expanded, even when it looks like a lead byte
            h = self.s[self.pos + 2:end_pos]
            self.decoded.append(int(h, 16))

        elif tok_id == Char_Hex6:
            h = self.s[self.pos + 2:end_pos]
            self._AppendValue(int(h, 16), end_pos)

        elif tok_id == Bad_HexDigits:
            kind_ch = self.s[self.pos + 1]
            num_digits = 2 if kind_ch == 'x' else 6
            raise self._Error(
                '\\%s must be followed by exactly %d hex digits' %
                (kind_ch, num_digits), error.MALFORMED_HEX_DIGITS,
                min(len(self.s), end_pos + num_digits))

        elif tok_id == Bad_Escape:
            raise self._Error('Invalid backslash escape %r' %
                              self.s[self.pos:end_pos],
                              error.UNRECOGNIZED_ESCAPE, end_pos)

        elif tok_id == Bad_Backslash:
            raise self._Error('Unexpected end of input after backslash',
                              error.TRAILING_BACKSLASH, end_pos)

        else:
            # Should never happen
            raise AssertionError(tok_id)

        #log('%s %r', TOKEN_NAMES[tok_id], self.s[self.pos:end_pos])
        self.pos = end_pos
        return tok_id

    def Decode(self):
        # type: () -> ElementBuffer
        n = len(self.s)
        while self.pos < n:
            self.Next()
        return self.decoded


def Decode(s, width):
    # type: (error.DecodeInput, Width) -> ElementBuffer
    """Decode STFU-8 text, given as a str or UTF-8 bytes.

    Raises error.Decode.
    """
    if isinstance(s, (bytes, bytearray)):
        try:
            s = s.decode('utf-8')
        except UnicodeDecodeError as e:
            line_num = e.object.count(b'\n', 0, e.start) + 1
            raise error.Decode('Invalid UTF-8 in STFU-8 text (%s)' % e.reason,
                               error.INVALID_TEXT, e.object, e.start, e.end,
                               line_num)

    lx = LexerDecoder(s, width)
    return lx.Decode()
