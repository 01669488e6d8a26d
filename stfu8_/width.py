"""
width.py: Element widths for STFU-8 payloads.

The u8 and u16 codecs share one escape grammar and one scan loop in each
direction.  A Width fixes everything that differs between them:

1. The native range.  A \\x or \\u value that isn't a Unicode scalar value is
   copied verbatim into the output only if it fits, e.g. \\u00DEED is a lone
   trail surrogate that fits in a u16 but not in a byte.
2. How a scalar value expands into elements: UTF-8 (1-4 bytes) or UTF-16 (1-2
   units, a surrogate pair above U+FFFF).
3. How the encoder reads a scalar value back out of raw elements, and how it
   escapes a single element that it can't show literally.
"""

from typing import Any, Callable, List, Tuple, Union

# bytearray for U8, List[int] for U16.  Both support append() and extend().
ElementBuffer = Union[bytearray, List[int]]

# Surrogate ranges
LEAD_MIN = 0xD800  # high surrogate
LEAD_MAX = 0xDBFF
TRAIL_MIN = 0xDC00  # low surrogate
TRAIL_MAX = 0xDFFF

MAX_SCALAR = 0x10FFFF


def IsScalarValue(code_point):
    # type: (int) -> bool
    """A code point that is valid as a standalone character."""
    return (0 <= code_point < LEAD_MIN or
            TRAIL_MAX < code_point <= MAX_SCALAR)


def IsLead(unit):
    # type: (int) -> bool
    return LEAD_MIN <= unit <= LEAD_MAX


def IsTrail(unit):
    # type: (int) -> bool
    return TRAIL_MIN <= unit <= TRAIL_MAX


def CombineSurrogates(lead, trail):
    # type: (int, int) -> int
    return 0x10000 + ((lead - LEAD_MIN) << 10) + (trail - TRAIL_MIN)


def Utf8Encode(code, out):
    # type: (int, ElementBuffer) -> None
    """Append the UTF-8 bytes of a scalar value.

    Based on https://stackoverflow.com/a/23502707
    """
    assert IsScalarValue(code), code

    if code <= 0x7F:
        out.append(code)  # ASCII
        return

    if code <= 0x7FF:
        num_cont_bytes = 1
    elif code <= 0xFFFF:
        num_cont_bytes = 2
    else:
        num_cont_bytes = 3

    bytes_ = []  # type: List[int]
    for _ in range(num_cont_bytes):
        bytes_.append(0x80 | (code & 0x3F))
        code >>= 6

    b = (0x1E << (6 - num_cont_bytes)) | (code & (0x3F >> num_cont_bytes))
    bytes_.append(b)
    bytes_.reverse()

    # mod 256 because Python ints don't wrap around!
    for b in bytes_:
        out.append(b & 0xFF)


def Utf16Encode(code, out):
    # type: (int, ElementBuffer) -> None
    """Append the UTF-16 code units of a scalar value."""
    assert IsScalarValue(code), code

    if code <= 0xFFFF:
        out.append(code)
        return

    code -= 0x10000
    out.append(LEAD_MIN + (code >> 10))
    out.append(TRAIL_MIN + (code & 0x3FF))


#
# Reading scalar values out of raw elements, for the encoder
#

# Input symbol types
Ascii = 0  # ASCII byte.  May need escaping later.
Begin2 = 1  # Begin a 2 byte UTF-8 sequence
Begin3 = 2
Begin4 = 3
Cont = 4  # UTF-8 Continuation byte
Invalid = 5  # Can never appear in UTF-8, like 0xc0 or 0xff


def _ClassifyByte(b):
    # type: (int) -> int
    """
    https://tools.ietf.org/html/rfc3629

    UTF8-2 = %xC2-DF UTF8-tail
    UTF8-3 = %xE0-EF ...
    UTF8-4 = %xF0-F4 ...

    0xC0 and 0xC1 could only start an overlong encoding of ASCII, and 0xF5 and
    up would encode values above U+10FFFF.
    """
    if b < 0x80:
        return Ascii
    elif b < 0xC0:
        return Cont
    elif b < 0xC2:
        return Invalid
    elif b < 0xE0:
        return Begin2
    elif b < 0xF0:
        return Begin3
    elif b < 0xF5:
        return Begin4
    else:
        return Invalid


# The second byte after these leads has a narrower range, which rules out
# overlong encodings, surrogates, and values above U+10FFFF.
#
# UTF8-3 = %xE0 %xA0-BF UTF8-tail / %xED %x80-9F UTF8-tail / ...
# UTF8-4 = %xF0 %x90-BF 2( UTF8-tail ) / %xF4 %x80-8F 2( UTF8-tail ) / ...
_SECOND_BYTE_RANGE = {
    0xE0: (0xA0, 0xBF),
    0xED: (0x80, 0x9F),
    0xF0: (0x90, 0xBF),
    0xF4: (0x80, 0x8F),
}


def ReadUtf8Rune(data, pos):
    # type: (bytes, int) -> Tuple[int, int]
    """Decode the well-formed UTF-8 sequence starting at data[pos].

    Returns (code point, number of bytes), or (-1, 0) if the bytes at pos
    don't start a complete, well-formed sequence.
    """
    first = data[pos]
    typ = _ClassifyByte(first)

    if typ == Ascii:
        return first, 1
    elif typ == Begin2:
        n = 2
        rune = first & 0b00011111
    elif typ == Begin3:
        n = 3
        rune = first & 0b00001111
    elif typ == Begin4:
        n = 4
        rune = first & 0b00000111
    else:  # Cont or Invalid
        return -1, 0

    if pos + n > len(data):  # incomplete at the end
        return -1, 0

    lo, hi = _SECOND_BYTE_RANGE.get(first, (0x80, 0xBF))
    second = data[pos + 1]
    if not (lo <= second <= hi):
        return -1, 0
    rune = (rune << 6) | (second & 0b00111111)

    for i in range(pos + 2, pos + n):
        b = data[i]
        if _ClassifyByte(b) != Cont:
            return -1, 0
        rune = (rune << 6) | (b & 0b00111111)

    return rune, n


def ReadUtf16Rune(units, pos):
    # type: (List[int], int) -> Tuple[int, int]
    """Decode the scalar value starting at units[pos].

    Returns (code point, number of units), or (-1, 0) for an unpaired
    surrogate.
    """
    c16 = units[pos]
    if not (0 <= c16 <= 0xFFFF):
        raise ValueError('u16 element out of range: %r at index %d' %
                         (c16, pos))

    if IsLead(c16):
        if pos + 1 < len(units) and IsTrail(units[pos + 1]):
            return CombineSurrogates(c16, units[pos + 1]), 2
        return -1, 0  # lead without a trail

    if IsTrail(c16):  # trail without a lead
        return -1, 0

    return c16, 1


def _Utf8EncodeText(s, out):
    # type: (str, ElementBuffer) -> None
    out.extend(s.encode('utf-8'))  # same bytes as Utf8Encode(), but faster


def _Utf16EncodeText(s, out):
    # type: (str, ElementBuffer) -> None
    for ch in s:
        Utf16Encode(ord(ch), out)


class Width(object):
    """Policy object for one element width.  See module docstring."""

    def __init__(
            self,
            name,  # type: str
            max_native,  # type: int
            new_buffer,  # type: Callable[[], ElementBuffer]
            expand,  # type: Callable[[int, ElementBuffer], None]
            expand_text,  # type: Callable[[str, ElementBuffer], None]
            read_rune,  # type: Callable[[Any, int], Tuple[int, int]]
            escape_fmt,  # type: str
    ):
        # type: (...) -> None
        self.name = name
        self.max_native = max_native
        self.new_buffer = new_buffer
        self.expand = expand
        self.expand_text = expand_text
        self.read_rune = read_rune
        self.escape_fmt = escape_fmt

    def Fits(self, value):
        # type: (int) -> bool
        """Can value be stored verbatim as a single element?"""
        return 0 <= value <= self.max_native

    def EscapeOne(self, value):
        # type: (int) -> str
        """Escape a single element that can't be shown literally."""
        return self.escape_fmt % value

    def __repr__(self):
        # type: () -> str
        return '<Width %s>' % self.name


U8 = Width('u8', 0xFF, bytearray, Utf8Encode, _Utf8EncodeText, ReadUtf8Rune,
           '\\x%02X')
U16 = Width('u16', 0xFFFF, list, Utf16Encode, _Utf16EncodeText, ReadUtf16Rune,
            '\\u%06X')
