"""
stfu8.py: STFU-8, Sorta Text Format in UTF-8.

STFU-8 is the text format you already write when you use escape codes in C,
Python, Rust, etc.  It lets binary data live in UTF-8 text by escaping it with
a backslash, e.g. \\n and \\x0F:

    encode_u8(b'foo\\xff\\nbar')        => 'foo\\xFF\\nbar'
    encode_u8_pretty(b'foo\\xff\\nbar') => 'foo\\xFF<newline>bar'

Text that's already valid, visible UTF-8 passes through unchanged, so the
encoding is easy to read and edit by hand.

There are two element widths:

- u8 is for arbitrary bytes, e.g. terminal output or file contents.
- u16 is for arbitrary 16-bit units, i.e. UTF-16 that may contain unpaired
  surrogates, like Windows paths.  They're written as \\u00DEED.

Decoding with the same width always gives back the original.  Text encoded
for one width isn't meant for the decoder of the other width:
decode_u8('\\u00DEED') is an error, while decode_u16() returns [0xDEED].

Usage:

    q = stfu8.encode_u8(raw)       # edit q in any text editor
    assert stfu8.decode_u8(q) == raw

See encoder.py and lexer.py for the details.
"""

from core.util import BufWriter
from stfu8_ import encoder
from stfu8_ import lexer
from stfu8_.width import U8, U16

from typing import Iterable, List, Optional, Union, TYPE_CHECKING
if TYPE_CHECKING:
    from core.error import DecodeInput
    from stfu8_.visible import Classifier

# Re-exported encoder options, e.g. encode_u8(b, ESCAPE_NEWLINE)
ESCAPE_TAB = encoder.ESCAPE_TAB
ESCAPE_NEWLINE = encoder.ESCAPE_NEWLINE
ESCAPE_CR = encoder.ESCAPE_CR
ESCAPE_ALL = encoder.ESCAPE_ALL
PRETTY = encoder.PRETTY

BytesLike = Union[bytes, bytearray, memoryview]


def encode_u8(data, options=ESCAPE_ALL, classifier=None):
    # type: (BytesLike, int, Optional[Classifier]) -> str
    """Encode bytes as STFU-8, escaping all non-printable characters.

    Never fails.
    """
    buf = BufWriter()
    encoder.Encode(bytes(data), U8, options, classifier, buf)
    return buf.getvalue()


def encode_u8_pretty(data):
    # type: (BytesLike) -> str
    """Like encode_u8(), but tab, newline and carriage return stay literal.

    The text then prints "prettily" while invalid UTF-8 and other
    non-printable characters are still escaped.
    """
    return encode_u8(data, options=PRETTY)


def decode_u8(s):
    # type: (DecodeInput) -> bytes
    """Decode STFU-8 text into bytes.

    Raises error.Decode.
    """
    return bytes(lexer.Decode(s, U8))


def encode_u16(units, options=ESCAPE_ALL, classifier=None):
    # type: (Iterable[int], int, Optional[Classifier]) -> str
    """Encode 16-bit units (possibly ill-formed UTF-16) as STFU-8.

    Never fails on valid input.  A unit outside 0..0xFFFF raises ValueError.
    """
    buf = BufWriter()
    encoder.Encode(list(units), U16, options, classifier, buf)
    return buf.getvalue()


def encode_u16_pretty(units):
    # type: (Iterable[int]) -> str
    """Like encode_u16(), but tab, newline and carriage return stay literal."""
    return encode_u16(units, options=PRETTY)


def decode_u16(s):
    # type: (DecodeInput) -> List[int]
    """Decode STFU-8 text into 16-bit units.

    Raises error.Decode.
    """
    return list(lexer.Decode(s, U16))
