"""
encoder.py: Turn raw bytes or u16 units into STFU-8 text.

Show valid, visible UTF-8 (or UTF-16) literally, and escapes otherwise.  The
text is always well-formed, even if the input isn't.  Like the shell quoters,
we know that '\\xce\\xce\\xbc' is an invalid byte to be escaped, followed by a
UTF-8 encoded char:

    \\xCEμ

The escape path consumes exactly ONE element.  A broken multi-byte sequence
is never swallowed whole, so each byte of it gets its own \\xXX and the next
loop iteration can resynchronize on a valid character.
"""

from core.util import BufWriter, log
from stfu8_ import visible
from stfu8_.width import Width

from typing import Any, Optional

_ = log

# Options.  Tab, newline and CR are controls, so they're escaped by default,
# which keeps the encoded text on one line.  The "pretty" encoders leave them
# literal, so multi-line text stays readable.  Either way decodes to the same
# value.
ESCAPE_TAB = 1 << 0
ESCAPE_NEWLINE = 1 << 1
ESCAPE_CR = 1 << 2

ESCAPE_ALL = ESCAPE_TAB | ESCAPE_NEWLINE | ESCAPE_CR
PRETTY = 0

BSLASH = 0x5C


def _IsLiteral(rune, options, classifier):
    # type: (int, int, visible.Classifier) -> bool
    """Can this scalar value appear as itself in the output?"""
    if rune == BSLASH:  # \ always starts an escape
        return False
    if rune == 0x09:
        return not (options & ESCAPE_TAB)
    if rune == 0x0A:
        return not (options & ESCAPE_NEWLINE)
    if rune == 0x0D:
        return not (options & ESCAPE_CR)
    return classifier.IsVisible(rune)


def _EscapeElement(value, width):
    # type: (int, Width) -> str
    """Escape a single raw byte or unit."""
    if value == BSLASH:
        return '\\\\'
    if value == 0x09:
        return '\\t'
    if value == 0x0A:
        return '\\n'
    if value == 0x0D:
        return '\\r'
    return width.EscapeOne(value)


def Encode(elements, width, options, classifier, buf):
    # type: (Any, Width, int, Optional[visible.Classifier], BufWriter) -> None
    """Write the STFU-8 encoding of a raw element sequence to buf.

    Args:
      elements: bytes for U8, a list of ints for U16
      width: which element width the sequence has
      options: ESCAPE_* flags
      classifier: decides what's visible, or None for the Unicode database
    """
    if classifier is None:
        classifier = visible.DEFAULT

    n = len(elements)
    pos = 0
    while pos < n:
        rune, length = width.read_rune(elements, pos)
        #log('pos %d rune %d length %d', pos, rune, length)

        if length != 0 and _IsLiteral(rune, options, classifier):
            buf.write(chr(rune))
            pos += length
            continue

        # Invalid UTF-8 or UTF-16, or a valid character that isn't visible
        buf.write(_EscapeElement(elements[pos], width))
        pos += 1
