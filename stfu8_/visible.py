"""
visible.py: Which characters can appear literally in STFU-8 text?

A character is visible if a person editing the text can see it and retype it:
letters, marks, numbers, punctuation, symbols and spaces.  Everything else is
escaped, e.g. U+200B ZERO WIDTH SPACE (Cf) or U+0085 NEXT LINE (Cc).

Tab, newline and carriage return are controls, but the encoder decides about
those with its options.  They never reach the classifier.
"""

import unicodedata

# First letter of the general category: Letter, Mark, Number, Punctuation,
# Symbol.
_VISIBLE_MAJOR = 'LMNPS'

# Only Zs of the separators.  Zl and Zp break lines like \n does.
_SPACE_SEPARATOR = 'Zs'


class Classifier(object):
    """The one query the encoder makes about characters."""

    def IsVisible(self, code_point):
        # type: (int) -> bool
        raise NotImplementedError()


class UnicodeClassifier(Classifier):
    """Classify with the Unicode database that ships with Python.

    Note: the table follows the interpreter's Unicode version, so a newly
    assigned character may be escaped by an older Python.  Decoding doesn't
    depend on this.
    """

    def IsVisible(self, code_point):
        # type: (int) -> bool
        if code_point < 0x80:  # common case
            return 0x20 <= code_point < 0x7F

        cat = unicodedata.category(chr(code_point))
        return cat[0] in _VISIBLE_MAJOR or cat == _SPACE_SEPARATOR


DEFAULT = UnicodeClassifier()
