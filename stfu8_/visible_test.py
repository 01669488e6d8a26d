#!/usr/bin/env python3
"""
visible_test.py: Tests for visible.py
"""

import unicodedata
import unittest

from stfu8_ import visible  # module under test


class UnicodeClassifierTest(unittest.TestCase):

    def testAscii(self):
        # type: () -> None
        c = visible.UnicodeClassifier()

        for ch in 'azAZ09 ~!\\\'"':
            self.assertTrue(c.IsVisible(ord(ch)), repr(ch))

        for i in list(range(0x20)) + [0x7F]:
            self.assertFalse(c.IsVisible(i), hex(i))

    def testCategories(self):
        # type: () -> None
        c = visible.DEFAULT

        VISIBLE = [
            0x00A1,  # Po inverted exclamation
            0x00A0,  # Zs no-break space
            0x03BC,  # Ll mu
            0x0301,  # Mn combining acute accent
            0x0663,  # Nd arabic-indic three
            0x20AC,  # Sc euro sign
            0x4E09,  # Lo
            0x1F600,  # So grinning face
        ]
        for code_point in VISIBLE:
            self.assertTrue(c.IsVisible(code_point), hex(code_point))

        NOT_VISIBLE = [
            0x0085,  # Cc next line
            0x00AD,  # Cf soft hyphen
            0x200B,  # Cf zero width space
            0xFEFF,  # Cf byte order mark
            0x2028,  # Zl line separator
            0x2029,  # Zp paragraph separator
            0xE000,  # Co private use
            0x10FFFF,  # Cn noncharacter
        ]
        for code_point in NOT_VISIBLE:
            self.assertFalse(c.IsVisible(code_point), hex(code_point))

    def testAgreesWithDatabase(self):
        # type: () -> None
        c = visible.DEFAULT
        for code_point in range(0x3000):
            cat = unicodedata.category(chr(code_point))
            expected = cat[0] in 'LMNPS' or cat == 'Zs'
            self.assertEqual(expected, c.IsVisible(code_point),
                             '%s %s' % (hex(code_point), cat))

    def testInterface(self):
        # type: () -> None
        self.assertRaises(NotImplementedError,
                          visible.Classifier().IsVisible, 0x41)


if __name__ == '__main__':
    unittest.main()
