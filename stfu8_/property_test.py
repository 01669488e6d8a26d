#!/usr/bin/env python3
"""
property_test.py: Randomized round trip tests for stfu8.py
"""

import unittest

from hypothesis import given
from hypothesis.strategies import binary, integers, lists, text

from core import error
from stfu8_ import stfu8


class U8PropertyTest(unittest.TestCase):

    @given(binary())
    def testRoundTrip(self, raw):
        self.assertEqual(raw, stfu8.decode_u8(stfu8.encode_u8(raw)))
        self.assertEqual(raw, stfu8.decode_u8(stfu8.encode_u8_pretty(raw)))

    @given(binary())
    def testOneLine(self, raw):
        s = stfu8.encode_u8(raw)
        for ch in '\t\n\r':
            self.assertNotIn(ch, s)

    @given(text())
    def testTextRoundTrip(self, s):
        try:
            raw = s.encode('utf-8')
        except UnicodeEncodeError:  # lone surrogate
            return
        self.assertEqual(raw, stfu8.decode_u8(stfu8.encode_u8(raw)))

    @given(text())
    def testDecodeNeverCrashes(self, s):
        try:
            stfu8.decode_u8(s)
        except error.Decode:
            pass


class U16PropertyTest(unittest.TestCase):

    @given(lists(integers(0, 0xFFFF)))
    def testRoundTrip(self, units):
        self.assertEqual(units, stfu8.decode_u16(stfu8.encode_u16(units)))
        self.assertEqual(units,
                         stfu8.decode_u16(stfu8.encode_u16_pretty(units)))

    @given(lists(integers(0xD800, 0xDFFF)))
    def testSurrogates(self, units):
        s = stfu8.encode_u16(units)
        s.encode('utf-8')  # always well-formed text
        self.assertEqual(units, stfu8.decode_u16(s))

    @given(text())
    def testDecodeNeverCrashes(self, s):
        try:
            stfu8.decode_u16(s)
        except error.Decode:
            pass


if __name__ == '__main__':
    unittest.main()
