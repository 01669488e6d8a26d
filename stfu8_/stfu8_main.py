#!/usr/bin/env python3
"""
stfu8_main.py - Encode binary data as STFU-8 text, and decode it back.

    stfu8 encode [--u16] [--pretty]  < raw   > text
    stfu8 decode [--u16]             < text  > raw

With --u16, the raw side is UTF-16-LE bytes, e.g. a Windows path that may
contain unpaired surrogates.
"""

import optparse
import os
import struct
import sys

from core import error
from core.util import log
from stfu8_ import stfu8

from typing import Any, List, Optional

ARG_0 = os.path.basename(sys.argv[0])


def Options():
    # type: () -> Any
    """Returns an option parser instance."""

    p = optparse.OptionParser(usage='%prog (encode|decode) [options]')
    p.add_option('--u16',
                 dest='u16',
                 action='store_true',
                 default=False,
                 help='Raw data is UTF-16-LE code units, not bytes')
    p.add_option('--pretty',
                 dest='pretty',
                 action='store_true',
                 default=False,
                 help='Leave tab, newline and carriage return literal')
    p.add_option('-v',
                 '--verbose',
                 dest='verbose',
                 action='store_true',
                 default=False,
                 help='Show sizes on stderr')
    return p


def _UnpackUnits(raw):
    # type: (bytes) -> List[int]
    if len(raw) % 2 != 0:
        raise RuntimeError('UTF-16 input has an odd number of bytes (%d)' %
                           len(raw))
    return list(struct.unpack('<%dH' % (len(raw) // 2), raw))


def _PackUnits(units):
    # type: (List[int]) -> bytes
    return struct.pack('<%dH' % len(units), *units)


def main(argv, stdin=None, stdout=None):
    # type: (List[str], Optional[Any], Optional[Any]) -> int
    """
    Args:
      stdin, stdout: binary streams, sys.stdin.buffer and sys.stdout.buffer
        by default
    """
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    o = Options()
    opts, argv = o.parse_args(argv)

    try:
        action = argv[1]
    except IndexError:
        raise RuntimeError('Action required: encode or decode')

    raw = stdin.read()

    if action == 'encode':
        options = stfu8.PRETTY if opts.pretty else stfu8.ESCAPE_ALL
        if opts.u16:
            units = _UnpackUnits(raw)
            text = stfu8.encode_u16(units, options=options)
        else:
            text = stfu8.encode_u8(raw, options=options)

        out = text.encode('utf-8')
        if opts.verbose:
            log('%s: encoded %d bytes into %d bytes of text', ARG_0, len(raw),
                len(out))
        stdout.write(out)

    elif action == 'decode':
        try:
            if opts.u16:
                out = _PackUnits(stfu8.decode_u16(raw))
            else:
                out = stfu8.decode_u8(raw)
        except error.Decode as e:
            log('%s: %s', ARG_0, e.Message())
            return 1

        if opts.verbose:
            log('%s: decoded %d bytes of text into %d bytes', ARG_0, len(raw),
                len(out))
        stdout.write(out)

    else:
        raise RuntimeError('Invalid action %r' % action)

    return 0


def main_entry():
    # type: () -> None
    try:
        status = main(sys.argv)
    except RuntimeError as e:
        log('%s: FATAL: %s', ARG_0, e)
        status = 1
    sys.exit(status)


if __name__ == '__main__':
    main_entry()
