"""
util.py - Common infrastructure.
"""

import sys

from typing import List, Any


def log(msg, *args):
    # type: (str, *Any) -> None
    """Print debug output to stderr."""
    if args:
        msg = msg % args
    print(msg, file=sys.stderr)


class BufWriter(object):
    """Mimic StringIO API, but add clear() so we can reuse objects.

    The encoders append many small escapes; joining once at the end is
    cheaper than repeated concatenation.
    """

    def __init__(self):
        # type: () -> None
        self.parts = []  # type: List[str]

    def write(self, s):
        # type: (str) -> None
        self.parts.append(s)

    def getvalue(self):
        # type: () -> str
        return ''.join(self.parts)

    def clear(self):
        # type: () -> None
        del self.parts[:]
