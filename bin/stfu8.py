#!/usr/bin/env python3
"""
bin/stfu8.py - Command line wrapper for stfu8_/stfu8_main.py
"""

from stfu8_ import stfu8_main

if __name__ == '__main__':
    stfu8_main.main_entry()
