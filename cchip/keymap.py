#!/usr/bin/env python3

"""
Keymap

Converts host key codes (PyGame keyscans, or character numbers in Curses) into
keypad indices 0x0 - 0xF.  The mapping is defined as 16 comma-separated
decimals, the first being the host code for key 0, and the last for key F.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import NUM_KEYS


class KeymapError(Exception):
    pass


class Keymap:
    def __init__(self, keymap, force_lowercase=False):
        self.keymap_dict = {}
        keymap_split = keymap.split(",")

        if len(keymap_split) != NUM_KEYS:
            raise KeymapError("Incorrect number of keys defined -- 16 required.  Use commas to split numbers")

        for key_num, key_defined in enumerate(keymap_split):
            try:
                key_defined_ord = int(key_defined)
            except ValueError:
                raise KeymapError("Defined keys are not all integer values") from None

            if force_lowercase:
                # If we are working with characters rather than keyscan codes, we should convert to lowercase
                try:
                    key_defined_ord = ord(chr(key_defined_ord).lower())
                except (ValueError, OverflowError):
                    raise KeymapError("Key {} is not a valid character number".format(key_defined_ord)) from None

            if key_defined_ord in self.keymap_dict:
                raise KeymapError("Duplicate keys defined")

            self.keymap_dict[key_defined_ord] = key_num

    def lookup(self, scan_code):
        # Returns None for keys which aren't part of the keypad
        return self.keymap_dict.get(scan_code)
