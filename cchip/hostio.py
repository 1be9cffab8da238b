#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries for later writing into RAM.  ROMs are raw
binaries, without any header or checksum, so the only thing worth checking is
that they fit between 0x200 and the top of memory.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MAX_ROM_SIZE


class LoaderError(Exception):
    pass


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            return f.read()

    def load_rom(self, filename):
        try:
            data = self.load_binary(filename)
        except OSError as err:
            raise LoaderError("Unable to read ROM '{}': {}".format(filename, err.strerror or err)) from None

        if len(data) > MAX_ROM_SIZE:
            raise LoaderError(
                "ROM '{}' is {} bytes, which is too large (maximum {} bytes)".format(filename, len(data), MAX_ROM_SIZE)
            )

        return data
