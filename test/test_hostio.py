#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import os
import tempfile
import unittest
from cchip.hostio import Loader, LoaderError


class TestLoader(unittest.TestCase):
    def setUp(self):
        self.loader = Loader()
        self.tempdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tempdir.cleanup()

    def _write_rom(self, data):
        filename = os.path.join(self.tempdir.name, "test.ch8")

        with open(filename, "wb") as f:
            f.write(data)

        return filename

    def test_loader_load_file_present(self):
        filename = self._write_rom(b"\x12\x00")
        self.assertEqual(b"\x12\x00", self.loader.load_binary(filename))
        self.assertEqual(b"\x12\x00", self.loader.load_rom(filename))

    def test_loader_load_largest_rom(self):
        self.assertEqual(3584, len(self.loader.load_rom(self._write_rom(b"\x00" * 3584))))

    def test_loader_rom_too_large(self):
        self.assertRaises(LoaderError, self.loader.load_rom, self._write_rom(b"\x00" * 3585))

    def test_loader_load_file_missing(self):
        self.assertRaises(FileNotFoundError, self.loader.load_binary, "NoFile.ch8")
        self.assertRaises(LoaderError, self.loader.load_rom, "NoFile.ch8")
