#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from cchip.decoder import decode, disassemble, masked_opcode


class TestDecoder(unittest.TestCase):
    def test_decoder_fields(self):
        op = decode(0xD12F)
        self.assertEqual(0xD12F, op.raw)
        self.assertEqual(0xD, op.c)
        self.assertEqual(0x1, op.x)
        self.assertEqual(0x2, op.y)
        self.assertEqual(0xF, op.n)
        self.assertEqual(0x2F, op.nn)
        self.assertEqual(0x12F, op.nnn)

    def test_decoder_extremes(self):
        self.assertEqual((0, 0, 0, 0, 0, 0, 0), tuple(decode(0x0000)))
        self.assertEqual((0xFFFF, 0xF, 0xF, 0xF, 0xF, 0xFF, 0xFFF), tuple(decode(0xFFFF)))

    def test_decoder_masked_opcode(self):
        self.assertEqual(0x00E0, masked_opcode(decode(0x00E0)))
        self.assertEqual(0x1000, masked_opcode(decode(0x1ABC)))
        self.assertEqual(0x8006, masked_opcode(decode(0x8AB6)))
        self.assertEqual(0xF065, masked_opcode(decode(0xF365)))
        self.assertEqual(0xE0A1, masked_opcode(decode(0xE4A1)))

    def test_decoder_disassemble(self):
        self.assertEqual("CLS", disassemble(decode(0x00E0)))
        self.assertEqual("CALL 0x2fc", disassemble(decode(0x22FC)))
        self.assertEqual("SE V3, 0x12", disassemble(decode(0x3312)))
        self.assertEqual("SHL Va, Vb", disassemble(decode(0x8ABE)))
        self.assertEqual("DRW V0, V1, 0x5", disassemble(decode(0xD015)))
        self.assertEqual("LD V4, K", disassemble(decode(0xF40A)))

    def test_decoder_disassemble_unknown(self):
        for word in 0x0000, 0x5001, 0x800F, 0xE000, 0xF0FF:
            self.assertEqual("???", disassemble(decode(word)))
