#!/usr/bin/env python3

"""
Instruction Decoder

Splits a 16-bit instruction word into the fields used by every CHIP-8 opcode.
The fields are always in the same position, so there is no need to know what
the instruction is before decoding it:

    C   = category (first nibble)
    X   = register (second nibble)
    Y   = register (third nibble)
    N   = 4-bit immediate (last nibble)
    NN  = 8-bit immediate (last byte)
    NNN = 12-bit address (last three nibbles)

Also turns decoded instructions into readable mnemonics for the debugger.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple

Opcode = namedtuple("Opcode", ["raw", "c", "x", "y", "n", "nn", "nnn"])


def decode(word):
    return Opcode(
        word & 0xFFFF,
        (word & 0xF000) >> 12,
        (word & 0x0F00) >> 8,
        (word & 0x00F0) >> 4,
        word & 0x000F,
        word & 0x00FF,
        word & 0x0FFF
    )


# Mnemonics for instructions identified by their masked opcode.  Each is formatted with the decoded fields.
MNEMONICS = {
    0x00E0: "CLS",
    0x00EE: "RET",
    0x1000: "JP 0x{nnn:03x}",
    0x2000: "CALL 0x{nnn:03x}",
    0x3000: "SE V{x:01x}, 0x{nn:02x}",
    0x4000: "SNE V{x:01x}, 0x{nn:02x}",
    0x5000: "SE V{x:01x}, V{y:01x}",
    0x6000: "LD V{x:01x}, 0x{nn:02x}",
    0x7000: "ADD V{x:01x}, 0x{nn:02x}",
    0x8000: "LD V{x:01x}, V{y:01x}",
    0x8001: "OR V{x:01x}, V{y:01x}",
    0x8002: "AND V{x:01x}, V{y:01x}",
    0x8003: "XOR V{x:01x}, V{y:01x}",
    0x8004: "ADD V{x:01x}, V{y:01x}",
    0x8005: "SUB V{x:01x}, V{y:01x}",
    0x8006: "SHR V{x:01x}, V{y:01x}",
    0x8007: "SUBN V{x:01x}, V{y:01x}",
    0x800E: "SHL V{x:01x}, V{y:01x}",
    0x9000: "SNE V{x:01x}, V{y:01x}",
    0xA000: "LD I, 0x{nnn:03x}",
    0xB000: "JP V0, 0x{nnn:03x}",
    0xC000: "RND V{x:01x}, 0x{nn:02x}",
    0xD000: "DRW V{x:01x}, V{y:01x}, 0x{n:01x}",
    0xE09E: "SKP V{x:01x}",
    0xE0A1: "SKNP V{x:01x}",
    0xF007: "LD V{x:01x}, DT",
    0xF00A: "LD V{x:01x}, K",
    0xF015: "LD DT, V{x:01x}",
    0xF018: "LD ST, V{x:01x}",
    0xF01E: "ADD I, V{x:01x}",
    0xF029: "LD F, V{x:01x}",
    0xF033: "LD B, V{x:01x}",
    0xF055: "LD [I], V{x:01x}",
    0xF065: "LD V{x:01x}, [I]"
}

# Bitmask applied to the raw word to find the masked opcode, chosen by the category nibble
CATEGORY_MASKS = {
    0x0: 0xFFFF,
    0x5: 0xF00F,
    0x8: 0xF00F,
    0x9: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}


def masked_opcode(opcode):
    return opcode.raw & CATEGORY_MASKS.get(opcode.c, 0xF000)


def disassemble(opcode):
    mnemonic = MNEMONICS.get(masked_opcode(opcode))

    if mnemonic is None:
        return "???"

    return mnemonic.format(**opcode._asdict())
