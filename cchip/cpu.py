#!/usr/bin/env python3

"""
CPU Emulator (classic CHIP-8)

Like a real computer, this is where most of the processing happens.  Each call
to step() fetches, decodes and executes exactly one instruction.  The CPU never
sleeps or waits on anything, so pacing is entirely up to the host loop, which
also calls tick_timers() at 60Hz.

Waiting for a key (Fx0A) doesn't block either.  The program counter is wound
back instead, so the same instruction runs again on the next step until a key
arrives.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import Random
from .constants import (
    APP_INTRO, MAX_ROM_SIZE, NUM_KEYS, NUM_REGISTERS, PROGRAM_START, SYSFONT_LOC, SYSFONT_GLYPH_HEIGHT, SYSTEM_FONT
)
from .debugger import Debugger
from .decoder import decode, masked_opcode
from .quirks import Quirks
from .ram import RAMError
from .stack import StackError

CPU_ENDIAN = "big"  # CHIP-8 is big-endian
ADDR_MASK = 0xFFF   # Only the low 12 bits of PC and I address memory
I_MASK = 0xFFFF     # The index register itself is 16 bits wide


class CPUError(Exception):
    def __init__(self, message, pc=None, opcode=None):
        super().__init__(message)
        self.pc = pc
        self.opcode = opcode


class CPU:
    def __init__(self, ram, stack, framebuffer, quirks=None, rng=None, debugger=None):
        self.ram = ram
        self.stack = stack
        self.framebuffer = framebuffer
        self.quirks = Quirks() if quirks is None else quirks
        self.rng = Random() if rng is None else rng
        self.debugger = Debugger() if debugger is None else debugger
        self.live_debug = self.debugger.is_live()

        # Install the hex font where Fx29 expects to find it
        self.ram.write_block(SYSFONT_LOC, SYSTEM_FONT)
        self.framebuffer.clear()

        # Define instruction pointers, looked up by masked opcode (see decoder.CATEGORY_MASKS)
        # n = Nibble
        # nn = Byte
        # nnn = address
        # x/y = register (0-15)
        self.instructions = {
            # Instructions beginning with nibble 0x0, bitmask 0xFFFF (i.e., exact match)
            0x00E0: self._00E0,
            0x00EE: self._00EE,
            # Instructions identified by their first nibble alone, bitmask 0xF000
            0x1000: self._1nnn,
            0x2000: self._2nnn,
            0x3000: self._3xnn,
            0x4000: self._4xnn,
            0x6000: self._6xnn,
            0x7000: self._7xnn,
            0xA000: self._Annn,
            0xB000: self._Bnnn,
            0xC000: self._Cxnn,
            0xD000: self._Dxyn,
            # Instructions beginning with nibble 0x5/0x8/0x9, bitmask 0xF00F
            0x5000: self._5xy0,
            0x8000: self._8xy0,
            0x8001: self._8xy1,
            0x8002: self._8xy2,
            0x8003: self._8xy3,
            0x8004: self._8xy4,
            0x8005: self._8xy5,
            0x8006: self._8xy6,
            0x8007: self._8xy7,
            0x800E: self._8xyE,
            0x9000: self._9xy0,
            # Instructions beginning with nibble 0xE/0xF, bitmask 0xF0FF
            0xE09E: self._Ex9E,
            0xE0A1: self._ExA1,
            0xF007: self._Fx07,
            0xF00A: self._Fx0A,
            0xF015: self._Fx15,
            0xF018: self._Fx18,
            0xF01E: self._Fx1E,
            0xF029: self._Fx29,
            0xF033: self._Fx33,
            0xF055: self._Fx55,
            0xF065: self._Fx65
        }

        # Initialise registers
        self.v = memoryview(bytearray(NUM_REGISTERS))  # Bytearrays are mutable, so this should be fast to update
        self.i = 0  # Index register

        # Initialise timers
        self.dt = 0  # Delay timer
        self.st = 0  # Sound timer

        # Initialise program counter and current opcode
        self.pc = PROGRAM_START
        self.debug_pc = PROGRAM_START
        self.opcode = 0

        # Input-related vars
        self.keys = [False] * NUM_KEYS
        self.awaiting_keypress = False
        self.pressed_while_waiting = set()  # Only these keys can end a wait-for-release
        self.last_released = None

    # Host-facing interface

    def load_rom(self, data):
        if len(data) > MAX_ROM_SIZE:
            raise CPUError("ROM is {} bytes, but at most {} bytes can be loaded".format(len(data), MAX_ROM_SIZE))

        self.ram.write_block(PROGRAM_START, data)

    def press_key(self, key):
        self._check_key(key)

        if self.awaiting_keypress and not self.keys[key]:
            self.pressed_while_waiting.add(key)

        self.keys[key] = True

    def release_key(self, key):
        self._check_key(key)

        if self.keys[key]:
            self.keys[key] = False

            if key in self.pressed_while_waiting:
                self.last_released = key

    def _check_key(self, key):
        if not 0 <= key < NUM_KEYS:
            raise CPUError("Key {} is out of range for the 16-key keypad".format(key))

    def step(self):
        # Keep track of the program counter before altering it in any way for debugging purposes
        self.debug_pc = self.pc
        self.opcode = self.fetch()
        self.inc_pc()  # Program counter updates after fetch, but before execute
        self.decode_exec()

    def tick_timers(self):
        if self.dt > 0:
            self.dt -= 1

        if self.st > 0:
            self.st -= 1

    def display(self):
        return self.framebuffer.get_frame()

    def sound_active(self):
        return self.st > 0

    # Fetch and decode

    def fetch(self):
        try:
            return int.from_bytes(self.ram.read_block(self.pc, 2), CPU_ENDIAN, signed=False)
        except RAMError:
            self.opcode = 0
            self._halt("Instruction fetch at address 0x{:03x} runs past the end of memory.".format(self.pc))

    def decode_exec(self):
        opcode = decode(self.opcode)
        instruction = self.instructions.get(masked_opcode(opcode))

        if instruction is None:
            self._halt(
                "Opcode 0x{:04x} at address 0x{:03x} is not emulated.".format(self.opcode, self.debug_pc)
            )

        if self.live_debug:
            self.debugger.output(self)

        instruction(opcode)

    def inc_pc(self):
        self.pc = (self.pc + 2) & ADDR_MASK

    def dec_pc(self):
        # Only used to re-run instructions (i.e. keypress wait).
        self.pc = (self.pc - 2) & ADDR_MASK

    def _halt(self, reason):
        raise CPUError(
            (
                "Emulation halted.\n\n" +
                "{}Debug info:\n" +
                "{}\n\n{}"
            ).format(APP_INTRO, self.debugger.crash_report(self), reason),
            pc=self.debug_pc,
            opcode=self.opcode
        ) from None

    # Instructions

    def _00E0(self, op):  # CLS
        self.framebuffer.clear()

    def _00EE(self, op):  # RET
        try:
            self.pc = self.stack.pop()
        except StackError as err:
            self._halt("{} on return at address 0x{:03x}.".format(err, self.debug_pc))

    def _1nnn(self, op):  # JP addr
        self.pc = op.nnn

    def _2nnn(self, op):  # CALL addr
        try:
            self.stack.push(self.pc)
        except StackError as err:
            self._halt("{} on call at address 0x{:03x}.".format(err, self.debug_pc))

        self.pc = op.nnn

    def _3xnn(self, op):  # SE Vx, byte
        if self.v[op.x] == op.nn:
            self.inc_pc()

    def _4xnn(self, op):  # SNE Vx, byte
        if self.v[op.x] != op.nn:
            self.inc_pc()

    def _5xy0(self, op):  # SE Vx, Vy
        if self.v[op.x] == self.v[op.y]:
            self.inc_pc()

    def _6xnn(self, op):  # LD Vx, byte
        self.v[op.x] = op.nn

    def _7xnn(self, op):  # ADD Vx, byte
        # No carry flag for this one
        self.v[op.x] = (self.v[op.x] + op.nn) & 0xFF

    def _8xy0(self, op):  # LD Vx, Vy
        self.v[op.x] = self.v[op.y]

    def _8xy1(self, op):  # OR Vx, Vy
        self.v[op.x] |= self.v[op.y]

    def _8xy2(self, op):  # AND Vx, Vy
        self.v[op.x] &= self.v[op.y]

    def _8xy3(self, op):  # XOR Vx, Vy
        self.v[op.x] ^= self.v[op.y]

    def _8xy4(self, op):  # ADD Vx, Vy
        val = self.v[op.x] + self.v[op.y]
        self.v[op.x] = val & 0xFF
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _post_8xy5_8xy7(self, op, val):  # Post-SUB/SUBN
        self.v[op.x] = val & 0xFF
        # Vf is set when NOT borrowing, and this should happen AFTER Vx is set, as sometimes Vf is specified in the
        # parameters.
        self.v[0xF] = int(val >= 0)

    def _8xy5(self, op):  # SUB Vx, Vy
        self._post_8xy5_8xy7(op, self.v[op.x] - self.v[op.y])

    def _8xy6(self, op):  # SHR Vx {, Vy}
        # On the COSMAC VIP, Vy is shifted into Vx.  Later interpreters shift Vx in place.
        if self.quirks.shift_uses_vy:
            self.v[op.x] = self.v[op.y]

        val = self.v[op.x]
        self.v[op.x] = val >> 1
        self.v[0xF] = val & 1

    def _8xy7(self, op):  # SUBN Vx, Vy
        self._post_8xy5_8xy7(op, self.v[op.y] - self.v[op.x])

    def _8xyE(self, op):  # SHL Vx {, Vy}
        if self.quirks.shift_uses_vy:
            self.v[op.x] = self.v[op.y]

        val = self.v[op.x]
        self.v[op.x] = (val << 1) & 0xFF
        self.v[0xF] = val >> 7

    def _9xy0(self, op):  # SNE Vx, Vy
        if self.v[op.x] != self.v[op.y]:
            self.inc_pc()

    def _Annn(self, op):  # LD I, addr
        self.i = op.nnn

    def _Bnnn(self, op):  # JP V0, addr
        # This is a nasty quirk which breaks lots of games if set incorrectly
        vr = op.x if self.quirks.jump_offset_uses_vx else 0
        self.pc = (self.v[vr] + op.nnn) & ADDR_MASK

    def _Cxnn(self, op):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[op.x] = self.rng.randint(0, 0xFF) & op.nn

    def _Dxyn(self, op):  # DRW Vx, Vy, nibble
        height = op.n

        if height == 0:
            # Zero-height sprites draw nothing
            return

        # The sprite's start always wraps, but anything hanging off the bottom-right is trimmed
        vid_width, vid_height = self.framebuffer.get_vid_size()
        vx_pos = self.v[op.x] % vid_width
        vy_pos = self.v[op.y] % vid_height
        collided = False
        i = self.i

        for y in range(height):
            scr_y = y + vy_pos

            if scr_y >= vid_height:
                break

            spr_data = self.ram.read((i + y) & ADDR_MASK)

            for x in range(8):
                if spr_data & (0x80 >> x):
                    if self.framebuffer.xor_pixel(x + vx_pos, scr_y):
                        # Don't stop drawing.  Set the flag, and never unset it for this sprite.
                        collided = True

        self.v[0xF] = int(collided)

    def _Ex9E(self, op):  # SKP Vx
        if self.keys[self.v[op.x] & 0xF]:
            self.inc_pc()

    def _ExA1(self, op):  # SKNP Vx
        if not self.keys[self.v[op.x] & 0xF]:
            self.inc_pc()

    def _Fx07(self, op):  # LD Vx, DT
        self.v[op.x] = self.dt

    def _Fx0A(self, op):  # LD Vx, K
        # This opcode waits for a keypress, but since the sound and delay timers still need to expire correctly, and
        # the display still needs updating, we'll return control to the host and simply decrement the incremented
        # program counter.

        if self.quirks.key_wait_on_release:
            if self.awaiting_keypress:
                key = self.last_released
            else:
                # Keys already held when the wait began don't count until pressed again
                self.pressed_while_waiting.clear()
                self.last_released = None
                self.awaiting_keypress = True
                key = None
        else:
            key = next((key_num for key_num, down in enumerate(self.keys) if down), None)

        if key is None:
            # We need to come back here on the next instruction, because no key is pressed.
            self.dec_pc()
        else:
            self.v[op.x] = key
            self.awaiting_keypress = False
            self.pressed_while_waiting.clear()

    def _Fx15(self, op):  # LD DT, Vx
        self.dt = self.v[op.x]

    def _Fx18(self, op):  # LD ST, Vx
        self.st = self.v[op.x]

    def _Fx1E(self, op):  # ADD I, Vx
        val = self.i + self.v[op.x]
        self.i = val & I_MASK

        # Allow for Amiga CHIP-8 interpreter behaviour
        if self.quirks.index_overflow_sets_vf:
            self.v[0xF] = int(val > ADDR_MASK)

    def _Fx29(self, op):  # LD F, Vx
        self.i = SYSFONT_LOC + SYSFONT_GLYPH_HEIGHT * (self.v[op.x] & 0xF)

    def _Fx33(self, op):  # LD B, Vx
        val = self.v[op.x]
        i = self.i
        self.ram.write(i & ADDR_MASK, val // 100)               # Most-significant digit
        self.ram.write((i + 1) & ADDR_MASK, (val // 10) % 10)   # Middle digit
        self.ram.write((i + 2) & ADDR_MASK, val % 10)           # Least-significant digit

    def _post_Fx55_Fx65(self, op):
        if self.quirks.load_store_increments_i:
            self.i = (self.i + op.x + 1) & I_MASK

    def _Fx55(self, op):  # LD [I], Vx
        i = self.i

        for reg in range(op.x + 1):
            self.ram.write((i + reg) & ADDR_MASK, self.v[reg])

        self._post_Fx55_Fx65(op)

    def _Fx65(self, op):  # LD Vx, [I]
        i = self.i

        for reg in range(op.x + 1):
            self.v[reg] = self.ram.read((i + reg) & ADDR_MASK)

        self._post_Fx55_Fx65(op)
