#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "ClassicChip Emulator"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory map
MEM_SIZE = 0x1000
PROGRAM_START = 0x200
MAX_ROM_SIZE = MEM_SIZE - PROGRAM_START  # 3584 bytes
SYSFONT_LOC = 0x50
SYSFONT_GLYPH_HEIGHT = 5

# Display
VID_WIDTH = 64
VID_HEIGHT = 32

# Registers, keypad and stack
NUM_REGISTERS = 0x10
NUM_KEYS = 0x10
STACK_DEPTH = 16

# Timing
DEFAULT_CLOCK_SPEED = 700  # Instructions per second
TIMER_FREQ = 60.0          # 60Hz delay/sound timers, also used for display refresh

# Default mappings for keys 0-F, later populated into a dictionary.  Note that the keyscans (on a UK QWERTY keyboard)
# and ASCII characters for these are the same code
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"

# Quirk command line options, mapped to the matching Quirks field
QUIRK_OPTIONS = {
    "shift":          "shift_uses_vy",
    "load_store":     "load_store_increments_i",
    "jump":           "jump_offset_uses_vx",
    "index_overflow": "index_overflow_sets_vf",
    "key_release":    "key_wait_on_release"
}

# Built-in hexadecimal font (0-F), 4 pixels wide in the high nibble, 5 rows tall
SYSTEM_FONT = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))
