#!/usr/bin/env python3

"""
Curses Audio Plugin

Rings the Terminal bell (BEL, CTRL+G) each time the sound timer starts.  The
bell has a fixed length, so there is nothing to silence when the timer runs
out, and the sound timer's duration is not reflected.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import curses
from .a_null import Audio as AudioBase


class Audio(AudioBase):
    def _start_tone(self):
        curses.beep()
