#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here by the CPU, and a copy is handed to the host rendering
system at 60Hz.  Programs for this system cannot write directly into video RAM.
Instead, sprites are drawn to the screen using an XOR method.

Collisions (where any pixel was set, but was unset by an XOR), are reported so
the CPU can raise the Vf flag.

Pixels landing past the right or bottom edges are clipped rather than wrapped
around to the other side of the screen.  Only a sprite's starting position
wraps, and that is handled by the CPU.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_WIDTH, VID_HEIGHT


class FramebufferError(Exception):
    pass


class Framebuffer:
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        if vid_width <= 0 or vid_height <= 0:
            raise FramebufferError("Framebuffer dimensions must be positive")

        self.vid_width = vid_width
        self.vid_height = vid_height
        self.rows = [[False] * vid_width for _ in range(vid_height)]

    def clear(self):
        for row in self.rows:
            row[:] = [False] * self.vid_width

    def xor_pixel(self, x, y):
        # Returns flagging any collision, or None if the pixel was clipped
        if x >= self.vid_width or y >= self.vid_height:
            return None

        row = self.rows[y]
        collision = row[x]
        row[x] = not collision
        return collision

    def get_pixel(self, x, y):
        return self.rows[y][x]

    def get_frame(self):
        # Copying 2048 cells is cheap, and stops renderers holding on to live video memory
        return [row[:] for row in self.rows]

    def get_vid_size(self):
        return self.vid_width, self.vid_height
