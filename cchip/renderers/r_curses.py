#!/usr/bin/env python3

"""
Curses Renderer Plugin

Draws the screen in a standard Linux-style TTY Terminal, the Windows Command
Prompt, or PowerShell, using inverted spaces to represent each lit pixel.  The
top line of the terminal is used for the title and performance figures.

Only pixels which changed since the last frame are redrawn, as writing to the
terminal is slow.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import curses
import _curses
from .r_null import Renderer as RendererBase
from ..constants import VID_WIDTH, VID_HEIGHT

DEFAULT_SCALE = 2  # Terminal characters are roughly twice as tall as they are wide


class Renderer(RendererBase):
    def __init__(self, scale=None, **kwargs):
        if scale is None:
            scale = DEFAULT_SCALE

        super().__init__(scale)
        self.pixel_char = " " * self.scale
        self.last_frame = None
        self.last_screen_height = -1
        self.last_screen_width = -1
        self.refresh_needed = True
        self.screen = curses.initscr()
        curses.curs_set(0)
        curses.noecho()
        curses.cbreak()

        # We have to allow one extra character, presumably for the cursor, otherwise we can't write the furthest
        # bottom-right pixel.  The extra row is for the title.
        self.pad = curses.newpad(VID_HEIGHT + 1, VID_WIDTH * self.scale + 1)

    def present(self, frame):
        last_frame = self.last_frame

        for y, row in enumerate(frame):
            for x, pixel in enumerate(row):
                if last_frame is None or last_frame[y][x] != pixel:
                    attr = curses.A_REVERSE if pixel else curses.A_NORMAL
                    self.pad.addstr(y + 1, x * self.scale, self.pixel_char, attr)
                    self.refresh_needed = True

        self.last_frame = frame
        screen_height, screen_width = self.screen.getmaxyx()

        if screen_height != self.last_screen_height or screen_width != self.last_screen_width:
            # Screen resolution changed, redraw everything
            self.screen.clear()

            if hasattr(curses, "resizeterm"):
                # This doesn't work on Windows
                curses.resizeterm(screen_height, screen_width)

            self.screen.refresh()
            self.last_screen_height = screen_height
            self.last_screen_width = screen_width
            self.refresh_needed = True

        if self.refresh_needed:
            self.pad.refresh(0, 0, 0, 0, screen_height - 1, screen_width - 1)
            self.refresh_needed = False

    def set_title(self, title):
        width = VID_WIDTH * self.scale
        self.pad.addstr(0, 0, title[:width].ljust(width), curses.A_REVERSE)
        self.refresh_needed = True
        super().set_title(title)

    def shutdown(self):
        curses.nocbreak()
        curses.echo()

        try:
            curses.curs_set(1)
        except _curses.error:
            pass

        curses.endwin()
        super().shutdown()

    # No Superclass for this Curses-specific method

    def get_curses_screen(self):
        return self.screen
