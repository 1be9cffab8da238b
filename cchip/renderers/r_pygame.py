#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws the emulated display onto an SDL window via PyGame.  The frame is written
into a small RGB buffer at the emulated resolution, and then stretched (using
'Nearest Neighbour' translation) by the integer scale factor to fit the window.
This means we don't have to draw the same pixel multiple times.

The palette can be overridden with two 6-digit hex colours: the background
first, then the foreground.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import RendererError, Renderer as RendererBase
from ..constants import APP_NAME, VID_WIDTH, VID_HEIGHT

DEFAULT_SCALE = 8  # 512x256 window


class Renderer(RendererBase):
    def __init__(self, scale=None, pygame_palette=None, **kwargs):
        if scale is None:
            scale = DEFAULT_SCALE

        super().__init__(scale)

        # Background, foreground
        colour_map = [0x222222, 0xDDDDDD]

        # Override some (or all) of the colours with a user-defined palette, if necessary
        if pygame_palette is not None:
            pygame_palette_split = pygame_palette.split(",")

            if len(pygame_palette_split) > len(colour_map):
                raise RendererError("Too many palette colours defined.")

            for pygame_colour_num, pygame_colour in enumerate(pygame_palette_split):
                if len(pygame_colour) != 6:
                    raise RendererError("Palette colours must all be 6 hex digits long.")

                try:
                    colour_map[pygame_colour_num] = int(pygame_colour, 16)
                except ValueError:
                    raise RendererError("Invalid palette colour defined.") from None

        # Split compound RGB values for faster byte-based lookup later
        self.rgb_map = [bytes((i >> 16, (i >> 8) & 0xFF, i & 0xFF)) for i in colour_map]

        pygame.display.init()
        self.set_title(APP_NAME)
        self.scaled_size = (VID_WIDTH * self.scale, VID_HEIGHT * self.scale)
        self.display_surface = pygame.display.set_mode(self.scaled_size)
        self.rgb_buffer = memoryview(bytearray(VID_WIDTH * VID_HEIGHT * 3))  # 24-bit

    def present(self, frame):
        # Update RGB buffer in-place to minimise allocations and PyGame calls
        rgb_buffer = self.rgb_buffer
        background, foreground = self.rgb_map
        rgb_location = 0

        for row in frame:
            for pixel in row:
                rgb_buffer[rgb_location:rgb_location + 3] = foreground if pixel else background
                rgb_location += 3

        # Blit the bytearray straight to the surface, which is much faster than very frequent PixelArray updates
        render_surface = pygame.image.frombuffer(rgb_buffer, (VID_WIDTH, VID_HEIGHT), "RGB")
        scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
        self.display_surface.blit(scaled_win, (0, 0))
        pygame.display.flip()

    def set_title(self, title):
        pygame.display.set_caption(title)
        super().set_title(title)

    def shutdown(self):
        # PyGame currently segfaults if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()
