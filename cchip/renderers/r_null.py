#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if you only want to see
debug output.  Without a renderer, performance data will also not be shown.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale

        if self.scale < 1:
            raise RendererError("Display scale must be at least 1.")

        self.title = None

    def present(self, frame):  # pylint: disable=unused-argument
        # Draw a full 64x32 frame of booleans, indexed [row][col]
        pass

    def set_title(self, title):
        self.title = title

    def shutdown(self):
        pass
