#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from cchip.framebuffer import Framebuffer, FramebufferError


class TestFrameBuffer(unittest.TestCase):
    def setUp(self):
        self.framebuffer = Framebuffer(4, 3)

    def test_framebuffer_default_size(self):
        framebuffer = Framebuffer()
        self.assertEqual((64, 32), framebuffer.get_vid_size())
        self.assertEqual(32, len(framebuffer.get_frame()))
        self.assertEqual(64, len(framebuffer.get_frame()[0]))

    def test_framebuffer_bad_size(self):
        self.assertRaises(FramebufferError, Framebuffer, 0, 32)

    def test_framebuffer_writes(self):
        fb = self.framebuffer
        self.assertFalse(fb.xor_pixel(0, 0))
        self.assertFalse(fb.xor_pixel(1, 2))
        self.assertEqual(
            [[True, False, False, False], [False, False, False, False], [False, True, False, False]],
            fb.get_frame()
        )

        # Writing the same pixel again erases it, and reports the collision
        self.assertTrue(fb.xor_pixel(0, 0))
        self.assertFalse(fb.get_pixel(0, 0))

    def test_framebuffer_clipping(self):
        fb = self.framebuffer
        self.assertIsNone(fb.xor_pixel(4, 0))
        self.assertIsNone(fb.xor_pixel(0, 3))
        self.assertFalse(any(any(row) for row in fb.get_frame()))

    def test_framebuffer_clear(self):
        fb = self.framebuffer
        fb.xor_pixel(3, 2)
        fb.clear()
        self.assertFalse(any(any(row) for row in fb.get_frame()))
        fb.clear()
        self.assertFalse(any(any(row) for row in fb.get_frame()))

    def test_framebuffer_frame_is_copy(self):
        frame = self.framebuffer.get_frame()
        frame[1][1] = True
        self.assertFalse(self.framebuffer.get_pixel(1, 1))
