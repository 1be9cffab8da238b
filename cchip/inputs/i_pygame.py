#!/usr/bin/env python3

"""
PyGame Input Plugin

Unlike the Curses plugin, this scans the keyboard and properly detects key
'press' and 'release' events.

Closing the window, or releasing ESC, asks the emulator to quit.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .i_null import Inputs as InputsBase


class Inputs(InputsBase):
    def __init__(self, renderer):
        self.pygame_methods = {
            pygame.QUIT:    self._pygame_quit,
            pygame.KEYDOWN: self._pygame_keydown,
            pygame.KEYUP:   self._pygame_keyup
        }

        super().__init__(renderer)

    def poll_events(self):
        # Call PyGame method based on fast dictionary lookup of event.  Process more events, even if planning to quit.
        key_events = []

        for event in pygame.event.get():
            pygame_method = self.pygame_methods.get(event.type)

            if pygame_method:
                pygame_method(event, key_events)

        return key_events

    def _pygame_quit(self, event, key_events):  # pylint: disable=unused-argument
        self.quit = True

    def _pygame_keydown(self, event, key_events):
        key_events.append((event.key, True))

    def _pygame_keyup(self, event, key_events):
        if event.key == pygame.K_ESCAPE:
            self.quit = True
        else:
            key_events.append((event.key, False))
