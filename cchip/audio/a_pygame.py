#!/usr/bin/env python3

"""
PyGame Audio Plugin

Plays the buzzer within PyGame / SDL.  The emulated buzzer only has an 'on' or
'off' status, so a single cycle of a square wave is generated once, and looped
for as long as the buzzer is on.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .a_null import Audio as AudioBase

PLAYBACK_FREQUENCY = 44100
TONE_FREQUENCY = 440.0
DEFAULT_VOLUME = 0.1


def square_wave(playback_frequency, tone_frequency):
    # One cycle of an unsigned 8-bit square wave: high for the first half, low for the second
    cycle_length = max(2, int(playback_frequency / tone_frequency))
    half_cycle = cycle_length // 2
    return bytes([0xFF] * half_cycle + [0x00] * (cycle_length - half_cycle))


class Audio(AudioBase):
    def __init__(self):
        pygame.mixer.pre_init(PLAYBACK_FREQUENCY, size=8, channels=1, allowedchanges=0)
        pygame.mixer.init()
        self.sound = pygame.mixer.Sound(buffer=square_wave(PLAYBACK_FREQUENCY, TONE_FREQUENCY))
        self.sound.set_volume(DEFAULT_VOLUME)
        super().__init__()

    def _start_tone(self):
        self.sound.play(-1)

    def _stop_tone(self):
        self.sound.stop()

    def shutdown(self):
        super().shutdown()
        pygame.mixer.quit()
