#!/usr/bin/env python3

"""
Null Audio Plugin

Serves as a base class for other Audio plugins.  Can be used on its own if no
sound is required.

The buzzer simply plays a tone while the sound timer is above zero.  start()
and stop() may be called any number of times; only changes of state are passed
on to the _start_tone() and _stop_tone() hooks of the subclasses.  The playing
flag is shared with the host's audio callback thread, so it is guarded by a
lock.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from threading import Lock


class Audio:
    def __init__(self):
        # Buzzer should be disabled (not playing sounds) by default
        self.playing_lock = Lock()
        self.playing = False

    def start(self):
        with self.playing_lock:
            if not self.playing:
                self._start_tone()
                self.playing = True

    def stop(self):
        with self.playing_lock:
            if self.playing:
                self._stop_tone()
                self.playing = False

    def is_playing(self):
        with self.playing_lock:
            return self.playing

    def _start_tone(self):
        pass

    def _stop_tone(self):
        pass

    def shutdown(self):
        self.stop()
