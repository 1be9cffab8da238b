#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required.

Input plugins only report raw host key codes as (code, pressed) events.  The
host loop maps them onto the keypad, so plugins never need to know about it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Inputs:
    def __init__(self, renderer):
        self.renderer = renderer
        self.quit = False

    def poll_events(self):
        return []  # No keys pressed or released

    def quit_requested(self):
        return self.quit

    def shutdown(self):
        pass
