#!/usr/bin/env python3

"""
Host Loop

Drives the CPU against the wall clock.  Two cadences share the one clock:

    * Instructions, at the configured clock speed (700 per second by default).
      Host inputs are drained just before each instruction.
    * Frames, at 60Hz.  Each frame ticks the delay and sound timers, hands a
      copy of the display to the renderer, and switches the buzzer on or off
      when the sound timer starts or stops running.

Whenever the next deadline is in the future, the loop sleeps until it.  If the
host falls badly behind (e.g. the window was dragged), the deadlines are moved
forward rather than running a huge burst of catch-up instructions.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter, sleep
from .constants import APP_NAME, DEFAULT_CLOCK_SPEED, TIMER_FREQ

FRAME_INTERVAL = 1.0 / TIMER_FREQ
PERF_INTERVAL = 1.0  # Report performance once a second


class HostLoop:
    def __init__(self, cpu, renderer, inputs, audio, keymap, clock_speed=DEFAULT_CLOCK_SPEED, clock=perf_counter,
                 sleeper=sleep):
        self.cpu = cpu
        self.renderer = renderer
        self.inputs = inputs
        self.audio = audio
        self.keymap = keymap
        self.clock = clock
        self.sleeper = sleeper

        # A clock speed of 0 (or less) runs uncapped, only pausing when a frame is due
        self.core_interval = 0.0 if clock_speed <= 0 else 1.0 / clock_speed

        # Buzzer state as last passed on to the audio plugin
        self.sound_on = False

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0

    def run(self, max_frames=None):
        # Returns when the host asks to quit, or after max_frames frames if given
        this_time = self.clock()
        next_step_time = this_time
        next_frame_time = this_time + FRAME_INTERVAL
        next_perf_report_time = this_time + PERF_INTERVAL
        frames = 0
        self.renderer.set_title(APP_NAME)

        while True:
            this_time = self.clock()

            if this_time >= next_frame_time:
                # Also check for inputs here, so slow clock speeds still respond quickly
                if self.process_inputs():
                    return

                self.frame()
                frames += 1
                next_frame_time += FRAME_INTERVAL

                if this_time - next_frame_time > FRAME_INTERVAL:
                    next_frame_time = this_time + FRAME_INTERVAL

                if this_time >= next_perf_report_time:
                    self.report_perf()
                    next_perf_report_time = this_time + PERF_INTERVAL

                if max_frames is not None and frames >= max_frames:
                    return

            if this_time >= next_step_time:
                if self.process_inputs():
                    return

                self.cpu.step()
                self.perf_counter_ops += 1
                next_step_time += self.core_interval

                if this_time - next_step_time > FRAME_INTERVAL:
                    next_step_time = this_time

                continue

            delay = min(next_step_time, next_frame_time) - this_time

            # A late frame can leave its next deadline already passed, so go straight round again
            if delay > 0:
                self.sleeper(delay)

    def process_inputs(self):
        # Pass any keypad changes on to the CPU.  Returns True if the host wants to quit.
        for scan_code, pressed in self.inputs.poll_events():
            key = self.keymap.lookup(scan_code)

            if key is None:
                continue

            if pressed:
                self.cpu.press_key(key)
            else:
                self.cpu.release_key(key)

        return self.inputs.quit_requested()

    def frame(self):
        self.cpu.tick_timers()
        self.renderer.present(self.cpu.display())
        self.perf_counter_fps += 1
        sound_active = self.cpu.sound_active()

        if sound_active != self.sound_on:
            if sound_active:
                self.audio.start()
            else:
                self.audio.stop()

            self.sound_on = sound_active

    def report_perf(self):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, self.perf_counter_fps, self.perf_counter_ops))
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
