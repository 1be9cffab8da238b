#!/usr/bin/env python3

"""
Main Startup Module

Call main(args) to run a ROM, where args is a dictionary of options.  The
Terminal launcher builds this from the command line, but a GUI could equally
build it by hand.

Every option must be present in the dictionary.  A value of None selects the
default for that option.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_CLOCK_SPEED, DEFAULT_KEYMAP, QUIRK_OPTIONS
from .cpu import CPU
from .debugger import Debugger
from .framebuffer import Framebuffer
from .hostio import Loader
from .hostloop import HostLoop
from .keymap import Keymap
from .quirks import resolve_quirks
from .ram import RAM
from .stack import Stack


class StartupError(Exception):
    pass


def quirks_from_args(args):
    # Individual --xxx_quirks options override whatever the preset says
    overrides = {}

    for quirk_option, quirk_field in QUIRK_OPTIONS.items():
        setting = args["{}_quirks".format(quirk_option)]
        overrides[quirk_field] = None if setting is None else bool(setting)

    return resolve_quirks(args["preset"], **overrides)


# pylint: disable=import-outside-toplevel, unused-import
def select_plugins(opt_renderer, mute_audio):
    """
    Works out which host framework to use, returning its name along with its
    Renderer, Inputs and Audio classes.  With no renderer requested, PyGame is
    preferred and Curses is the fallback.
    """

    if opt_renderer in (None, "pygame"):
        try:
            import pygame
        except ImportError:
            if opt_renderer == "pygame":
                raise StartupError("PyGame does not appear to be installed.") from None
        else:
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

            if mute_audio:
                from .audio.a_null import Audio
            else:
                from .audio.a_pygame import Audio

            return "pygame", Renderer, Inputs, Audio

    if opt_renderer in (None, "curses"):
        try:
            import curses
        except ImportError:
            if opt_renderer is None:
                raise StartupError("Neither PyGame nor Curses (or Windows-Curses) appear to be installed.") from None

            raise StartupError("Curses (or Windows-Curses) does not appear to be installed.") from None

        from .inputs.i_curses import Inputs
        from .renderers.r_curses import Renderer

        # Terminals beep rather than play samples, so stay quiet unless asked
        if mute_audio is None or mute_audio:
            from .audio.a_null import Audio
        else:
            from .audio.a_curses import Audio

        return "curses", Renderer, Inputs, Audio

    from .inputs.i_null import Inputs
    from .renderers.r_null import Renderer
    from .audio.a_null import Audio

    return "null", Renderer, Inputs, Audio


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    quirks = quirks_from_args(args)

    # A bad ROM is reported before any window opens
    rom = Loader().load_rom(args["filename"])

    renderer_name, Renderer, Inputs, Audio = select_plugins(args["renderer"], args["mute"])

    # Curses reports characters rather than keyscans, so case doesn't matter there
    keymap = Keymap(args["keymap"] or DEFAULT_KEYMAP, force_lowercase=(renderer_name == "curses"))

    cpu = CPU(RAM(), Stack(), Framebuffer(), quirks=quirks, debugger=Debugger(live=args["debug"]))
    cpu.load_rom(rom)

    clock_speed = DEFAULT_CLOCK_SPEED if args["clock_speed"] is None else args["clock_speed"]
    renderer = Renderer(scale=args["scale"], pygame_palette=args["pygame_palette"])
    inputs = None
    audio = None

    try:
        inputs = Inputs(renderer)
        audio = Audio()
        HostLoop(cpu, renderer, inputs, audio, keymap, clock_speed=clock_speed).run()
    finally:
        # Plugins are shut down explicitly, because __del__ cannot be relied upon under PyPy
        for plugin in (audio, inputs):
            if plugin is not None:
                plugin.shutdown()

        renderer.shutdown()
