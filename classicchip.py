#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

import sys
from argparse import ArgumentParser
from cchip import main, StartupError
from cchip.constants import DEFAULT_CLOCK_SPEED, DEFAULT_KEYMAP, QUIRK_OPTIONS
from cchip.cpu import CPUError
from cchip.hostio import LoaderError
from cchip.keymap import KeymapError
from cchip.quirks import QUIRK_PRESETS, QuirksError
from cchip.renderers.r_null import RendererError

HOST_ERRORS = (StartupError, CPUError, LoaderError, KeymapError, QuirksError, RendererError)


def parse_args():
    parser = ArgumentParser()
    parser.add_argument("filename", help="ROM to execute (normally ending in .ch8 or .c8)")
    parser.add_argument(
        "-c", "--clock_speed", type=int,
        help="set the CPU speed in operations/second (default {}, 0 = uncapped)".format(DEFAULT_CLOCK_SPEED)
    )
    parser.add_argument(
        "-r", "--renderer", choices=["pygame", "curses", "null"],
        help="set the rendering, input, and audio systems (pygame by default if available, otherwise curses)"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the pixel scale factor (default 8 in PyGame mode, 2 in Curses mode)"
    )
    parser.add_argument(
        "-m", "--mute", type=int, choices=[0, 1],
        help="mute the emulated audio.  0 = unmuted (default for PyGame), 1 = muted (default for Curses)"
    )
    parser.add_argument(
        "-k", "--keymap", default=DEFAULT_KEYMAP,
        help="redefine the 16 keyscan codes (PyGame) or character numbers (Curses).  Separate each decimal with a comma"
    )
    parser.add_argument(
        "-p", "--preset", choices=list(QUIRK_PRESETS.keys()), default="modern",
        help="choose a set of quirks: 'modern' interpreters (default), or the original COSMAC VIP"
    )
    parser.add_argument(
        "--pygame_palette",
        help="redefine the background and foreground colours for the PyGame renderer in hex, e.g. 000000,33FF66"
    )

    for quirk_option in QUIRK_OPTIONS:
        parser.add_argument(
            "--{}_quirks".format(quirk_option), type=int, choices=[0, 1],
            help="manually disable or enable {} quirks, overriding the preset".format(quirk_option.replace("_", " "))
        )

    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live debug output of every instruction executed.  Slows CPU execution"
    )
    return parser.parse_args()  # Can call sys.exit(2) if args are incorrect


def cli():
    args = vars(parse_args())

    # It is possible to start the emulator from a GUI by calling this with a dictionary
    try:
        main(args)
    except HOST_ERRORS as err:
        sys.exit(str(err))


if __name__ == "__main__":
    cli()
