#!/usr/bin/env python3

"""
CPU Quirks

Historical interpreters disagree on a handful of instructions, and some ROMs
only work with one behaviour or the other.  The chosen behaviour is fixed when
the CPU is created.

    shift_uses_vy           : 8xy6/8xyE copy Vy into Vx before shifting (COSMAC VIP).
    load_store_increments_i : Fx55/Fx65 leave I pointing past the last register (COSMAC VIP).
    jump_offset_uses_vx     : Bnnn adds Vx (x being the top nibble of nnn) instead of V0 (CHIP-48).
    index_overflow_sets_vf  : Fx1E sets Vf when I passes 0xFFF (Amiga interpreter).
    key_wait_on_release     : Fx0A completes when a key is released, not pressed (COSMAC VIP).
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple


class QuirksError(Exception):
    pass


Quirks = namedtuple(
    "Quirks",
    ["shift_uses_vy", "load_store_increments_i", "jump_offset_uses_vx", "index_overflow_sets_vf",
     "key_wait_on_release"],
    defaults=[False, False, False, False, False]
)

QUIRK_PRESETS = {
    "modern": Quirks(),
    "cosmac": Quirks(shift_uses_vy=True, load_store_increments_i=True, key_wait_on_release=True)
}


def resolve_quirks(preset=None, **overrides):
    # Start from a named preset, then apply any individual settings which aren't None
    try:
        quirks = QUIRK_PRESETS["modern" if preset is None else preset]
    except KeyError:
        raise QuirksError("Unknown quirk preset '{}'".format(preset)) from None

    unknown = set(overrides) - set(Quirks._fields)

    if unknown:
        raise QuirksError("Unknown quirks: {}".format(", ".join(sorted(unknown))))

    return quirks._replace(**{name: bool(value) for name, value in overrides.items() if value is not None})
