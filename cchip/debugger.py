#!/usr/bin/env python3

"""
CPU Debugger

Live tracing prints a line just before each instruction runs.  Registers are
listed from VF down to V0, then come the index register, both timers, the
address the instruction was fetched from, the raw opcode and its disassembly.

When emulation halts, a crash report adds the stack pointer and the return
addresses on the stack to the same line.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .decoder import decode, disassemble

TRACE_FORMAT = "V: 0x{} I: 0x{:04x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: 0x{:04x} IN: {}"


def format_registers(v):
    return "".join("{:02x}".format(v[reg_num]) for reg_num in range(len(v) - 1, -1, -1))


def format_stack(stack):
    return " ".join("0x{:03x}".format(addr) for addr in stack.get_items()) or "(Empty)"


class Debugger:
    def __init__(self, live=False, stream=None):
        self.live = live
        self.stream = stream  # None writes to whatever sys.stdout currently is

    def trace_line(self, cpu):
        return TRACE_FORMAT.format(
            format_registers(cpu.v), cpu.i, cpu.dt, cpu.st, cpu.debug_pc, cpu.opcode, disassemble(decode(cpu.opcode))
        )

    def crash_report(self, cpu):
        return "{}\nSP: {}\nStack: {}".format(self.trace_line(cpu), cpu.stack.sp, format_stack(cpu.stack))

    def is_live(self):
        return self.live

    def output(self, cpu):
        print(self.trace_line(cpu), file=self.stream)
