#!/usr/bin/env python3

"""
Stack Emulator

The call stack isn't part of the program-visible RAM, and there is no stack
pointer register exposed to the running program, so a bounded list is all
that's needed.  The stack pointer (SP) is simply the number of stored return
addresses: pushing stores at SP and increments it, popping decrements it first.

Classic interpreters allow 16 levels of nesting.  Going past either end is a
fatal error for the running program.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STACK_DEPTH


class StackError(Exception):
    pass


class Stack:
    def __init__(self, size=STACK_DEPTH):
        self.items = []
        self.size = size

    @property
    def sp(self):
        return len(self.items)

    def push(self, item):
        # Fetching the stack size with 'len' should be immediate, so no slow loop
        if len(self.items) >= self.size:
            raise StackError("Stack overflow")

        self.items.append(item & 0xFFF)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackError("Stack underflow") from None

    def get_items(self):
        # For debugging
        return self.items
