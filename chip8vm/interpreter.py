# CHIP8 Virtual Machine Steps:
# Input - the host latches all 16 key states once per frame.
# Output - 64x32 display buffer the host reads back after each frame.
# CPU - one instruction fetched, decoded and executed per frame, then both timers tick.
# Memory - 4096 bytes holding the font (0x000-0x04F) and the ROM (from 0x200).
#----------------------------------------------------------------------------------------------
# Nothing in here knows about windows or keyboards; see window.py for the pyglet side.

import logging
import random

from .config import FLAG_REGISTER, STACK_DEPTH
from .decoder import decode
from .display import DisplayBuffer
from .instructions import HANDLERS
from .keypad import Keypad
from .machine import MachineState

log = logging.getLogger(__name__)


class Chip8:

    def __init__(self, stack_depth=STACK_DEPTH, rng=None):
        self.state = MachineState(stack_depth)
        self.display = DisplayBuffer()
        self.keypad = Keypad()
        self.rng = rng if rng is not None else random.Random()
        self.display_dirty = True
        self.cycle_count = 0

    @classmethod
    def from_file(cls, path, **kwargs):
        vm = cls(**kwargs)
        vm.load_file(path)
        return vm

    # ---- Load ROM ----
    def load(self, data):
        self.state.load_program(data)

    def load_file(self, path):
        self.state.load_program_file(path)

    # ---- Cycle ----
    def step(self):
        """Fetch, decode and execute the instruction at pc."""
        state = self.state
        pc = state.pc
        ins = decode(state.fetch(), pc)
        log.debug("%03X: %04X  %s", pc, ins.word, ins.mnemonic())

        flag = HANDLERS[ins.opcode](self, ins)
        if flag is not None:
            state.registers[FLAG_REGISTER] = flag

        self.cycle_count += 1
        return ins

    def tick(self, keys):
        """Run one host frame: latch ``keys``, execute one instruction, tick the timers."""
        self.keypad.latch(keys)
        self.step()
        self.state.tick_timers()

    @property
    def sound_active(self):
        return self.state.sound_timer > 0
