import logging

from .config import FONTSET, MEMORY_SIZE, PROGRAM_START, REGISTER_COUNT, STACK_DEPTH
from .errors import (ProgramNotFoundError, ProgramReadError, ProgramTooLargeError,
                     StackOverflowError, StackUnderflowError)

log = logging.getLogger(__name__)


class CallStack:
    """Return addresses pushed by CALL and popped by RET, bounded at ``max_depth``."""

    def __init__(self, max_depth=STACK_DEPTH):
        if max_depth < 1:
            raise ValueError("stack depth must be at least 1")
        self.max_depth = max_depth
        self._entries = []

    def push(self, addr):
        if len(self._entries) >= self.max_depth:
            raise StackOverflowError("Stack overflow on CALL (depth %d)" % self.max_depth)
        self._entries.append(addr & 0xFFFF)

    def pop(self):
        if not self._entries:
            raise StackUnderflowError("Stack underflow on RET")
        return self._entries.pop()

    def peek(self):
        return self._entries[-1] if self._entries else None

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)


class MachineState:
    """Registers, memory, stack, program counter and timers."""

    def __init__(self, stack_depth=STACK_DEPTH):
        self.registers = bytearray(REGISTER_COUNT)  # V0..VF
        self.index = 0                              # I register (memory pointer)
        self.memory = bytearray(MEMORY_SIZE)
        self.stack = CallStack(stack_depth)
        self.pc = PROGRAM_START
        self.delay_timer = 0
        self.sound_timer = 0

        # Load fontset into memory
        self.memory[:len(FONTSET)] = bytes(FONTSET)

    # ---- Memory ----
    def read(self, addr):
        return self.memory[addr % MEMORY_SIZE]

    def write(self, addr, value):
        self.memory[addr % MEMORY_SIZE] = value & 0xFF

    def fetch(self):
        """Big-endian instruction word at the program counter."""
        return (self.read(self.pc) << 8) | self.read(self.pc + 1)

    # ---- Program counter / index ----
    def advance(self, count=1):
        self.pc = (self.pc + 2 * count) & 0xFFFF

    def jump(self, addr):
        self.pc = addr & 0xFFFF

    def set_index(self, value):
        self.index = value & 0xFFFF

    # ---- Timers ----
    def tick_timers(self):
        if self.delay_timer > 0:
            self.delay_timer -= 1
        if self.sound_timer > 0:
            self.sound_timer -= 1

    # ---- Load ROM ----
    def load_program(self, data, origin="<memory>"):
        data = bytes(data)
        room = MEMORY_SIZE - PROGRAM_START
        if len(data) > room:
            raise ProgramTooLargeError(origin, "program is %d bytes, only %d fit" % (len(data), room))
        self.memory[PROGRAM_START:PROGRAM_START + len(data)] = data
        log.info("Loaded %d bytes from %s at 0x%03X", len(data), origin, PROGRAM_START)

    def load_program_file(self, path):
        log.info("Loading ROM: %s", path)
        try:
            with open(path, "rb") as f:
                data = f.read()
        except FileNotFoundError:
            raise ProgramNotFoundError(path, "no such file") from None
        except OSError as e:
            raise ProgramReadError(path, e.strerror or str(e)) from e
        self.load_program(data, origin=path)
