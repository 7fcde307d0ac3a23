from .decoder import Instruction, Opcode, decode
from .display import DisplayBuffer
from .errors import (Chip8Error, InvalidInstructionError, ProgramLoadError, ProgramNotFoundError,
                     ProgramReadError, ProgramTooLargeError, StackError, StackOverflowError,
                     StackUnderflowError)
from .interpreter import Chip8
from .keypad import Keypad
from .machine import CallStack, MachineState

__version__ = "0.1.0"
