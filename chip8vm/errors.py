class Chip8Error(Exception):
    """Base class for everything the interpreter raises."""


# ---- Program loading ----
class ProgramLoadError(Chip8Error):
    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = path


class ProgramNotFoundError(ProgramLoadError):
    pass


class ProgramReadError(ProgramLoadError):
    pass


class ProgramTooLargeError(ProgramLoadError):
    pass


# ---- Execution ----
class InvalidInstructionError(Chip8Error):
    """Raised when a fetched word matches no opcode pattern."""

    def __init__(self, word, pc=None):
        if pc is None:
            msg = "Unknown opcode: %04X" % word
        else:
            msg = "Unknown opcode: %04X at 0x%03X" % (word, pc)
        super().__init__(msg)
        self.word = word
        self.pc = pc


class StackError(Chip8Error):
    pass


class StackOverflowError(StackError):
    pass


class StackUnderflowError(StackError):
    pass
