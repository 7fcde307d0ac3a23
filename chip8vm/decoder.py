from enum import Enum
from typing import NamedTuple

from .errors import InvalidInstructionError


class Opcode(Enum):
    CLS = "00E0"
    RET = "00EE"
    SYS = "0nnn"
    JP = "1nnn"
    CALL = "2nnn"
    SE_Vx_kk = "3xkk"
    SNE_Vx_kk = "4xkk"
    SE_Vx_Vy = "5xy0"
    LD_Vx_kk = "6xkk"
    ADD_Vx_kk = "7xkk"
    LD_Vx_Vy = "8xy0"
    OR = "8xy1"
    AND = "8xy2"
    XOR = "8xy3"
    ADD = "8xy4"
    SUB = "8xy5"
    SHR = "8xy6"
    SUBN = "8xy7"
    SHL = "8xyE"
    SNE_Vx_Vy = "9xy0"
    LD_I = "Annn"
    JP_V0 = "Bnnn"
    RND = "Cxkk"
    DRW = "Dxyn"
    SKP = "Ex9E"
    SKNP = "ExA1"
    LD_Vx_DT = "Fx07"
    WAITKEY = "Fx0A"
    LD_DT_Vx = "Fx15"
    LD_ST_Vx = "Fx18"
    ADD_I_Vx = "Fx1E"
    FONT = "Fx29"
    BCD = "Fx33"
    STORE = "Fx55"
    LOAD = "Fx65"


# (mask, pattern, opcode) - first match wins, so exact 00E0/00EE come before 0nnn
PATTERNS = [
    (0xFFFF, 0x00E0, Opcode.CLS),
    (0xFFFF, 0x00EE, Opcode.RET),
    (0xF000, 0x0000, Opcode.SYS),

    (0xF000, 0x1000, Opcode.JP),
    (0xF000, 0x2000, Opcode.CALL),
    (0xF000, 0x3000, Opcode.SE_Vx_kk),
    (0xF000, 0x4000, Opcode.SNE_Vx_kk),
    (0xF000, 0x5000, Opcode.SE_Vx_Vy),
    (0xF000, 0x6000, Opcode.LD_Vx_kk),
    (0xF000, 0x7000, Opcode.ADD_Vx_kk),

    (0xF00F, 0x8000, Opcode.LD_Vx_Vy),
    (0xF00F, 0x8001, Opcode.OR),
    (0xF00F, 0x8002, Opcode.AND),
    (0xF00F, 0x8003, Opcode.XOR),
    (0xF00F, 0x8004, Opcode.ADD),
    (0xF00F, 0x8005, Opcode.SUB),
    (0xF00F, 0x8006, Opcode.SHR),
    (0xF00F, 0x8007, Opcode.SUBN),
    (0xF00F, 0x800E, Opcode.SHL),

    (0xF000, 0x9000, Opcode.SNE_Vx_Vy),
    (0xF000, 0xA000, Opcode.LD_I),
    (0xF000, 0xB000, Opcode.JP_V0),
    (0xF000, 0xC000, Opcode.RND),
    (0xF000, 0xD000, Opcode.DRW),

    (0xF00F, 0xE00E, Opcode.SKP),
    (0xF00F, 0xE001, Opcode.SKNP),

    (0xF0FF, 0xF007, Opcode.LD_Vx_DT),
    (0xF0FF, 0xF00A, Opcode.WAITKEY),
    (0xF0FF, 0xF015, Opcode.LD_DT_Vx),
    (0xF0FF, 0xF018, Opcode.LD_ST_Vx),
    (0xF0FF, 0xF01E, Opcode.ADD_I_Vx),
    (0xF0F0, 0xF020, Opcode.FONT),
    (0xF0F0, 0xF030, Opcode.BCD),
    (0xF0F0, 0xF050, Opcode.STORE),
    (0xF0F0, 0xF060, Opcode.LOAD),
]


class Instruction(NamedTuple):
    """A fetched word split into its operand fields."""
    word: int
    opcode: Opcode
    x: int
    y: int
    nnn: int
    kk: int
    n: int

    @property
    def nibbles(self):
        w = self.word
        return (w >> 12) & 0xF, (w >> 8) & 0xF, (w >> 4) & 0xF, w & 0xF

    def mnemonic(self):
        """Short disassembly, e.g. ``ADD_Vx_kk VA, 0x10``."""
        op = self.opcode
        name = op.name
        pattern = op.value
        if pattern[0] == "0" and op is not Opcode.SYS:
            return name
        if "nnn" in pattern:
            prefix = "V0, " if op is Opcode.JP_V0 else ""
            return f"{name} {prefix}0x{self.nnn:03X}"
        if "kk" in pattern:
            return f"{name} V{self.x:X}, 0x{self.kk:02X}"
        if op is Opcode.DRW:
            return f"{name} V{self.x:X}, V{self.y:X}, {self.n}"
        if "y" in pattern:
            return f"{name} V{self.x:X}, V{self.y:X}"
        return f"{name} V{self.x:X}"


def match(word):
    for mask, pattern, opcode in PATTERNS:
        if (word & mask) == pattern:
            return opcode
    return None


def decode(word, pc=None):
    """Split ``word`` into an Instruction; raise InvalidInstructionError if no pattern fits."""
    word &= 0xFFFF
    opcode = match(word)
    if opcode is None:
        raise InvalidInstructionError(word, pc)
    return Instruction(
        word=word,
        opcode=opcode,
        x=(word & 0x0F00) >> 8,
        y=(word & 0x00F0) >> 4,
        nnn=word & 0x0FFF,
        kk=word & 0x00FF,
        n=word & 0x000F,
    )
