# ---- Opcode handlers ----
# Every handler takes the interpreter and a decoded Instruction, moves the
# program counter itself and returns either None or the value VF must take.
# The dispatcher writes that flag after the handler's own register writes.

from .config import GLYPH_SIZE, FLAG_REGISTER
from .decoder import Opcode


# 00E0 / 0nnn / 00EE - Clear Screen / Return from subroutine
# every 0nnn word other than 00EE clears the screen like 00E0
def op_CLS(vm, ins):
    vm.display.clear()
    vm.display_dirty = True
    vm.state.advance()


def op_RET(vm, ins):
    # the stack holds the address of the CALL itself
    vm.state.jump(vm.state.stack.pop() + 2)


# 1nnn - Jump to address NNN
def op_JP(vm, ins):
    vm.state.jump(ins.nnn)


# 2nnn - Call subroutine at NNN
def op_CALL(vm, ins):
    vm.state.stack.push(vm.state.pc)
    vm.state.jump(ins.nnn)


# 3xkk / 4xkk / 5xy0 / 9xy0 - conditional skips
def _skip_if(vm, condition):
    vm.state.advance(2 if condition else 1)


def op_SE_Vx_kk(vm, ins):
    _skip_if(vm, vm.state.registers[ins.x] == ins.kk)


def op_SNE_Vx_kk(vm, ins):
    _skip_if(vm, vm.state.registers[ins.x] != ins.kk)


def op_SE_Vx_Vy(vm, ins):
    V = vm.state.registers
    _skip_if(vm, V[ins.x] == V[ins.y])


def op_SNE_Vx_Vy(vm, ins):
    V = vm.state.registers
    _skip_if(vm, V[ins.x] != V[ins.y])


# 6xkk / 7xkk - immediate load / add (no carry)
def op_LD_Vx_kk(vm, ins):
    vm.state.registers[ins.x] = ins.kk
    vm.state.advance()


def op_ADD_Vx_kk(vm, ins):
    V = vm.state.registers
    V[ins.x] = (V[ins.x] + ins.kk) & 0xFF
    vm.state.advance()


# 8xy0..8xyE - Math and logic operations between two registers
def op_LD_Vx_Vy(vm, ins):
    V = vm.state.registers
    V[ins.x] = V[ins.y]
    vm.state.advance()


def op_OR(vm, ins):
    V = vm.state.registers
    V[ins.x] |= V[ins.y]
    vm.state.advance()
    return 0


def op_AND(vm, ins):
    V = vm.state.registers
    V[ins.x] &= V[ins.y]
    vm.state.advance()
    return 0


def op_XOR(vm, ins):
    V = vm.state.registers
    V[ins.x] ^= V[ins.y]
    vm.state.advance()
    return 0


def op_ADD(vm, ins):
    V = vm.state.registers
    total = V[ins.x] + V[ins.y]
    V[ins.x] = total & 0xFF
    vm.state.advance()
    return 1 if total > 0xFF else 0


def op_SUB(vm, ins):
    V = vm.state.registers
    vx, vy = V[ins.x], V[ins.y]
    V[ins.x] = (vx - vy) & 0xFF
    vm.state.advance()
    return 1 if vx >= vy else 0


def op_SHR(vm, ins):
    V = vm.state.registers
    vx = V[ins.x]
    V[ins.x] = vx >> 1
    vm.state.advance()
    return vx & 1


def op_SUBN(vm, ins):
    V = vm.state.registers
    vx, vy = V[ins.x], V[ins.y]
    V[ins.x] = (vy - vx) & 0xFF
    vm.state.advance()
    return 1 if vy >= vx else 0


def op_SHL(vm, ins):
    V = vm.state.registers
    vx = V[ins.x]
    V[ins.x] = (vx << 1) & 0xFF
    vm.state.advance()
    return (vx >> 7) & 1


# Annn / Bnnn - index and offset jump
def op_LD_I(vm, ins):
    vm.state.set_index(ins.nnn)
    vm.state.advance()


def op_JP_V0(vm, ins):
    vm.state.jump(ins.nnn + vm.state.registers[0])


# Cxkk - random byte AND kk
def op_RND(vm, ins):
    vm.state.registers[ins.x] = vm.rng.getrandbits(8) & ins.kk
    vm.state.advance()


# Dxyn - Draw n-byte sprite from memory[I] at (Vx, Vy)
def op_DRW(vm, ins):
    state = vm.state
    V = state.registers
    V[FLAG_REGISTER] = 0
    # Vx/Vy are read once, after the VF reset
    top, left = V[ins.y], V[ins.x]
    collision = 0
    for row in range(ins.n):
        sprite = state.read(state.index + row)
        for bit in range(8):
            pixel = (sprite >> (7 - bit)) & 1
            collision |= vm.display.set(top + row, left + bit, pixel)
    vm.display_dirty = True
    state.advance()
    return collision


# Ex9E / ExA1 - skip on key state
def op_SKP(vm, ins):
    _skip_if(vm, vm.keypad.is_down(vm.state.registers[ins.x]))


def op_SKNP(vm, ins):
    _skip_if(vm, not vm.keypad.is_down(vm.state.registers[ins.x]))


# Fx07..Fx65 - timers, memory, I, and key input
def op_LD_Vx_DT(vm, ins):
    vm.state.registers[ins.x] = vm.state.delay_timer
    vm.state.advance()


def op_WAITKEY(vm, ins):
    # no key: leave pc alone so this instruction runs again next frame
    key = vm.keypad.first_down()
    if key is None:
        return
    vm.state.registers[ins.x] = key
    vm.state.advance()


def op_LD_DT_Vx(vm, ins):
    vm.state.delay_timer = vm.state.registers[ins.x]
    vm.state.advance()


def op_LD_ST_Vx(vm, ins):
    vm.state.sound_timer = vm.state.registers[ins.x]
    vm.state.advance()


def op_ADD_I_Vx(vm, ins):
    state = vm.state
    state.set_index(state.index + state.registers[ins.x])
    state.advance()


def op_FONT(vm, ins):
    vm.state.set_index(vm.state.registers[ins.x] * GLYPH_SIZE)
    vm.state.advance()


def op_BCD(vm, ins):
    state = vm.state
    val = state.registers[ins.x]
    state.write(state.index, val // 100)
    state.write(state.index + 1, (val // 10) % 10)
    state.write(state.index + 2, val % 10)
    state.advance()


def op_STORE(vm, ins):
    state = vm.state
    for i in range(ins.x + 1):
        state.write(state.index + i, state.registers[i])
    state.set_index(state.index + ins.x + 1)
    state.advance()


def op_LOAD(vm, ins):
    state = vm.state
    for i in range(ins.x + 1):
        state.registers[i] = state.read(state.index + i)
    state.set_index(state.index + ins.x + 1)
    state.advance()


HANDLERS = {
    Opcode.SYS: op_CLS,
    Opcode.CLS: op_CLS,
    Opcode.RET: op_RET,
    Opcode.JP: op_JP,
    Opcode.CALL: op_CALL,
    Opcode.SE_Vx_kk: op_SE_Vx_kk,
    Opcode.SNE_Vx_kk: op_SNE_Vx_kk,
    Opcode.SE_Vx_Vy: op_SE_Vx_Vy,
    Opcode.LD_Vx_kk: op_LD_Vx_kk,
    Opcode.ADD_Vx_kk: op_ADD_Vx_kk,
    Opcode.LD_Vx_Vy: op_LD_Vx_Vy,
    Opcode.OR: op_OR,
    Opcode.AND: op_AND,
    Opcode.XOR: op_XOR,
    Opcode.ADD: op_ADD,
    Opcode.SUB: op_SUB,
    Opcode.SHR: op_SHR,
    Opcode.SUBN: op_SUBN,
    Opcode.SHL: op_SHL,
    Opcode.SNE_Vx_Vy: op_SNE_Vx_Vy,
    Opcode.LD_I: op_LD_I,
    Opcode.JP_V0: op_JP_V0,
    Opcode.RND: op_RND,
    Opcode.DRW: op_DRW,
    Opcode.SKP: op_SKP,
    Opcode.SKNP: op_SKNP,
    Opcode.LD_Vx_DT: op_LD_Vx_DT,
    Opcode.WAITKEY: op_WAITKEY,
    Opcode.LD_DT_Vx: op_LD_DT_Vx,
    Opcode.LD_ST_Vx: op_LD_ST_Vx,
    Opcode.ADD_I_Vx: op_ADD_I_Vx,
    Opcode.FONT: op_FONT,
    Opcode.BCD: op_BCD,
    Opcode.STORE: op_STORE,
    Opcode.LOAD: op_LOAD,
}
