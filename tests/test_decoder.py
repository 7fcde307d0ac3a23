import pytest

from chip8vm import InvalidInstructionError, Opcode, decode
from chip8vm.decoder import PATTERNS


def test_operand_fields():
    ins = decode(0xD7A5)
    assert ins.opcode is Opcode.DRW
    assert ins.x == 0x7
    assert ins.y == 0xA
    assert ins.n == 0x5
    assert ins.kk == 0xA5
    assert ins.nnn == 0x7A5
    assert ins.nibbles == (0xD, 0x7, 0xA, 0x5)


def test_one_pattern_per_opcode():
    assert len(PATTERNS) == 35
    assert {p[2] for p in PATTERNS} == set(Opcode)


@pytest.mark.parametrize("word,opcode", [
    (0x00E0, Opcode.CLS),
    (0x00EE, Opcode.RET),
    (0x0123, Opcode.SYS),
    (0x1ABC, Opcode.JP),
    (0x2ABC, Opcode.CALL),
    (0x3A12, Opcode.SE_Vx_kk),
    (0x4A12, Opcode.SNE_Vx_kk),
    (0x5AB0, Opcode.SE_Vx_Vy),
    (0x6A12, Opcode.LD_Vx_kk),
    (0x7A12, Opcode.ADD_Vx_kk),
    (0x8AB0, Opcode.LD_Vx_Vy),
    (0x8AB1, Opcode.OR),
    (0x8AB2, Opcode.AND),
    (0x8AB3, Opcode.XOR),
    (0x8AB4, Opcode.ADD),
    (0x8AB5, Opcode.SUB),
    (0x8AB6, Opcode.SHR),
    (0x8AB7, Opcode.SUBN),
    (0x8ABE, Opcode.SHL),
    (0x9AB0, Opcode.SNE_Vx_Vy),
    (0xA123, Opcode.LD_I),
    (0xB123, Opcode.JP_V0),
    (0xCA12, Opcode.RND),
    (0xDAB5, Opcode.DRW),
    (0xEA9E, Opcode.SKP),
    (0xEAA1, Opcode.SKNP),
    (0xFA07, Opcode.LD_Vx_DT),
    (0xFA0A, Opcode.WAITKEY),
    (0xFA15, Opcode.LD_DT_Vx),
    (0xFA18, Opcode.LD_ST_Vx),
    (0xFA1E, Opcode.ADD_I_Vx),
    (0xFA29, Opcode.FONT),
    (0xFA33, Opcode.BCD),
    (0xFA55, Opcode.STORE),
    (0xFA65, Opcode.LOAD),
])
def test_every_opcode_decodes(word, opcode):
    assert decode(word).opcode is opcode


@pytest.mark.parametrize("word,opcode", [
    (0x5AB3, Opcode.SE_Vx_Vy),
    (0x9AB7, Opcode.SNE_Vx_Vy),
    (0xE12E, Opcode.SKP),
    (0xE001, Opcode.SKNP),
    (0xF32F, Opcode.FONT),
    (0xF43C, Opcode.BCD),
])
def test_low_nibble_wildcards(word, opcode):
    assert decode(word).opcode is opcode


@pytest.mark.parametrize("word", [0x8008, 0x800F, 0xE000, 0xF000, 0xF0FF, 0xF019])
def test_unknown_words_raise(word):
    with pytest.raises(InvalidInstructionError) as exc:
        decode(word, pc=0x204)
    assert exc.value.word == word
    assert exc.value.pc == 0x204
    assert "%04X" % word in str(exc.value)


@pytest.mark.parametrize("word,text", [
    (0x00E0, "CLS"),
    (0x1200, "JP 0x200"),
    (0xB300, "JP_V0 V0, 0x300"),
    (0x6A05, "LD_Vx_kk VA, 0x05"),
    (0x8124, "ADD V1, V2"),
    (0xD015, "DRW V0, V1, 5"),
    (0xF029, "FONT V0"),
])
def test_mnemonic(word, text):
    assert decode(word).mnemonic() == text
