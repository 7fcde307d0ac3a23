import random

import pytest

from chip8vm import Chip8

NO_KEYS = [False] * 16


def program(*words):
    """Assemble big-endian instruction words into ROM bytes."""
    out = bytearray()
    for w in words:
        out += bytes([(w >> 8) & 0xFF, w & 0xFF])
    return bytes(out)


def keys_down(*held):
    keys = [False] * 16
    for k in held:
        keys[k] = True
    return keys


@pytest.fixture
def vm():
    return Chip8(rng=random.Random(1234))


@pytest.fixture
def run(vm):
    """Load the given words and execute that many ticks with no keys held."""
    def _run(*words, ticks=None):
        vm.load(program(*words))
        for _ in range(len(words) if ticks is None else ticks):
            vm.tick(NO_KEYS)
        return vm
    return _run
