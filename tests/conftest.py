import random

import pytest

from chip8vm.interpreter import Interpreter


def words_to_bytes(*words):
    out = bytearray()
    for w in words:
        out += bytes([(w >> 8) & 0xFF, w & 0xFF])
    return bytes(out)


@pytest.fixture
def vm():
    return Interpreter(rng=random.Random(1234))


@pytest.fixture
def load(vm):
    """Load instruction words at 0x200 (or a given address) into the fixture VM."""
    def _load(*words, address=0x200):
        vm.memory.load(words_to_bytes(*words), address)
        return vm
    return _load
