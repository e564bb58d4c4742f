"""Instruction word decoding.

Every CHIP-8 instruction is a 16-bit word read most-significant byte first.
It is split into four nibbles ``n0..n3``; the operand fields used by the
opcode handlers are derived from those:

    addr = n1 n2 n3   (NNN, 12-bit address)
    byte = n2 n3      (KK, 8-bit immediate)
    x    = n1         (register index)
    y    = n2         (register index)
    n    = n3         (4-bit immediate, sprite height)
"""

from typing import NamedTuple


class Instruction(NamedTuple):
    word: int
    n0: int
    n1: int
    n2: int
    n3: int

    @property
    def x(self) -> int:
        return self.n1

    @property
    def y(self) -> int:
        return self.n2

    @property
    def n(self) -> int:
        return self.n3

    @property
    def addr(self) -> int:
        return self.word & 0x0FFF

    @property
    def byte(self) -> int:
        return self.word & 0x00FF

    def nibbles(self):
        return (self.n0, self.n1, self.n2, self.n3)

    def to_word(self) -> int:
        return (self.n0 << 12) | (self.n1 << 8) | (self.n2 << 4) | self.n3

    def __str__(self):
        return "%04X" % self.word


def decode(word: int) -> Instruction:
    if not 0 <= word <= 0xFFFF:
        raise ValueError("instruction word out of range: %r" % word)
    return Instruction(
        word,
        (word >> 12) & 0xF,
        (word >> 8) & 0xF,
        (word >> 4) & 0xF,
        word & 0xF,
    )


def encode(n0: int, n1: int, n2: int, n3: int) -> int:
    for nib in (n0, n1, n2, n3):
        if not 0 <= nib <= 0xF:
            raise ValueError("nibble out of range: %r" % nib)
    return (n0 << 12) | (n1 << 8) | (n2 << 4) | n3
