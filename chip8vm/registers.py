from .constants import FLAG_REGISTER, INDEX_MAX, NUM_REGISTERS, PROGRAM_START, STACK_DEPTH
from .errors import StackOverflow, StackUnderflow


class RegisterFile:
    """V0-VF, the index register I, PC and the call stack."""

    def __init__(self, pc=PROGRAM_START):
        self.V = [0] * NUM_REGISTERS  # 16 general-purpose registers
        self.I = 0
        self.pc = pc
        self.stack = []

    @property
    def flag(self):
        return self.V[FLAG_REGISTER]

    @flag.setter
    def flag(self, value):
        self.V[FLAG_REGISTER] = 1 if value else 0

    def set_index(self, value):
        self.I = min(max(value, 0), INDEX_MAX)

    def push(self, address):
        if len(self.stack) >= STACK_DEPTH:
            raise StackOverflow(len(self.stack) + 1)
        self.stack.append(address)

    def pop(self):
        if not self.stack:
            raise StackUnderflow()
        return self.stack.pop()

    @property
    def depth(self):
        return len(self.stack)
