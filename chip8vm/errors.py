"""Fatal machine errors.

Every error here means the machine state can no longer be trusted, so the
driver is expected to stop calling ``step()`` once one is raised.
"""


class Chip8Error(Exception):
    pass


class InvalidOpcode(Chip8Error):
    def __init__(self, word, address=None):
        self.word = word
        self.address = address
        where = "" if address is None else " at 0x%03X" % address
        super().__init__("Unknown opcode: %04X%s" % (word, where))


class AddressOverflow(Chip8Error):
    def __init__(self, address, reason="memory access"):
        self.address = address
        self.reason = reason
        super().__init__("%s out of bounds: 0x%X" % (reason, address))


class StackOverflow(Chip8Error):
    def __init__(self, depth):
        self.depth = depth
        super().__init__("Stack overflow on CALL (depth %d)" % depth)


class StackUnderflow(Chip8Error):
    def __init__(self):
        super().__init__("Stack underflow on 00EE")
