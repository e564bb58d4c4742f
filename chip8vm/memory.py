import logging

from .constants import MEMORY_SIZE
from .errors import AddressOverflow

logger = logging.getLogger(__name__)


class Memory:
    """Flat 4096 byte store.

    Every access is checked against ``[0, MEMORY_SIZE - 1]``. Block reads and
    writes check the whole range up front so a failing access never leaves a
    partial write behind.
    """

    def __init__(self, size=MEMORY_SIZE):
        self.size = size
        self._mem = bytearray(size)

    def __len__(self):
        return self.size

    def check(self, address, length=1, reason="memory access"):
        if address < 0 or length < 0 or address + length > self.size:
            bad = address if address < 0 else max(address, self.size)
            raise AddressOverflow(bad, reason)

    def read(self, address):
        self.check(address)
        return self._mem[address]

    def write(self, address, value):
        self.check(address)
        self._mem[address] = value & 0xFF

    def read_word(self, address):
        self.check(address, 2, "PC")
        return (self._mem[address] << 8) | self._mem[address + 1]

    def read_block(self, address, length):
        self.check(address, length)
        return bytes(self._mem[address:address + length])

    def write_block(self, address, data):
        data = bytes(data)
        self.check(address, len(data))
        self._mem[address:address + len(data)] = data

    def load(self, data, address):
        """Copy ``data`` verbatim into memory starting at ``address``."""
        data = bytes(data)
        self.check(address, len(data), "program load")
        self._mem[address:address + len(data)] = data
        logger.debug("Loaded %d bytes at 0x%03X", len(data), address)
