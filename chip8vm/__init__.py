"""CHIP-8 virtual machine.

The core (memory, registers, framebuffer, timers, keypad and interpreter)
has no display or clock of its own; ``chip8vm.frontend`` drives it with
pyglet.
"""

from .config import EmulatorConfig
from .decoder import Instruction, decode
from .errors import AddressOverflow, Chip8Error, InvalidOpcode, StackOverflow, StackUnderflow
from .interpreter import Advance, Interpreter
from .machine import MachineSnapshot, MachineState

__all__ = [
    "AddressOverflow",
    "Advance",
    "Chip8Error",
    "EmulatorConfig",
    "Instruction",
    "Interpreter",
    "InvalidOpcode",
    "MachineSnapshot",
    "MachineState",
    "StackOverflow",
    "StackUnderflow",
    "decode",
]
