import logging
from dataclasses import dataclass, field
from typing import Tuple

from .constants import FONT_START, FONTSET, PROGRAM_START, TIMER_DEFAULT
from .framebuffer import FrameBuffer
from .keypad import InputLatch
from .memory import Memory
from .registers import RegisterFile
from .timers import TimerPair

logger = logging.getLogger(__name__)


@dataclass
class MachineState:
    """Everything the interpreter mutates, owned by exactly one Interpreter."""

    memory: Memory = field(default_factory=Memory)
    registers: RegisterFile = field(default_factory=RegisterFile)
    framebuffer: FrameBuffer = field(default_factory=FrameBuffer)
    timers: TimerPair = field(default_factory=TimerPair)
    keypad: InputLatch = field(default_factory=InputLatch)

    @classmethod
    def create(cls, initial_timer=TIMER_DEFAULT):
        state = cls(timers=TimerPair(initial_timer))
        state.memory.load(FONTSET, FONT_START)
        logger.debug("Font loaded at 0x%03X", FONT_START)
        state.registers.pc = PROGRAM_START
        return state


@dataclass(frozen=True)
class MachineSnapshot:
    V: Tuple[int, ...]
    I: int
    pc: int
    stack: Tuple[int, ...]
    delay: int
    sound: int
    awaiting_key: bool

    @classmethod
    def of(cls, state):
        regs = state.registers
        return cls(
            V=tuple(regs.V),
            I=regs.I,
            pc=regs.pc,
            stack=tuple(regs.stack),
            delay=state.timers.delay,
            sound=state.timers.sound,
            awaiting_key=state.keypad.awaiting,
        )
