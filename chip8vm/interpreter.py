"""CHIP-8 interpreter: fetch, decode, dispatch.

``step()`` executes exactly one instruction and ``tick()`` decrements the
timers; the driver calls each at its own rate. Opcode handlers return how the
program counter advances afterwards:

    KEEP  handler already set PC (jumps, calls, returns, key wait)
    STEP  PC += 2
    SKIP  PC += 4 (conditional skip taken)

Flag-setting instructions write VF after the result register, so VF always
holds the flag even when X is F.
"""

import enum
import logging
import random

from .constants import FONT_START, GLYPH_SIZE, PROGRAM_START, TIMER_DEFAULT
from .decoder import decode
from .errors import Chip8Error, InvalidOpcode
from .machine import MachineSnapshot, MachineState

logger = logging.getLogger(__name__)


class Advance(enum.IntEnum):
    KEEP = 0
    STEP = 2
    SKIP = 4


KEEP = Advance.KEEP
STEP = Advance.STEP
SKIP = Advance.SKIP


class Interpreter:

    def __init__(self, state=None, rng=None, initial_timer=TIMER_DEFAULT):
        self.state = state if state is not None else MachineState.create(initial_timer)
        self.rng = rng if rng is not None else random.Random()
        self.cycle_count = 0

        # dispatch table
        self.opcodes = [
            (0xFFFF, 0x00E0, self.op_CLS),
            (0xFFFF, 0x00EE, self.op_RET),
            (0xF000, 0x0000, self.op_SYS),

            (0xF000, 0x1000, self.op_JP),
            (0xF000, 0x2000, self.op_CALL),
            (0xF000, 0x3000, self.op_SE_Vx_kk),
            (0xF000, 0x4000, self.op_SNE_Vx_kk),
            (0xF00F, 0x5000, self.op_SE_Vx_Vy),
            (0xF000, 0x6000, self.op_LD_Vx_kk),
            (0xF000, 0x7000, self.op_ADD_Vx_kk),

            (0xF00F, 0x8000, self.op_LD_Vx_Vy),
            (0xF00F, 0x8001, self.op_OR),
            (0xF00F, 0x8002, self.op_AND),
            (0xF00F, 0x8003, self.op_XOR),
            (0xF00F, 0x8004, self.op_ADD),
            (0xF00F, 0x8005, self.op_SUB),
            (0xF00F, 0x8006, self.op_SHR),
            (0xF00F, 0x8007, self.op_SUBN),
            (0xF00F, 0x800E, self.op_SHL),

            (0xF00F, 0x9000, self.op_SNE_Vx_Vy),
            (0xF000, 0xA000, self.op_LD_I),
            (0xF000, 0xB000, self.op_JP_V0),
            (0xF000, 0xC000, self.op_RND),
            (0xF000, 0xD000, self.op_DRW),

            (0xF0FF, 0xE09E, self.op_SKP),
            (0xF0FF, 0xE0A1, self.op_SKNP),

            (0xF0FF, 0xF007, self.op_LD_Vx_DT),
            (0xF0FF, 0xF00A, self.op_WAITKEY),
            (0xF0FF, 0xF015, self.op_LD_DT_Vx),
            (0xF0FF, 0xF018, self.op_LD_ST_Vx),
            (0xF0FF, 0xF01E, self.op_ADD_I_Vx),
            (0xF0FF, 0xF029, self.op_FONT),
            (0xF0FF, 0xF033, self.op_BCD),
            (0xF0FF, 0xF055, self.op_STORE),
            (0xF0FF, 0xF065, self.op_LOAD),
        ]

    @classmethod
    def from_config(cls, config):
        rng = random.Random(config.seed)
        return cls(rng=rng, initial_timer=config.initial_timer)

    # components
    @property
    def memory(self):
        return self.state.memory

    @property
    def registers(self):
        return self.state.registers

    @property
    def framebuffer(self):
        return self.state.framebuffer

    @property
    def timers(self):
        return self.state.timers

    @property
    def keypad(self):
        return self.state.keypad

    @property
    def V(self):
        return self.state.registers.V

    # host entry points
    def load_program(self, data, address=PROGRAM_START):
        try:
            self.memory.load(data, address)
        except Chip8Error:
            logger.error("Program of %d bytes does not fit at 0x%03X", len(data), address)
            raise
        logger.info("Loaded %d byte program at 0x%03X", len(data), address)

    def press(self, key):
        self.keypad.press(key)

    def release(self, key):
        self.keypad.release(key)

    def tick(self):
        self.timers.tick()

    @property
    def tone_enabled(self):
        return self.timers.tone_enabled

    @property
    def awaiting_key(self):
        return self.keypad.awaiting

    def snapshot(self):
        return MachineSnapshot.of(self.state)

    def peek_instruction(self):
        return decode(self.memory.read_word(self.registers.pc))

    def lookup(self, word):
        for mask, pattern, handler in self.opcodes:
            if (word & mask) == pattern:
                return handler
        return None

    # cycle
    def step(self):
        """Execute the instruction at PC; returns the Advance applied."""
        regs = self.registers
        pc = regs.pc
        try:
            ins = decode(self.memory.read_word(pc))
            handler = self.lookup(ins.word)
            if handler is None:
                raise InvalidOpcode(ins.word, pc)
            if not self.keypad.awaiting:
                logger.debug("executing 0x%04X @ 0x%03X (ROM +0x%03X)", ins.word, pc, pc - PROGRAM_START)
            advance = handler(ins)
        except Chip8Error as e:
            logger.error("Emulation error at 0x%03X: %s", pc, e)
            raise

        if advance:
            regs.pc = pc + advance
        # a blocked FX0A is not an executed instruction
        if not (advance == KEEP and self.keypad.awaiting):
            self.cycle_count += 1
        return advance

    def run(self, cycles):
        for _ in range(cycles):
            self.step()

    # opcode handlers

    # 0nnn / 00E0 / 00EE - SYS / Clear Screen / Return from subroutine
    def op_SYS(self, ins):
        self.registers.pc = ins.addr
        return KEEP

    def op_CLS(self, ins):
        self.framebuffer.clear()
        return STEP

    def op_RET(self, ins):
        self.registers.pc = self.registers.pop()
        return KEEP

    # 1nnn - Jump to address NNN
    def op_JP(self, ins):
        self.registers.pc = ins.addr
        return KEEP

    # 2nnn - Call subroutine at NNN
    def op_CALL(self, ins):
        regs = self.registers
        regs.push(regs.pc + 2)
        regs.pc = ins.addr
        return KEEP

    # 3xkk / 4xkk / 5xy0 / 9xy0 - conditional skips
    def op_SE_Vx_kk(self, ins):
        return SKIP if self.V[ins.x] == ins.byte else STEP

    def op_SNE_Vx_kk(self, ins):
        return SKIP if self.V[ins.x] != ins.byte else STEP

    def op_SE_Vx_Vy(self, ins):
        return SKIP if self.V[ins.x] == self.V[ins.y] else STEP

    def op_SNE_Vx_Vy(self, ins):
        return SKIP if self.V[ins.x] != self.V[ins.y] else STEP

    # 6xkk / 7xkk - immediates
    def op_LD_Vx_kk(self, ins):
        self.V[ins.x] = ins.byte
        return STEP

    def op_ADD_Vx_kk(self, ins):
        self.V[ins.x] = (self.V[ins.x] + ins.byte) & 0xFF
        return STEP

    # 8xy0..8xyE - register to register
    def op_LD_Vx_Vy(self, ins):
        self.V[ins.x] = self.V[ins.y]
        return STEP

    def op_OR(self, ins):
        self.V[ins.x] |= self.V[ins.y]
        return STEP

    def op_AND(self, ins):
        self.V[ins.x] &= self.V[ins.y]
        return STEP

    def op_XOR(self, ins):
        self.V[ins.x] ^= self.V[ins.y]
        return STEP

    def op_ADD(self, ins):
        total = self.V[ins.x] + self.V[ins.y]
        self.V[ins.x] = total & 0xFF
        self.registers.flag = total > 0xFF
        return STEP

    def op_SUB(self, ins):
        vx, vy = self.V[ins.x], self.V[ins.y]
        self.V[ins.x] = (vx - vy) & 0xFF
        self.registers.flag = vx >= vy
        return STEP

    def op_SHR(self, ins):
        vy = self.V[ins.y]
        self.V[ins.x] = vy >> 1
        self.registers.flag = vy & 1
        return STEP

    def op_SUBN(self, ins):
        vx, vy = self.V[ins.x], self.V[ins.y]
        self.V[ins.x] = (vy - vx) & 0xFF
        self.registers.flag = vy >= vx
        return STEP

    def op_SHL(self, ins):
        vy = self.V[ins.y]
        self.V[ins.x] = (vy << 1) & 0xFF
        self.registers.flag = vy >> 7
        return STEP

    # Annn / Bnnn / Cxkk
    def op_LD_I(self, ins):
        self.registers.I = ins.addr
        return STEP

    def op_JP_V0(self, ins):
        self.registers.pc = ins.addr + self.V[0]
        return KEEP

    def op_RND(self, ins):
        self.V[ins.x] = self.rng.getrandbits(8) & ins.byte
        return STEP

    # Dxyn - DRW Vx, Vy, nibble
    def op_DRW(self, ins):
        px = self.V[ins.x]
        py = self.V[ins.y]
        # bounds check every sprite row before touching VF or the screen
        rows = self.memory.read_block(self.registers.I, ins.n)
        self.registers.flag = self.framebuffer.draw_sprite(px, py, rows)
        return STEP

    # Ex9E / ExA1 - SKP / SKNP
    def op_SKP(self, ins):
        return SKIP if self.keypad.is_pressed(self.V[ins.x]) else STEP

    def op_SKNP(self, ins):
        return SKIP if not self.keypad.is_pressed(self.V[ins.x]) else STEP

    # Fx07..Fx65 - timers, memory, I, and key input
    def op_LD_Vx_DT(self, ins):
        self.V[ins.x] = self.timers.delay
        return STEP

    def op_WAITKEY(self, ins):
        key = self.keypad.take_key()
        if key is None:
            self.keypad.begin_wait()
            return KEEP
        self.V[ins.x] = key
        return STEP

    def op_LD_DT_Vx(self, ins):
        self.timers.delay = self.V[ins.x]
        return STEP

    def op_LD_ST_Vx(self, ins):
        self.timers.sound = self.V[ins.x]
        return STEP

    def op_ADD_I_Vx(self, ins):
        self.registers.set_index(self.registers.I + self.V[ins.x])
        return STEP

    def op_FONT(self, ins):
        self.registers.I = FONT_START + self.V[ins.x] * GLYPH_SIZE
        return STEP

    def op_BCD(self, ins):
        v = self.V[ins.x]
        self.memory.write_block(self.registers.I, (v // 100, (v // 10) % 10, v % 10))
        return STEP

    def op_STORE(self, ins):
        regs = self.registers
        self.memory.write_block(regs.I, regs.V[:ins.x + 1])
        regs.set_index(regs.I + ins.x + 1)
        return STEP

    def op_LOAD(self, ins):
        regs = self.registers
        data = self.memory.read_block(regs.I, ins.x + 1)
        regs.V[:ins.x + 1] = list(data)
        regs.set_index(regs.I + ins.x + 1)
        return STEP
