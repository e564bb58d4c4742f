"""Emulator configuration."""

import logging
from dataclasses import dataclass
from typing import Optional

from .constants import TIMER_DEFAULT

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EmulatorConfig:
    cpu_hz: int = 600       # instructions per second
    timer_hz: int = 60      # delay/sound timer rate
    scale: int = 10         # window pixels per CHIP-8 pixel
    initial_timer: int = TIMER_DEFAULT
    seed: Optional[int] = None
    draw_grid: bool = False
    show_hud: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.cpu_hz <= 0:
            raise ValueError("cpu_hz must be positive, got %r" % self.cpu_hz)
        if self.timer_hz <= 0:
            raise ValueError("timer_hz must be positive, got %r" % self.timer_hz)
        if self.scale <= 0:
            raise ValueError("scale must be positive, got %r" % self.scale)
        if not 0 <= self.initial_timer <= 0xFF:
            raise ValueError("initial_timer must fit in a byte, got %r" % self.initial_timer)
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError("unknown log level %r" % self.log_level)

    @property
    def level(self):
        return getattr(logging, self.log_level)

    @classmethod
    def from_args(cls, args):
        return cls(
            cpu_hz=args.cpu_hz,
            timer_hz=args.timer_hz,
            scale=args.scale,
            seed=args.seed,
            draw_grid=args.grid,
            show_hud=not args.no_hud,
            log_level=args.log_level,
        )
