# pyglet front end for the interpreter.
# The window plays every collaborator role around the core:
#   Input mapper  - on_key_press / on_key_release -> keypad index 0-15
#   Clock driver  - pyglet.clock schedules CPU steps, 60Hz timer ticks and redraws
#   Renderer      - consumes the dirty framebuffer, upscales with numpy, blits once
#   Audio sink    - polls tone_enabled every timer tick (indicator only)

import logging

import pyglet
from pyglet.window import key

from .constants import DISPLAY_HEIGHT, DISPLAY_WIDTH
from .errors import Chip8Error
from .render import render_frame

logger = logging.getLogger(__name__)

#map binding keys
KEYMAP = {
    key._1: 0x1, key._2: 0x2, key._3: 0x3, key._4: 0xC,
    key.Q: 0x4, key.W: 0x5, key.E: 0x6, key.R: 0xD,
    key.A: 0x7, key.S: 0x8, key.D: 0x9, key.F: 0xE,
    key.Z: 0xA, key.X: 0x0, key.C: 0xB, key.V: 0xF,
}

WHITE = (255, 255, 255, 255)


class Chip8Window(pyglet.window.Window):

    def __init__(self, vm, config, caption="CHIP-8 Emulator"):
        self.vm = vm
        self.config = config
        self.scale = config.scale
        window_width = DISPLAY_WIDTH * self.scale
        window_height = DISPLAY_HEIGHT * self.scale
        super().__init__(
            width=window_width,
            height=window_height,
            caption=caption,
            resizable=False,
            vsync=False,
        )

        self.halted = False
        self.tone_on = False
        self._cycle_budget = 0.0
        self._base_level = config.level

        self.image = pyglet.image.ImageData(
            window_width,
            window_height,
            'RGBA',
            render_frame(vm.framebuffer.snapshot(), self.scale, config.draw_grid).tobytes(),
        )

        # Performance tracking counters
        self._fps_counter = 0
        self._cps_counter = 0
        self._bench_time = pyglet.clock.get_default().time()

        self.fps_label = pyglet.text.Label(
            "FPS: 0", font_size=12, x=5, y=window_height - 15,
            anchor_x='left', anchor_y='center', color=WHITE)
        self.cps_label = pyglet.text.Label(
            "Cycles/s: 0", font_size=12, x=5, y=window_height - 30,
            anchor_x='left', anchor_y='center', color=WHITE)
        self.tone_label = pyglet.text.Label(
            "", font_size=12, x=window_width - 5, y=window_height - 15,
            anchor_x='right', anchor_y='center', color=WHITE)

        # Schedule the loops
        pyglet.clock.schedule_interval(self._cpu_tick, 1.0 / config.cpu_hz)
        pyglet.clock.schedule_interval(self._timer_tick, 1.0 / config.timer_hz)
        pyglet.clock.schedule_interval(self.draw_frame, 1.0 / 60)
        pyglet.clock.schedule_interval(self._update_bench, 1.0)

    def close(self):
        self.halt()
        super().close()

    def halt(self):
        if not self.halted:
            self.halted = True
            pyglet.clock.unschedule(self._cpu_tick)
            pyglet.clock.unschedule(self._timer_tick)
            pyglet.clock.unschedule(self.draw_frame)
            pyglet.clock.unschedule(self._update_bench)

    # ---- CPU cycle ----
    def _cpu_tick(self, dt):
        if self.halted:
            return
        # catch up on however many instructions this interval covers
        self._cycle_budget += dt * self.config.cpu_hz
        cycles = int(self._cycle_budget)
        self._cycle_budget -= cycles
        try:
            for _ in range(cycles):
                self.vm.step()
                self._cps_counter += 1
        except Chip8Error as e:
            logger.info("Emulation halted: %s", e)
            self.close()

    # ---- timers ----
    def _timer_tick(self, dt):
        self.vm.tick()
        tone = self.vm.tone_enabled
        if tone != self.tone_on:
            self.tone_on = tone
            self.tone_label.text = "TONE" if tone else ""
            logger.debug("Tone %s", "on" if tone else "off")

    # ---- FPS / CPS ----
    def _update_bench(self, dt):
        now = pyglet.clock.get_default().time()
        elapsed = now - self._bench_time
        if elapsed >= 1.0:
            self.fps_label.text = f"FPS: {self._fps_counter / elapsed:.1f}"
            self.cps_label.text = f"Cycles/s: {self._cps_counter}"
            self._fps_counter = 0
            self._cps_counter = 0
            self._bench_time = now

    # ---- Drawing ----
    def draw_frame(self, dt):
        if self.vm.framebuffer.dirty:
            frame = self.vm.framebuffer.consume()
            scaled = render_frame(frame, self.scale, self.config.draw_grid)
            self.image.set_data('RGBA', self.width * 4, scaled.tobytes())
            self._fps_counter += 1

    def on_draw(self):
        self.clear()
        self.image.blit(0, 0)
        if self.config.show_hud:
            self.fps_label.draw()
            self.cps_label.draw()
        self.tone_label.draw()

    # ---- Input ----
    def on_key_press(self, symbol, modifiers):
        if symbol == key.ESCAPE:
            self.close()
            return pyglet.event.EVENT_HANDLED
        if symbol == key.F1:
            self.toggle_debug_log()
        if symbol in KEYMAP:
            self.vm.press(KEYMAP[symbol])

    def on_key_release(self, symbol, modifiers):
        if symbol in KEYMAP:
            self.vm.release(KEYMAP[symbol])

    def on_deactivate(self):
        # releases are lost while unfocused
        self.vm.keypad.release_all()

    def toggle_debug_log(self):
        pkg_logger = logging.getLogger("chip8vm")
        if pkg_logger.getEffectiveLevel() > logging.DEBUG:
            pkg_logger.setLevel(logging.DEBUG)
        else:
            pkg_logger.setLevel(self._base_level)
        logger.warning("Debug logging %s", "on" if pkg_logger.level == logging.DEBUG else "off")


def run(vm, config, caption="CHIP-8 Emulator"):
    window = Chip8Window(vm, config, caption=caption)
    pyglet.app.run()
    return window
