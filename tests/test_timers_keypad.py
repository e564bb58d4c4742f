import pytest

from chip8vm.keypad import InputLatch
from chip8vm.timers import TimerPair


class TestTimers:

    def test_default_start(self):
        timers = TimerPair()
        assert timers.delay == 255
        assert timers.sound == 255
        assert timers.tone_enabled

    def test_floor_at_zero(self):
        timers = TimerPair(0)
        timers.delay = 1
        timers.tick()
        timers.tick()
        assert timers.delay == 0
        assert timers.sound == 0
        assert not timers.tone_enabled


class TestInputLatch:

    def test_press_release(self):
        latch = InputLatch()
        latch.press(0xA)
        assert latch.is_pressed(0xA)
        assert latch.first_pressed() == 0xA
        latch.release(0xA)
        assert not latch.is_pressed(0xA)
        assert latch.first_pressed() is None

    @pytest.mark.parametrize("key", [-1, 16])
    def test_bad_index(self, key):
        with pytest.raises(ValueError):
            InputLatch().press(key)

    def test_register_value_past_keypad_is_not_pressed(self):
        assert not InputLatch().is_pressed(0x42)

    def test_latched_while_waiting(self):
        latch = InputLatch()
        assert latch.take_key() is None
        latch.begin_wait()
        latch.press(3)
        latch.press(1)
        latch.release(3)
        latch.release(1)
        assert latch.take_key() == 3
        assert not latch.awaiting

    def test_release_all(self):
        latch = InputLatch()
        latch.press(2)
        latch.press(9)
        latch.release_all()
        assert latch.first_pressed() is None
