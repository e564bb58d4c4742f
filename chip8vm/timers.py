from .constants import TIMER_DEFAULT


class TimerPair:
    """Delay and sound countdown timers, decremented by an external 60Hz tick."""

    def __init__(self, initial=TIMER_DEFAULT):
        self.delay = initial & 0xFF
        self.sound = initial & 0xFF

    def tick(self):
        # Never go below 0
        if self.delay > 0:
            self.delay -= 1
        if self.sound > 0:
            self.sound -= 1

    @property
    def tone_enabled(self):
        return self.sound > 0
