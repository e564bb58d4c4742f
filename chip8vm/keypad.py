import logging

from .constants import NUM_KEYS

logger = logging.getLogger(__name__)


class InputLatch:
    """State of the 16-key hex keypad.

    The input mapper calls :meth:`press` / :meth:`release` with keypad
    indices 0-15. ``FX0A`` uses :meth:`begin_wait` / :meth:`take_key` to
    block until a key is observed; the first key pressed while waiting is
    latched so a press and release between two steps is not lost.
    """

    def __init__(self):
        self.keys = [False] * NUM_KEYS
        self.awaiting = False
        self._latched = None

    def _check(self, key):
        if not 0 <= key < NUM_KEYS:
            raise ValueError("keypad index out of range: %r" % key)

    def press(self, key):
        self._check(key)
        self.keys[key] = True
        if self.awaiting and self._latched is None:
            self._latched = key

    def release(self, key):
        self._check(key)
        self.keys[key] = False

    def release_all(self):
        self.keys = [False] * NUM_KEYS

    def is_pressed(self, key):
        # VX can hold any byte; values past the keypad are never pressed
        return 0 <= key < NUM_KEYS and self.keys[key]

    def first_pressed(self):
        for i, down in enumerate(self.keys):
            if down:
                return i
        return None

    def begin_wait(self):
        if not self.awaiting:
            logger.debug("Waiting for key press")
        self.awaiting = True

    def take_key(self):
        """Return the key that ends a wait, or None if nothing was observed yet."""
        key = self._latched
        if key is None:
            key = self.first_pressed()
        if key is not None:
            if self.awaiting:
                logger.debug("Key 0x%X ends wait", key)
            self.awaiting = False
            self._latched = None
        return key
