from .config import KEY_COUNT

# Key layout of the original COSMAC VIP hex keypad:
#   1 2 3 C
#   4 5 6 D
#   7 8 9 E
#   A 0 B F


class Keypad:
    """Latched state of the 16 logical keys.

    The host overwrites the whole latch once per frame; instructions only
    read it.
    """

    def __init__(self):
        self.keys = [False] * KEY_COUNT

    def latch(self, snapshot):
        snapshot = [bool(k) for k in snapshot]
        if len(snapshot) != KEY_COUNT:
            raise ValueError("expected %d key states, got %d" % (KEY_COUNT, len(snapshot)))
        self.keys = snapshot

    def is_down(self, key):
        return self.keys[key & 0xF]

    def first_down(self):
        """Lowest-numbered key held down, or None."""
        for i, down in enumerate(self.keys):
            if down:
                return i
        return None
