"""Park-Miller minimal standard pseudo-random numbers."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1


def do_rand(ctx: int) -> int:
    """Next value after state ``ctx``; it lies in [0, 0x7ffffffd] and is the new state."""
    x = (ctx & _MASK64) % 0x7FFFFFFE + 1
    hi, lo = divmod(x, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += 0x7FFFFFFF
    return x - 1


class ParkMiller:
    """A generator holding its own state."""

    def __init__(self, seed: int = 1) -> None:
        self.state = seed & _MASK64

    def rand(self) -> int:
        """Advance the state and return the new value."""
        self.state = do_rand(self.state)
        return self.state