"""The Park-Miller minimal standard pseudo-random generator."""

_MASK64 = (1 << 64) - 1


def do_rand(ctx):
    """Return the next value after state ctx; the value is also the new state.

    Computes (7^5 * x) mod (2^31 - 1) using Schrage's method, with the state
    first moved into [1, 0x7ffffffe] and the result into [0, 0x7ffffffd].
    """
    x = (ctx & _MASK64) % 0x7FFFFFFE + 1
    hi, lo = divmod(x, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += 0x7FFFFFFF
    return x - 1


class ParkMiller:
    """A stream of pseudo-random numbers from a seed."""

    def __init__(self, seed=1):
        self.state = seed & _MASK64

    def next(self):
        """Advance the generator and return the new value."""
        self.state = do_rand(self.state)
        return self.state

    def __iter__(self):
        while True:
            yield self.next()