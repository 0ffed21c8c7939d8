"""Integer parabola used for jump arcs."""


class Parabola:
    """Discretised parabolic height over time.

    value(t) = 4 * peak * t * (duration - t) / duration**2, floored, so it is
    0 at both ends and close to `peak` at duration / 2. Only integer
    arithmetic is used, which keeps replays exact.
    """

    __slots__ = ("peak", "duration", "time", "_value")

    def __init__(self, peak: int, duration: int) -> None:
        if duration <= 0:
            raise ValueError(f"Parabola duration must be positive, got {duration}")
        if peak < 0:
            raise ValueError(f"Parabola peak must not be negative, got {peak}")

        self.peak = peak
        self.duration = duration
        self.time = 0
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    @property
    def finished(self) -> bool:
        return self.time >= self.duration

    def step(self) -> None:
        self.time += 1
        self._value = self._calc_value()

    def copy(self) -> 'Parabola':
        clone = Parabola(self.peak, self.duration)
        clone.time = self.time
        clone._value = self._value
        return clone

    def _calc_value(self) -> int:
        if self.time >= self.duration:
            return 0

        a = 4 * self.peak
        b = 4 * self.peak * self.duration
        return (b * self.time - a * self.time * self.time) // (self.duration * self.duration)

    def __repr__(self) -> str:
        return f"Parabola(peak={self.peak}, duration={self.duration}, time={self.time}, value={self._value})"
