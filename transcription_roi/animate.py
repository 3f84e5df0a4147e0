import math
from typing import Iterator


def ease_out_cubic(t: float) -> float:
    t = min(max(t, 0.0), 1.0)
    return 1 - (1 - t) ** 3


class AnimatedNumber:
    """Eased transition from the displayed value to a new target.

    Purely cosmetic: the target is whatever the calculator returned, the
    intermediate values are never fed back into a calculation.
    """

    def __init__(self, value: float = 0.0, duration_ms: float = 600):
        self.duration_ms = duration_ms
        self.start = value
        self.target = value
        self.displayed = value

    def retarget(self, end: float) -> None:
        # restart from wherever the display currently is, so a retarget mid-flight never jumps
        self.start = self.displayed
        self.target = end
        if not (math.isfinite(end) and math.isfinite(self.start)):
            self.start = end
            self.displayed = end

    def value_at(self, elapsed_ms: float) -> float:
        if self.duration_ms <= 0 or self.start == self.target:
            return self.target
        eased = ease_out_cubic(elapsed_ms / self.duration_ms)
        if eased >= 1:
            return self.target
        return self.start + (self.target - self.start) * eased

    def frames(self, count: int) -> Iterator[float]:
        count = max(int(count), 1)
        for i in range(1, count + 1):
            self.displayed = self.value_at(self.duration_ms * i / count)
            yield self.displayed

    def finish(self) -> float:
        self.displayed = self.target
        return self.displayed
