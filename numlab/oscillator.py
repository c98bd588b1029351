"""A phase-accumulating sine oscillator and helpers for sampled time."""

from __future__ import annotations

import argparse
import math
from typing import Iterator

DEFAULT_FREQUENCY = 1.0
DEFAULT_SAMPLE_RATE = 256.0


class Oscillator:
    """A sine oscillator whose phase advances by 1/sample_rate per tick.

    The phase wraps back into [0, 1) by subtracting one once it reaches 1.
    """

    def __init__(
        self,
        frequency: float = DEFAULT_FREQUENCY,
        sample_rate: float = DEFAULT_SAMPLE_RATE,
    ) -> None:
        if sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {sample_rate}")
        self.frequency = float(frequency)
        self.sample_rate = float(sample_rate)
        self.dt = 1.0 / self.sample_rate
        self.phase = 0.0

    def tick(self) -> None:
        """Advance the phase by one sample period, wrapping at 1."""
        self.phase += self.dt
        if self.phase >= 1.0:
            self.phase -= 1.0

    def sin(self) -> float:
        """Return sin(2*pi*frequency*phase) at the current phase."""
        return math.sin(2 * math.pi * self.frequency * self.phase)

    def samples(self, count: int) -> Iterator[float]:
        """Yield ``count`` samples, ticking after each one."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        for _ in range(count):
            yield self.sin()
            self.tick()


def sin_over_interval(freq: float, upper: float, lower: float) -> float:
    """Return -cos(upper*a) + cos(lower*a) where a = (2/pi) / freq."""
    a = (2 / math.pi) / freq
    return -math.cos(upper * a) + math.cos(lower * a)


def time_elapsed(num_samples: float, sample_rate: float) -> float:
    """Return how much time ``num_samples`` samples span at ``sample_rate``."""
    if sample_rate == 0:
        raise ValueError("sample_rate must not be zero")
    return num_samples * (1.0 / sample_rate)


def main(argv: list[str] | None = None) -> int:
    """Print oscillator samples, or the interval report with ``--interval``."""
    parser = argparse.ArgumentParser(description="Generate sine samples.")
    parser.add_argument("--frequency", type=float, default=440.0)
    parser.add_argument("--sample-rate", type=float, default=48000.0)
    parser.add_argument("--count", type=int, default=256)
    parser.add_argument("--interval", action="store_true")
    args = parser.parse_args(argv)

    if args.interval:
        sample_rate = 1000.0
        total = time_elapsed(5.0, sample_rate)
        result = sin_over_interval(440.0, 1.0 / sample_rate, 0.0)
        print(f"total_time: {total:g}")
        print(f"the : {result:g}")
        return 0

    osc = Oscillator(args.frequency, args.sample_rate)
    for value in osc.samples(args.count):
        print(f"{value:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())