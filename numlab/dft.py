"""Sampled sine waves and discrete Fourier transform bins."""

from __future__ import annotations

import argparse
import cmath
import math
from typing import Sequence

DEFAULT_FREQUENCY = 440.0
DEFAULT_SAMPLE_RATE = 48000.0
DEFAULT_COUNT = 256
DEFAULT_ROWS = 20000
PROBE_BINS = (420.0, 430.0, 440.0, 445.0, 455.0, 1000.0)


def sine_samples(freq: float, sample_rate: float, count: int) -> list[float]:
    """Return ``count`` samples of sin(2*pi*freq*t) taken at ``sample_rate``."""
    if sample_rate <= 0:
        raise ValueError(f"sample_rate must be positive, got {sample_rate}")
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    dt = 1.0 / sample_rate
    return [math.sin(2 * math.pi * freq * i * dt) for i in range(count)]


def dft_bin(freq: float, samples: Sequence[float]) -> complex:
    """Return the DFT of ``samples`` at bin ``freq``, N being the sample count."""
    size = len(samples)
    if size == 0:
        raise ValueError("samples must not be empty")
    return sum(
        (x * cmath.exp(-2j * math.pi * freq * n / size) for n, x in enumerate(samples)),
        0j,
    )


def spectrum(
    samples: Sequence[float], rows: int = DEFAULT_ROWS, terms: int | None = None
) -> list[complex]:
    """Return the partial DFT for bins 0..rows, summing the first ``terms`` samples.

    ``terms`` defaults to a quarter of the samples; N is always the full count.
    """
    size = len(samples)
    if size == 0:
        raise ValueError("samples must not be empty")
    if rows < 0:
        raise ValueError(f"rows must be non-negative, got {rows}")
    if terms is None:
        terms = size // 4
    if not 0 <= terms <= size:
        raise ValueError(f"terms must lie in 0..{size}, got {terms}")
    head = samples[:terms]
    step = -2j * math.pi / size
    return [
        sum((x * cmath.exp(step * f * k) for k, x in enumerate(head)), 0j)
        for f in range(rows + 1)
    ]


def _format_complex(z: complex) -> str:
    return f"({z.real:g},{z.imag:g})"


def main(argv: list[str] | None = None) -> int:
    """Print the sample sum and a few DFT bins of a sampled sine wave."""
    parser = argparse.ArgumentParser(description="Probe DFT bins of a sine.")
    parser.add_argument("--frequency", type=float, default=DEFAULT_FREQUENCY)
    parser.add_argument("--sample-rate", type=float, default=DEFAULT_SAMPLE_RATE)
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    args = parser.parse_args(argv)

    samples = sine_samples(args.frequency, args.sample_rate, args.count)
    print(f"sum_of_samps: {sum(samples):g}")

    for k in PROBE_BINS:
        total = dft_bin(k, samples)
        print(f"_little k: {_format_complex(complex(k))}")
        print(f"summation: {_format_complex(total)}")
        print(f"magnitude: {abs(total):g}")
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())