"""A direct (quadratic-time) discrete Fourier transform."""

from __future__ import annotations

import math
from typing import Iterable

TAU = math.pi * 2.0


def my_dft(samples: Iterable[float]) -> list[tuple[float, float]]:
    """Transform time-domain samples into ``(amplitude, phase)`` per frequency.

    Only the lower half of the spectrum (``len(samples) // 2`` bins) is returned.
    """
    samples = list(samples)
    n = len(samples)
    result: list[tuple[float, float]] = []
    for f in range(n >> 1):
        basis = [
            (math.sin(TAU * f * x / n), math.cos(TAU * f * x / n)) for x in range(n)
        ]
        mag_s = sum(s * s for s, _ in basis) or 1.0
        mag_c = sum(c * c for _, c in basis) or 1.0
        dot_s = sum(x * (s / mag_s) for (s, _), x in zip(basis, samples))
        dot_c = sum(x * (c / mag_c) for (_, c), x in zip(basis, samples))
        amplitude = math.sqrt(dot_s * dot_s + dot_c * dot_c)
        phase = math.atan2(dot_c, dot_s)
        result.append((amplitude, phase))
    return result