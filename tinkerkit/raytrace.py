"""Writing colours as PPM text and rendering a simple gradient image."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Optional, Sequence, TextIO

from tinkerkit.vec3 import Vec3

Color = Vec3

_U64_MAX = (1 << 64) - 1
_SCALE = 255.999


def _to_u64(x: float) -> int:
    """Convert a float to an unsigned 64-bit integer, saturating at the bounds."""
    if math.isnan(x) or x <= 0:
        return 0
    if x >= _U64_MAX:
        return _U64_MAX
    return int(x)


def _ratio(i: int, n: int) -> float:
    denominator = float(n) - 1.0
    if denominator == 0:
        return math.nan if i == 0 else math.inf
    return i / denominator


def write_color(f: TextIO, pixel_color: Color) -> None:
    """Write a colour with components in ``[0, 1]`` as an ``r g b`` line."""
    r, g, b = (_to_u64(_SCALE * c) for c in pixel_color)
    f.write(f"{r} {g} {b}\n")


def render_gradient(
    out: TextIO,
    width: int = 256,
    height: int = 256,
    progress: Optional[TextIO] = None,
) -> None:
    """Write a plain PPM image fading red left to right and green top to bottom."""
    out.write(f"P3\n{width} {height}\n255\n")
    for j in range(height):
        if progress is not None:
            progress.write(f"Scanlines remaining: {height - j}\n")
        for i in range(width):
            write_color(out, Color(_ratio(i, width), _ratio(j, height), 0.0))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the gradient to standard output, reporting progress on standard error."""
    parser = argparse.ArgumentParser(description="Render a gradient as a PPM image.")
    parser.add_argument("width", nargs="?", type=int, default=256)
    parser.add_argument("height", nargs="?", type=int, default=256)
    args = parser.parse_args(argv)
    render_gradient(sys.stdout, args.width, args.height, sys.stderr)
    sys.stderr.write("Done!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())