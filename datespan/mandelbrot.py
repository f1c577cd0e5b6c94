"""Text rendering of the Mandelbrot set."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

_PALETTE = " .,-~:;=!*+#$%&X@"


def escape_count(cx: float, cy: float, max_count: int = 16) -> int:
    """Iterations of z = z^2 + c, from z = 0, until |z| >= 2 or ``max_count``."""
    zx = zy = 0.0
    count = 0
    while zx * zx + zy * zy < 4 and count < max_count:
        zx, zy = zx * zx - zy * zy + cx, 2 * zx * zy + cy
        count += 1
    return count


def mandelbrot_grid(
    width: int = 100,
    height: int = 100,
    max_count: int = 16,
    left: float = -2.0,
    top: float = 1.25,
    xside: float = 2.5,
    yside: float = -2.5,
) -> list[list[int]]:
    """Escape counts for a ``height`` x ``width`` grid of points in the plane."""
    if width < 1 or height < 1:
        raise ValueError("width and height must be positive")
    xscale = xside / width
    yscale = yside / height
    return [
        [escape_count(x * xscale + left, y * yscale + top, max_count) for x in range(1, width + 1)]
        for y in range(1, height + 1)
    ]


def render(grid: Sequence[Sequence[int]]) -> str:
    """Draw a grid of counts as characters inside a rectangular frame."""
    width = max((len(row) for row in grid), default=0)
    last = len(_PALETTE) - 1
    border = "+" + "-" * width + "+"
    body = [
        "|" + "".join(_PALETTE[min(max(count, 0), last)] for count in row).ljust(width) + "|"
        for row in grid
    ]
    return "\n".join([border, *body, border])


def main(argv=None) -> int:
    """Print the Mandelbrot set to standard output."""
    parser = argparse.ArgumentParser(prog="mandelbrot", description="Draw the Mandelbrot set")
    parser.add_argument("--width", type=int, default=100)
    parser.add_argument("--height", type=int, default=100)
    parser.add_argument("--max-count", type=int, default=16)
    parser.add_argument("--left", type=float, default=-2.0)
    parser.add_argument("--top", type=float, default=1.25)
    parser.add_argument("--xside", type=float, default=2.5)
    parser.add_argument("--yside", type=float, default=-2.5)
    args = parser.parse_args(argv)
    try:
        grid = mandelbrot_grid(
            args.width, args.height, args.max_count, args.left, args.top, args.xside, args.yside
        )
    except ValueError as exc:
        parser.error(str(exc))
    print(render(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())