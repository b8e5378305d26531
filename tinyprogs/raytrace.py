"""A minimal ray caster that draws a sphere as ASCII art."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """A point or direction in three dimensions."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def dot(self, other: Vector) -> float:
        """Return the scalar product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def scale(self, factor: float) -> Vector:
        """Return this vector multiplied by ``factor``."""
        return Vector(self.x * factor, self.y * factor, self.z * factor)


@dataclass(frozen=True)
class Sphere:
    """A sphere given by its centre and radius."""

    pos: Vector
    radius: float


@dataclass(frozen=True)
class Ray:
    """A half-line from ``start`` heading along ``dir``."""

    start: Vector
    dir: Vector


def intersects(ray: Ray, sphere: Sphere) -> bool:
    """Return True if the line of ``ray`` meets ``sphere`` at least once."""
    a = ray.dir.dot(ray.dir)
    dist = ray.start - sphere.pos
    b = 2 * ray.dir.dot(dist)
    c = dist.dot(dist) - sphere.radius * sphere.radius
    return b * b - 4 * a * c >= 0


def render_ascii(size: int = 40) -> str:
    """Cast one ray per cell of a ``size`` by ``size`` grid toward a fixed sphere.

    Each hit is drawn as '++' and each miss as '--'.
    """
    sphere = Sphere(Vector(20, 20, 20), 10)
    direction = Vector(0, 0, 1)
    lines = (
        "".join(
            "++" if intersects(Ray(Vector(x, y, 0), direction), sphere) else "--"
            for x in range(size)
        )
        for y in range(size)
    )
    return "".join(line + "\n" for line in lines)


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"size must not be negative: {text}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Write the ASCII picture of the sphere to standard output."""
    parser = argparse.ArgumentParser(
        prog="raytrace", description="Draw a sphere as ASCII art."
    )
    parser.add_argument(
        "size",
        nargs="?",
        type=_non_negative,
        default=40,
        help="width and height of the grid in cells (default: 40)",
    )
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    sys.stdout.write(render_ascii(args.size))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())