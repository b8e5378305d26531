"""A ray tracer with diffuse lighting, shadows and reflections, writing PPM images."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass

from tinyprogs.raytrace import Ray, Vector

SCALE = 10
WIDTH = 800 // SCALE
HEIGHT = 600 // SCALE
_MAX_LEVEL = 15
_FAR = 20000.0


@dataclass(frozen=True)
class Colour:
    """Red, green and blue intensities."""

    red: float
    green: float
    blue: float


@dataclass(frozen=True)
class Material:
    """Diffuse colour and reflectivity of a surface."""

    diffuse: Colour
    reflection: float


@dataclass(frozen=True)
class Light:
    """A point light source."""

    pos: Vector
    intensity: Colour


@dataclass(frozen=True)
class SceneSphere:
    """A sphere made of a material."""

    pos: Vector
    radius: float
    material: Material


def _single(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def fast_sqrt(x: float) -> float:
    """Approximate the square root with a bit-level guess and two Babylonian steps."""
    x = _single(x)
    (bits,) = struct.unpack("<i", struct.pack("<f", x))
    bits = (1 << 29) + (bits >> 1) - (1 << 22)
    (u,) = struct.unpack("<f", struct.pack("<i", bits))
    u = _single(u + _single(x / u))
    return _single(_single(0.25 * u) + _single(x / u))


def intersect_distance(ray: Ray, sphere, limit: float) -> float | None:
    """Return the distance to the nearer hit of ``ray`` on ``sphere``.

    None is returned if there is no hit, or if the hit is not beyond
    0.001 and closer than ``limit``.
    """
    a = ray.dir.dot(ray.dir)
    dist = ray.start - sphere.pos
    b = 2 * ray.dir.dot(dist)
    c = dist.dot(dist) - sphere.radius * sphere.radius
    discr = b * b - 4 * a * c
    if discr < 0:
        return None
    root = fast_sqrt(discr)
    nearest = min((-b + root) / 2, (-b - root) / 2)
    if 0.001 < nearest < limit:
        return nearest
    return None


def default_scene() -> tuple[list[SceneSphere], list[Light]]:
    """Return the three coloured spheres and three lights of the standard scene."""
    red = Material(Colour(1, 0, 0), 0.2)
    green = Material(Colour(0, 1, 0), 0.5)
    blue = Material(Colour(0, 0, 1), 0.9)
    spheres = [
        SceneSphere(Vector(200 // SCALE, 300 // SCALE, 0), 100 // SCALE, red),
        SceneSphere(Vector(400 // SCALE, 400 // SCALE, 0), 100 // SCALE, green),
        SceneSphere(Vector(500 // SCALE, 140 // SCALE, 0), 100 // SCALE, blue),
    ]
    lights = [
        Light(Vector(0, 240 // SCALE, -100 // SCALE), Colour(1, 1, 1)),
        Light(Vector(3200 // SCALE, 3000 // SCALE, -1000 // SCALE), Colour(0.6, 0.7, 1)),
        Light(Vector(600 // SCALE, 0, -100 // SCALE), Colour(0.3, 0.5, 1)),
    ]
    return spheres, lights


def _trace(ray: Ray, spheres: list[SceneSphere], lights: list[Light]) -> tuple[float, float, float]:
    red = green = blue = 0.0
    coef = 1.0
    level = 0
    while True:
        distance = _FAR
        hit: SceneSphere | None = None
        for sphere in spheres:
            found = intersect_distance(ray, sphere, distance)
            if found is not None:
                distance, hit = found, sphere
        if hit is None:
            break
        point = ray.start + ray.dir.scale(distance)
        normal = point - hit.pos
        length_sq = normal.dot(normal)
        if length_sq == 0:
            break
        normal = normal.scale(1.0 / fast_sqrt(length_sq))
        material = hit.material
        for light in lights:
            towards = light.pos - point
            if normal.dot(towards) <= 0.0:
                continue
            span = fast_sqrt(towards.dot(towards))
            if span <= 0.0:
                continue
            light_ray = Ray(point, towards.scale(1 / span))
            if any(intersect_distance(light_ray, s, span) is not None for s in spheres):
                continue
            lambert = light_ray.dir.dot(normal) * coef
            red += lambert * light.intensity.red * material.diffuse.red
            green += lambert * light.intensity.green * material.diffuse.green
            blue += lambert * light.intensity.blue * material.diffuse.blue
        coef *= material.reflection
        reflect = 2.0 * ray.dir.dot(normal)
        ray = Ray(point, ray.dir - normal.scale(reflect))
        level += 1
        if not (coef > 0.0 and level < _MAX_LEVEL):
            break
    return red, green, blue


def _channel(value: float) -> int:
    return int(max(0.0, min(value * 255.0, 255.0)))


def render(width: int = WIDTH, height: int = HEIGHT, scene=None) -> bytes:
    """Render the scene as raw RGB bytes, one row after another."""
    spheres, lights = scene if scene is not None else default_scene()
    direction = Vector(0, 0, 1)
    pixels = bytearray()
    for y in range(height):
        for x in range(width):
            colour = _trace(Ray(Vector(x, y, -2000), direction), spheres, lights)
            pixels.extend(_channel(c) for c in colour)
    return bytes(pixels)


def write_ppm(path, pixels: bytes, width: int, height: int) -> None:
    """Write raw RGB bytes as a binary PPM file."""
    if len(pixels) != 3 * width * height:
        raise ValueError(
            f"expected {3 * width * height} bytes for a {width}x{height} image, got {len(pixels)}"
        )
    with open(path, "wb") as handle:
        handle.write(f"P6 {width} {height} 255\n".encode("ascii"))
        handle.write(bytes(pixels))


def main(argv: list[str] | None = None) -> int:
    """Render the default scene to a PPM file (image.ppm unless a path is given)."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "image.ppm"
    write_ppm(path, render(), WIDTH, HEIGHT)
    print(f"complete! image in {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())