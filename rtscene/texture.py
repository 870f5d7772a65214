"""Procedural surface textures: plane checkerboard and sphere bump mapping."""

from __future__ import annotations

import math

from rtscene.model import EPSILON, HitPoint
from rtscene.noise import perlin_noise
from rtscene.vec3 import Vec3

SCALE = 10
NOISE_DENSITY = 20.0
BUMP_STRENGTH = 0.2


def checkerboard_plane(hit: HitPoint) -> Vec3:
    """Colour of a checkerboard plane at the hit point.

    Odd squares use the inverted plane colour.
    """
    plane = hit.object.data
    local = hit.p - plane.origin
    ref = Vec3(0, 1, 0) if abs(plane.normal.y) < 0.99 else Vec3(1, 0, 0)
    u = ref.cross(plane.normal).normalized()
    v = plane.normal.cross(u).normalized()
    cu = math.floor(local.dot(u) / SCALE)
    cv = math.floor(local.dot(v) / SCALE)
    if (cu + cv) % 2:
        c = plane.color
        return Vec3(1 - c.x, 1 - c.y, 1 - c.z)
    return plane.color


def bump_map_sphere(hit: HitPoint) -> Vec3:
    """Sphere normal perturbed by the gradient of Perlin noise."""
    sphere = hit.object.data
    offset = hit.p - sphere.origin
    p = offset / sphere.radius * NOISE_DENSITY
    normal = offset.normalized()
    e = EPSILON
    grad = Vec3(
        perlin_noise(Vec3(p.x + e, p.y, p.z)) - perlin_noise(Vec3(p.x - e, p.y, p.z)),
        perlin_noise(Vec3(p.x, p.y + e, p.z)) - perlin_noise(Vec3(p.x, p.y - e, p.z)),
        perlin_noise(Vec3(p.x, p.y, p.z + e)) - perlin_noise(Vec3(p.x, p.y, p.z - e)),
    ).normalized()
    return (normal + grad * BUMP_STRENGTH).normalized()