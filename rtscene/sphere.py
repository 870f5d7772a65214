"""Ray intersection and shading helpers for spheres."""

from __future__ import annotations

import math

from rtscene.model import EPSILON, HitPoint, Light, Ray, SceneObject, Sphere
from rtscene.texture import bump_map_sphere
from rtscene.vec3 import Vec3


def hit_sphere(ray: Ray, obj: SceneObject) -> HitPoint:
    """Nearest intersection of a unit-direction ray with the sphere in obj.

    Only the near root is considered, so a ray starting inside misses.
    """
    sphere = obj.data
    oc = ray.origin - sphere.origin
    b = -2.0 * oc.dot(ray.direction)
    c = -4.0 * (oc.squared_length() - sphere.squared_radius)
    discriminant = b * b + c
    if discriminant < 0:
        return HitPoint()
    t = (b - math.sqrt(discriminant)) * 0.5
    if t > EPSILON:
        return HitPoint(ray, t, ray.at(t), obj, 0)
    return HitPoint()


def sphere_normal(hit: HitPoint) -> Vec3:
    """Outward normal at the hit point, bump-mapped when the sphere asks for it."""
    sphere = hit.object.data
    if sphere.bump:
        return bump_map_sphere(hit)
    return (hit.p - sphere.origin).normalized()


def light_in_sphere(light: Light, sphere: Sphere) -> bool:
    """Whether the light lies strictly inside the sphere."""
    return (light.origin - sphere.origin).squared_length() < sphere.squared_radius