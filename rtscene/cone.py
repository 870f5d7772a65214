"""Ray intersection and normals for capped 45-degree cones."""

from __future__ import annotations

import math
from typing import Optional

from rtscene.model import EPSILON, Cone, HitPoint, Ray, SceneObject
from rtscene.vec3 import Vec3

_SIDE = 0
_BASE = 1


def _on_side(ray: Ray, cone: Cone, t: float, closest: float) -> bool:
    if not (EPSILON < t < closest):
        return False
    height = (ray.at(t) - cone.pos).dot(cone.orientation)
    return 0 <= height <= cone.height


def _base_t(ray: Ray, cone: Cone, closest: float) -> Optional[float]:
    centre = cone.pos + cone.orientation * cone.height
    denom = ray.direction.dot(cone.orientation)
    if abs(denom) <= EPSILON:
        return None
    t = (centre - ray.origin).dot(cone.orientation) / denom
    if not (EPSILON < t < closest):
        return None
    if (ray.at(t) - centre).squared_length() > cone.radius * cone.radius:
        return None
    return t


def hit_cone(ray: Ray, obj: SceneObject) -> HitPoint:
    """Nearest intersection of a ray with the cone in obj.

    hit_type is 0 for the lateral surface and 1 for the base cap.
    """
    cone = obj.data
    d = ray.direction
    co = ray.origin - cone.pos
    co_d = co.dot(cone.orientation)
    d_cod = d.dot(cone.orientation)
    a = d.dot(d) - 2 * d_cod * d_cod
    b = 2 * (d.dot(co) - 2 * d_cod * co_d)
    c = co.dot(co) - 2 * co_d * co_d

    closest = math.inf
    hit = HitPoint()
    discriminant = b * b - 4 * a * c
    if discriminant >= 0 and abs(a) > EPSILON:
        root = math.sqrt(discriminant)
        for t in ((-b - root) / (2 * a), (-b + root) / (2 * a)):
            if _on_side(ray, cone, t, closest):
                closest = t
                hit = HitPoint(ray, t, ray.at(t), obj, _SIDE)
    t_cap = _base_t(ray, cone, closest)
    if t_cap is not None:
        hit = HitPoint(ray, t_cap, ray.at(t_cap), obj, _BASE)
    return hit


def cone_normal(hit: HitPoint) -> Vec3:
    """Normal at the hit point, facing against the incoming ray on the side."""
    cone = hit.object.data
    if hit.hit_type == _BASE:
        return cone.orientation * -1.0
    co_p = hit.p - cone.pos
    m = co_p.dot(cone.orientation)
    normal = co_p - cone.orientation * m * 2
    if hit.ray.direction.dot(normal) > 0:
        normal = normal * -1
    return normal.normalized()