"""Rotations of vectors about coordinate axes and arbitrary axes."""

from __future__ import annotations

import math

from rtscene.vec3 import Vec3


def rotate_x(v: Vec3, theta: float) -> Vec3:
    """Rotate v about the X axis by theta radians."""
    c, s = math.cos(theta), math.sin(theta)
    return Vec3(v.x, v.y * c - v.z * s, v.y * s + v.z * c)


def rotate_z(v: Vec3, theta: float) -> Vec3:
    """Rotate v about the Z axis by theta radians."""
    c, s = math.cos(theta), math.sin(theta)
    return Vec3(v.x * c - v.y * s, v.x * s + v.y * c, v.z)


def rotate_axis(v: Vec3, axis: Vec3, angle_deg: float) -> Vec3:
    """Rotate v about an arbitrary axis by angle_deg degrees (Rodrigues' formula)."""
    angle = math.radians(angle_deg)
    axis = axis.normalized()
    c, s = math.cos(angle), math.sin(angle)
    return v * c + axis.cross(v) * s + axis * (axis.dot(v) * (1.0 - c))