"""Parsers for cylinder and cone lines of a scene description."""

from __future__ import annotations

import math

from rtscene.model import Cone, Cylinder, ObjectKind, Scene, SceneObject
from rtscene.reader import (
    BAD_COLOR,
    BAD_DIAMETER,
    BAD_ORIENTATION,
    MISSING,
    TOO_LONG,
    LineReader,
    ParseError,
    direction_is_valid,
    in_range,
    read_motion,
)
from rtscene.vec3 import Vec3


def _number(reader: LineReader) -> float:
    if not reader.at_number():
        raise ParseError(MISSING)
    return reader.read_float()


def _positive(reader: LineReader) -> float:
    value = _number(reader)
    if value <= 0:
        raise ParseError(BAD_DIAMETER)
    return value


def _orientation(reader: LineReader) -> Vec3:
    direction = reader.read_vec3()
    if not in_range(direction, 1, -1) or not direction_is_valid(direction):
        raise ParseError(BAD_ORIENTATION)
    return direction.normalized()


def _color(reader: LineReader) -> Vec3:
    color = reader.read_vec3()
    if not in_range(color, 255, 0):
        raise ParseError(BAD_COLOR)
    return color / 255.0


def _read_solid(reader: LineReader, solid: Cylinder | Cone) -> None:
    """Fill the fields shared by cylinders and cones."""
    reader.skip_space()
    solid.pos = reader.read_vec3()
    reader.skip_space()
    solid.orientation = _orientation(reader)
    reader.skip_space()
    solid.diameter = _positive(reader)
    solid.radius = solid.diameter / 2
    reader.skip_space()
    solid.height = _positive(reader)
    reader.skip_space()
    solid.color = _color(reader)
    solid.forward = Vec3(0.0, 0.0, 1.0)
    solid.right = Vec3(1.0, 0.0, 0.0)
    solid.up = Vec3(0.0, 1.0, 0.0)


def _finish(reader: LineReader, scene: Scene, obj: SceneObject) -> SceneObject:
    reader.skip_space()
    if not reader.at_end():
        read_motion(reader, obj)
    scene.objects.append(obj)
    reader.skip_space()
    if not reader.at_end():
        raise ParseError(TOO_LONG)
    return obj


def parse_cylinder(reader: LineReader, scene: Scene) -> SceneObject:
    """Read 'base axis diameter height color [route]' and add the cylinder."""
    cylinder = Cylinder()
    _read_solid(reader, cylinder)
    return _finish(reader, scene, SceneObject(ObjectKind.CYLINDER, cylinder))


def parse_cone(reader: LineReader, scene: Scene) -> SceneObject:
    """Read 'apex axis diameter height color [route]' and add the cone.

    The cone opens at 45 degrees, so its base radius follows from its height.
    """
    cone = Cone()
    _read_solid(reader, cone)
    cone.radius = cone.height * math.tan(math.pi / 4.0)
    return _finish(reader, scene, SceneObject(ObjectKind.CONE, cone))