"""Parsers for light, sphere and plane lines of a scene description."""

from __future__ import annotations

from rtscene.model import Light, ObjectKind, Plane, Scene, SceneObject, Sphere
from rtscene.reader import (
    BAD_COLOR,
    BAD_DIAMETER,
    BAD_LIGHT_RATIO,
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


def _read_color(reader: LineReader) -> Vec3:
    color = reader.read_vec3()
    if not in_range(color, 255, 0):
        raise ParseError(BAD_COLOR)
    return color / 255.0


def _read_number(reader: LineReader) -> float:
    if not reader.at_number():
        raise ParseError(MISSING)
    return reader.read_float()


def _read_flag(reader: LineReader) -> bool | None:
    ch = reader.peek()
    if ch in ("t", "f"):
        reader.pos += 1
        return ch == "t"
    return None


def _finish(reader: LineReader) -> None:
    reader.skip_space()
    if not reader.at_end():
        raise ParseError(TOO_LONG)


def parse_light(reader: LineReader, scene: Scene) -> Light:
    """Read 'position brightness [color]' and add the light to the scene."""
    light = Light()
    reader.skip_space()
    light.origin = reader.read_vec3()
    reader.skip_space()
    light.brightness = _read_number(reader)
    if not 0 <= light.brightness <= 1:
        raise ParseError(BAD_LIGHT_RATIO)
    reader.skip_space()
    if reader.at_end():
        light.color = Vec3(255.0, 255.0, 255.0)
    else:
        light.color = _read_color(reader)
    scene.lights.append(light)
    _finish(reader)
    return light


def parse_sphere(reader: LineReader, scene: Scene) -> SceneObject:
    """Read 'centre diameter color [t|f] [route]' and add the sphere."""
    sphere = Sphere()
    reader.skip_space()
    sphere.origin = reader.read_vec3()
    reader.skip_space()
    diameter = _read_number(reader)
    if diameter <= 0:
        raise ParseError(BAD_DIAMETER)
    sphere.radius = diameter / 2
    reader.skip_space()
    sphere.color = _read_color(reader)
    reader.skip_space()
    flag = _read_flag(reader)
    if flag is not None:
        sphere.bump = flag
    obj = SceneObject(ObjectKind.SPHERE, sphere)
    reader.skip_space()
    if not reader.at_end():
        read_motion(reader, obj)
    scene.objects.append(obj)
    return obj


def parse_plane(reader: LineReader, scene: Scene) -> SceneObject:
    """Read 'point normal color [t|f] [route]' and add the plane."""
    plane = Plane()
    reader.skip_space()
    plane.origin = reader.read_vec3()
    reader.skip_space()
    normal = reader.read_vec3()
    if not in_range(normal, 1, -1) or not direction_is_valid(normal):
        raise ParseError(BAD_ORIENTATION)
    plane.normal = normal.normalized()
    plane.forward = Vec3(0.0, 0.0, 1.0)
    plane.right = Vec3(1.0, 0.0, 0.0)
    plane.up = Vec3(0.0, 1.0, 0.0)
    reader.skip_space()
    plane.color = _read_color(reader)
    reader.skip_space()
    flag = _read_flag(reader)
    if flag is not None:
        plane.checkerboard = flag
    obj = SceneObject(ObjectKind.PLANE, plane)
    reader.skip_space()
    if not reader.at_end():
        read_motion(reader, obj)
    scene.objects.append(obj)
    _finish(reader)
    return obj