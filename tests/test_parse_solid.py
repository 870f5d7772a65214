import math

import pytest

from rtscene.model import Cone, Cylinder, ObjectKind, Scene
from rtscene.parse_solid import parse_cone, parse_cylinder
from rtscene.reader import (
    BAD_COLOR,
    BAD_DIAMETER,
    BAD_ORIENTATION,
    MISSING,
    TOO_LONG,
    LineReader,
    ParseError,
)
from rtscene.vec3 import Vec3


def _parse(parser, text):
    scene = Scene()
    obj = parser(LineReader(text), scene)
    return scene, obj


def test_cylinder_basic_fields():
    scene, obj = _parse(parse_cylinder, " 1,2,3 0,1,0 4 10 255,0,255\n")
    assert obj.kind is ObjectKind.CYLINDER
    assert isinstance(obj.data, Cylinder)
    assert obj.data.pos == Vec3(1, 2, 3)
    assert obj.data.orientation == Vec3(0, 1, 0)
    assert obj.data.diameter == 4
    assert obj.data.radius == obj.data.diameter / 2
    assert obj.data.height == 10
    assert obj.data.color == Vec3(1, 0, 1)
    assert scene.objects == [obj]


def test_cylinder_orientation_normalised():
    _, obj = _parse(parse_cylinder, " 0,0,0 0.5,0.5,0 2 3 0,0,0")
    assert math.isclose(obj.data.orientation.length(), 1.0)
    assert math.isclose(obj.data.orientation.x, obj.data.orientation.y)


@pytest.mark.parametrize(
    "text, message",
    [
        (" 0,0,0 0,0,0 2 3 0,0,0", BAD_ORIENTATION),
        (" 0,0,0 0,2,0 2 3 0,0,0", BAD_ORIENTATION),
        (" 0,0,0 0,1,0 0 3 0,0,0", BAD_DIAMETER),
        (" 0,0,0 0,1,0 2 -1 0,0,0", BAD_DIAMETER),
        (" 0,0,0 0,1,0 2 3 256,0,0", BAD_COLOR),
        (" 0,0 0,1,0 2 3 0,0,0", MISSING),
        (" 0,0,0 0,1,0 2 3 0,0,0 junk", MISSING),
        (" 0,0,0 0,1,0 2 3 0,0,0 1 5,5,5 2 junk", TOO_LONG),
    ],
)
def test_cylinder_errors(text, message):
    with pytest.raises(ParseError, match=message.replace("[", r"\[").replace("]", r"\]")):
        _parse(parse_cylinder, text)


def test_cylinder_with_route():
    _, obj = _parse(parse_cylinder, " 1,1,1 0,1,0 2 3 0,0,0 1 5,5,5 -2\n")
    assert obj.waypoints == [Vec3(1, 1, 1), Vec3(5, 5, 5)]
    assert obj.speed == 2


def test_cone_radius_follows_height():
    scene, obj = _parse(parse_cone, " 0,0,0 0,0,1 8 6 0,255,0\n")
    assert obj.kind is ObjectKind.CONE
    assert isinstance(obj.data, Cone)
    assert obj.data.diameter == 8
    assert math.isclose(obj.data.radius, obj.data.height)
    assert obj.data.color == Vec3(0, 1, 0)
    assert scene.objects[0] is obj


def test_cone_frame_vectors():
    _, obj = _parse(parse_cone, " 0,0,0 0,1,0 1 1 0,0,0")
    assert obj.data.forward == Vec3(0, 0, 1)
    assert obj.data.right == Vec3(1, 0, 0)
    assert obj.data.up == Vec3(0, 1, 0)


def test_cone_error_not_added():
    scene = Scene()
    with pytest.raises(ParseError):
        parse_cone(LineReader(" 0,0,0 0,1,0 1 0 0,0,0"), scene)
    assert scene.objects == []