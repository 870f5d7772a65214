import pytest

from rtscene.model import ObjectKind, SceneObject, Sphere
from rtscene.reader import (
    LineReader,
    ParseError,
    direction_is_valid,
    in_range,
    read_motion,
)
from rtscene.vec3 import Vec3


def _sphere_at(origin):
    return SceneObject(ObjectKind.SPHERE, Sphere(origin=origin, radius=1.0))


def test_peek_and_at_end():
    reader = LineReader("ab")
    assert reader.peek() == "a"
    reader.pos = 2
    assert reader.peek() == ""
    assert reader.at_end()


def test_skip_space_stops_at_content():
    reader = LineReader(" \t\n x")
    reader.skip_space()
    assert reader.peek() == "x"


def test_at_number():
    assert LineReader("-1").at_number()
    assert LineReader(".5").at_number()
    assert not LineReader("x").at_number()
    assert not LineReader("").at_number()


def test_separator_ok_checks_following_character():
    assert LineReader(",3").separator_ok()
    assert not LineReader(",,").separator_ok()
    assert not LineReader(",").separator_ok()


def test_read_float_advances():
    reader = LineReader("-2.5,7")
    assert reader.read_float() == -2.5
    assert reader.peek() == ","


def test_read_float_leading_dot():
    assert LineReader(".5").read_float() == 0.5


def test_read_float_rejects_garbage():
    with pytest.raises(ParseError):
        LineReader("abc").read_float()


def test_read_int():
    reader = LineReader("12 x")
    assert reader.read_int() == 12
    assert reader.peek() == " "


def test_read_vec3():
    reader = LineReader("1,-2,3.5 rest")
    assert reader.read_vec3() == Vec3(1, -2, 3.5)
    assert reader.peek() == " "


def test_read_vec3_any_single_separator():
    assert LineReader("1;2;3").read_vec3() == Vec3(1, 2, 3)


@pytest.mark.parametrize("text", ["1,,2,3", "1,2", "x,1,2", "1,2,"])
def test_read_vec3_errors(text):
    with pytest.raises(ParseError):
        LineReader(text).read_vec3()


def test_in_range():
    assert in_range(Vec3(0, 1, -1), 1, -1)
    assert not in_range(Vec3(0, 1.1, 0), 1, -1)
    assert not in_range(Vec3(-0.1, 0, 0), 255, 0)


def test_direction_is_valid():
    assert direction_is_valid(Vec3(0, 0, 1))
    assert not direction_is_valid(Vec3(0, 0, 0))


def test_read_motion_route():
    obj = _sphere_at(Vec3(0, 0, 0))
    reader = LineReader("2 1,0,0 2,0,0 3")
    read_motion(reader, obj)
    assert obj.waypoints == [Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(2, 0, 0)]
    assert obj.speed == 3.0
    assert reader.at_end()


def test_read_motion_speed_is_absolute():
    obj = _sphere_at(Vec3(5, 5, 5))
    read_motion(LineReader("1 1,1,1 -4"), obj)
    assert obj.speed == 4.0
    assert obj.waypoints[0] == Vec3(5, 5, 5)


def test_read_motion_zero_count():
    obj = _sphere_at(Vec3(1, 2, 3))
    read_motion(LineReader("0"), obj)
    assert obj.waypoints == [Vec3(1, 2, 3)]
    assert obj.speed == 0.0


@pytest.mark.parametrize("text", ["-1 1,1,1 2", "2 1,1,1", "1 1,1,1", "1 x"])
def test_read_motion_errors(text):
    with pytest.raises(ParseError):
        read_motion(LineReader(text), _sphere_at(Vec3()))