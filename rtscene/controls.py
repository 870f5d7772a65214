"""Keyboard handling: moving the camera, the lights and the scene objects."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Optional

from rtscene.model import Cone, Cylinder, ObjectKind, Plane, Scene, SceneObject, Sphere
from rtscene.motion import direction_to_target
from rtscene.rotation import rotate_axis, rotate_x, rotate_z
from rtscene.vec3 import Vec3

SPEED = 20.0
ROTATE_SPEED = 90.0
OBJECT_ROTATE_DEG = 9.0


class Key(enum.Enum):
    """Keys the scene reacts to."""

    W = enum.auto()
    S = enum.auto()
    A = enum.auto()
    D = enum.auto()
    Q = enum.auto()
    Z = enum.auto()
    O = enum.auto()  # noqa: E741
    L = enum.auto()
    TAB = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    ESCAPE = enum.auto()
    OTHER = enum.auto()


class Action(enum.Enum):
    """What happened to a key."""

    RELEASE = enum.auto()
    PRESS = enum.auto()
    REPEAT = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A single keyboard event."""

    key: Key
    action: Action = Action.PRESS


_UNIT_STEPS = {
    Key.W: Vec3(0.0, 1.0, 0.0),
    Key.S: Vec3(0.0, -1.0, 0.0),
    Key.A: Vec3(1.0, 0.0, 0.0),
    Key.D: Vec3(-1.0, 0.0, 0.0),
    Key.Q: Vec3(0.0, 0.0, -1.0),
    Key.Z: Vec3(0.0, 0.0, 1.0),
}


def is_press_or_repeat(event: KeyEvent) -> bool:
    """Whether the key went down or is being held."""
    return event.action in (Action.PRESS, Action.REPEAT)


def _is_press(event: KeyEvent, key: Key) -> bool:
    return event.key is key and event.action is Action.PRESS


def _object_name(obj: Optional[SceneObject], with_cone: bool = True) -> str:
    if obj is None:
        return ""
    if obj.kind is ObjectKind.CONE and not with_cone:
        return ""
    return obj.kind.value


def camera_moves(scene: Scene, event: KeyEvent) -> bool:
    """Apply a key event in camera mode; return whether anything changed."""
    if _is_press(event, Key.O):
        obj = scene.current_object()
        if obj is None:
            return False
        scene.on_object = True
        scene.current_name = _object_name(obj)
        return True
    if _is_press(event, Key.L):
        scene.light_mode = True
        scene.current_name = "Light"
        return True
    if not is_press_or_repeat(event):
        return False

    cam = scene.camera
    angle = ROTATE_SPEED * scene.delta_time
    rotations = {
        Key.UP: (-angle, cam.right, "x"),
        Key.DOWN: (angle, cam.right, "x"),
        Key.RIGHT: (-angle, cam.up, "y"),
        Key.LEFT: (angle, cam.up, "y"),
    }
    if event.key in rotations:
        theta, axis, name = rotations[event.key]
        cam.axis = name
        cam.direction = rotate_axis(cam.direction, axis, theta)
        return True

    speed = SPEED * scene.delta_time
    moves = {
        Key.W: cam.up * -speed,
        Key.S: cam.up * speed,
        Key.A: cam.right * -speed,
        Key.D: cam.right * speed,
        Key.Q: cam.forward * speed,
        Key.Z: cam.forward * -speed,
    }
    if event.key in moves:
        cam.origin = cam.origin + moves[event.key]
        return True
    return False


def light_moves(scene: Scene, event: KeyEvent) -> bool:
    """Apply a key event in light mode; return whether anything changed."""
    if _is_press(event, Key.O):
        scene.on_object = True
        scene.light_mode = False
        scene.current_name = _object_name(scene.current_object(), with_cone=False)
        return True
    if _is_press(event, Key.L):
        scene.light_mode = False
        scene.current_name = "Camera"
        return True
    if not is_press_or_repeat(event) or not scene.lights:
        return False
    if event.key is Key.TAB:
        scene.light_index = (scene.light_index + 1) % len(scene.lights)
        scene.current_light().check = False
        return True
    if event.key in _UNIT_STEPS:
        light = scene.current_light()
        light.origin = light.origin + _UNIT_STEPS[event.key]
        return True
    return False


def object_to_light(scene: Scene) -> bool:
    """Leave object mode for light mode."""
    scene.on_object = False
    scene.light_mode = True
    scene.current_name = "Light"
    return True


def object_to_camera(scene: Scene) -> bool:
    """Leave object mode for camera mode."""
    scene.on_object = False
    scene.current_name = "Camera"
    return True


def _next_object(scene: Scene) -> None:
    scene.object_index = (scene.object_index + 1) % len(scene.objects)
    scene.current_name = _object_name(scene.current_object())


def _move_plane(plane: Plane, event: KeyEvent) -> bool:
    rotations = {
        Key.UP: (-OBJECT_ROTATE_DEG, plane.right),
        Key.DOWN: (OBJECT_ROTATE_DEG, plane.right),
        Key.RIGHT: (-OBJECT_ROTATE_DEG, plane.up),
        Key.LEFT: (OBJECT_ROTATE_DEG, plane.up),
    }
    if event.key in rotations:
        theta, axis = rotations[event.key]
        plane.normal = rotate_axis(plane.normal, axis, theta)
        return True
    if event.key in _UNIT_STEPS:
        plane.origin = plane.origin + _UNIT_STEPS[event.key]
        return True
    return False


def _move_sphere(sphere: Sphere, event: KeyEvent) -> bool:
    if event.key in _UNIT_STEPS:
        sphere.origin = sphere.origin + _UNIT_STEPS[event.key]
        return True
    return False


def _move_solid(solid: Cylinder | Cone, event: KeyEvent) -> bool:
    step = math.radians(OBJECT_ROTATE_DEG)
    rotations = {
        Key.UP: (rotate_x, step),
        Key.DOWN: (rotate_x, -step),
        Key.RIGHT: (rotate_z, step),
        Key.LEFT: (rotate_z, -step),
    }
    if event.key in rotations:
        rotate, theta = rotations[event.key]
        solid.orientation = rotate(solid.orientation, theta)
        return True
    if event.key in _UNIT_STEPS:
        solid.pos = solid.pos + _UNIT_STEPS[event.key]
        return True
    return False


def object_moves(scene: Scene, event: KeyEvent) -> bool:
    """Apply a key event in object mode; return whether the object changed."""
    if _is_press(event, Key.L):
        return object_to_light(scene)
    if _is_press(event, Key.O):
        return object_to_camera(scene)
    obj = scene.current_object()
    if obj is None:
        return False
    if _is_press(event, Key.TAB):
        _next_object(scene)
        return False
    if not is_press_or_repeat(event):
        return False
    if obj.kind is ObjectKind.PLANE:
        changed = _move_plane(obj.data, event)
    elif obj.kind is ObjectKind.SPHERE:
        changed = _move_sphere(obj.data, event)
    else:
        changed = _move_solid(obj.data, event)
    if changed and obj.waypoints:
        obj.direction = direction_to_target(obj)
    return changed


def handle_key(scene: Scene, event: KeyEvent) -> bool:
    """Dispatch a key event to the current mode.

    Escape raises SystemExit.
    """
    if _is_press(event, Key.ESCAPE):
        raise SystemExit(0)
    if not scene.on_object and not scene.light_mode:
        return camera_moves(scene, event)
    if scene.light_mode:
        return light_moves(scene, event)
    return object_moves(scene, event)