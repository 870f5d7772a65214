"""Automatic movement of objects along their waypoint routes."""

from __future__ import annotations

from rtscene.model import Scene, SceneObject
from rtscene.vec3 import Vec3


def point_close(
    target: Vec3, current: Vec3, obj: SceneObject, delta_time: float
) -> bool:
    """Whether current has reached target, or the next step would not get closer."""
    offset = obj.direction * (obj.speed * delta_time)
    next_pos = obj.origin() + offset
    dist_now = (target - current).squared_length()
    dist_next = (target - next_pos).squared_length()
    return dist_now < 0.5 or dist_next >= dist_now


def direction_to_target(obj: SceneObject) -> Vec3:
    """Unit vector from the object towards its current waypoint."""
    return (obj.waypoints[obj.target] - obj.origin()).normalized()


def step(obj: SceneObject, delta_time: float) -> None:
    """Advance the object towards its waypoint without overshooting it."""
    offset = obj.direction * (obj.speed * delta_time)
    origin = obj.origin()
    target = obj.waypoints[obj.target]
    if offset.squared_length() >= (origin - target).squared_length():
        obj.set_origin(target)
    else:
        obj.set_origin(origin + offset)


def move_objects(scene: Scene) -> None:
    """Move every object that has a route by one frame of scene.delta_time."""
    for obj in scene.objects:
        if len(obj.waypoints) < 2:
            continue
        if point_close(obj.waypoints[obj.target], obj.origin(), obj, scene.delta_time):
            obj.target = (obj.target + 1) % len(obj.waypoints)
            obj.direction = direction_to_target(obj)
        step(obj, scene.delta_time)