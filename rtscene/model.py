"""Scene data: rays, hit records, shapes, lights, camera and the scene itself."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union

from rtscene.vec3 import Vec3

EPSILON = 1e-4


@dataclass(frozen=True)
class Ray:
    """A half-line starting at origin and heading along direction."""

    origin: Vec3
    direction: Vec3

    def at(self, t: float) -> Vec3:
        """Point reached after travelling t units along the ray."""
        return self.origin + self.direction * t


class ObjectKind(enum.Enum):
    """Kinds of renderable shapes."""

    SPHERE = "Sphere"
    PLANE = "Plane"
    CYLINDER = "Cylinder"
    CONE = "Cone"


@dataclass
class Sphere:
    """Sphere given by centre and radius."""

    origin: Vec3 = Vec3()
    radius: float = 0.0
    color: Vec3 = Vec3()
    bump: bool = False

    @property
    def squared_radius(self) -> float:
        return self.radius * self.radius


@dataclass
class Plane:
    """Infinite plane through origin with the given normal."""

    origin: Vec3 = Vec3()
    normal: Vec3 = Vec3(0.0, 1.0, 0.0)
    color: Vec3 = Vec3()
    checkerboard: bool = False
    forward: Vec3 = Vec3(0.0, 0.0, 1.0)
    right: Vec3 = Vec3(1.0, 0.0, 0.0)
    up: Vec3 = Vec3(0.0, 1.0, 0.0)


@dataclass
class Cylinder:
    """Finite cylinder with its base centre at pos, extending along orientation."""

    pos: Vec3 = Vec3()
    orientation: Vec3 = Vec3(0.0, 1.0, 0.0)
    diameter: float = 0.0
    radius: float = 0.0
    height: float = 0.0
    color: Vec3 = Vec3()
    forward: Vec3 = Vec3(0.0, 0.0, 1.0)
    right: Vec3 = Vec3(1.0, 0.0, 0.0)
    up: Vec3 = Vec3(0.0, 1.0, 0.0)


@dataclass
class Cone:
    """Right cone with apex at pos, opening along orientation, capped at height."""

    pos: Vec3 = Vec3()
    orientation: Vec3 = Vec3(0.0, 1.0, 0.0)
    diameter: float = 0.0
    radius: float = 0.0
    height: float = 0.0
    color: Vec3 = Vec3()
    forward: Vec3 = Vec3(0.0, 0.0, 1.0)
    right: Vec3 = Vec3(1.0, 0.0, 0.0)
    up: Vec3 = Vec3(0.0, 1.0, 0.0)


Shape = Union[Sphere, Plane, Cylinder, Cone]


@dataclass
class Light:
    """Point light."""

    origin: Vec3 = Vec3()
    brightness: float = 0.0
    color: Vec3 = Vec3(1.0, 1.0, 1.0)
    check: bool = False


@dataclass
class SceneObject:
    """A shape in the scene, with an optional route of waypoints it follows."""

    kind: ObjectKind
    data: Shape
    waypoints: list[Vec3] = field(default_factory=list)
    target: int = 0
    direction: Vec3 = Vec3()
    speed: float = 0.0

    def origin(self) -> Vec3:
        """Reference position of the shape (centre, base or apex)."""
        if isinstance(self.data, (Sphere, Plane)):
            return self.data.origin
        return self.data.pos

    def set_origin(self, position: Vec3) -> None:
        """Move the shape's reference position."""
        if isinstance(self.data, (Sphere, Plane)):
            self.data.origin = position
        else:
            self.data.pos = position

    def color(self) -> Vec3:
        """Base colour of the shape."""
        return self.data.color


@dataclass
class HitPoint:
    """Result of a ray test; the defaults describe a miss."""

    ray: Optional[Ray] = None
    t: float = -1.0
    p: Vec3 = Vec3()
    object: Optional[SceneObject] = None
    hit_type: int = 0


@dataclass
class Camera:
    """Viewpoint and its orthonormal frame."""

    origin: Vec3 = Vec3()
    direction: Vec3 = Vec3(0.0, 0.0, 1.0)
    fov: float = 70.0
    forward: Vec3 = Vec3(0.0, 0.0, 1.0)
    right: Vec3 = Vec3(1.0, 0.0, 0.0)
    up: Vec3 = Vec3(0.0, 1.0, 0.0)
    axis: str = ""
    win_size: tuple[int, int] = (0, 0)


@dataclass
class Scene:
    """Everything that is rendered, plus the interactive selection state."""

    objects: list[SceneObject] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    camera: Camera = field(default_factory=Camera)
    ambient_ratio: float = 0.0
    ambient_color: Vec3 = Vec3()
    bg_color: Vec3 = Vec3()
    delta_time: float = 0.0
    on_object: bool = False
    light_mode: bool = False
    current_name: str = "Camera"
    object_index: int = 0
    light_index: int = 0

    def current_object(self) -> Optional[SceneObject]:
        """The selected object, or None when the scene has no objects."""
        if not self.objects:
            return None
        return self.objects[self.object_index]

    def current_light(self) -> Optional[Light]:
        """The selected light, or None when the scene has no lights."""
        if not self.lights:
            return None
        return self.lights[self.light_index]