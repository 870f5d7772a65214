import pytest

from rtscene.cone import cone_normal, hit_cone
from rtscene.model import Cone, ObjectKind, Ray, SceneObject
from rtscene.vec3 import Vec3


def _obj():
    cone = Cone(
        pos=Vec3(0, 0, 0), orientation=Vec3(0, 1, 0), height=2, radius=2, diameter=4
    )
    return SceneObject(ObjectKind.CONE, cone)


def test_side_hit_lies_on_cone_surface():
    obj = _obj()
    ray = Ray(Vec3(5, 1, 0), Vec3(-1, 0, 0))
    hit = hit_cone(ray, obj)
    assert hit.object is obj
    assert hit.hit_type == 0
    axis_dist2 = hit.p.x ** 2 + hit.p.z ** 2
    assert axis_dist2 == pytest.approx(hit.p.y ** 2)
    assert (hit.p - ray.origin).length() == pytest.approx(hit.t)


def test_side_normal_faces_ray():
    obj = _obj()
    hit = hit_cone(Ray(Vec3(5, 1, 0), Vec3(-1, 0, 0)), obj)
    n = cone_normal(hit)
    assert n.length() == pytest.approx(1)
    assert n.dot(hit.ray.direction) <= 0


def test_ray_down_axis_hits_base_first():
    obj = _obj()
    ray = Ray(Vec3(0, 5, 0), Vec3(0, -1, 0))
    hit = hit_cone(ray, obj)
    assert hit.hit_type == 1
    assert hit.p.y == pytest.approx(obj.data.pos.y + obj.data.height)
    assert tuple(cone_normal(hit)) == pytest.approx((0, -1, 0))


def test_miss_far_away():
    hit = hit_cone(Ray(Vec3(50, 50, 0), Vec3(1, 0, 0)), _obj())
    assert hit.object is None
    assert hit.t == -1.0


def test_miss_above_cap_height():
    hit = hit_cone(Ray(Vec3(5, 3, 0), Vec3(-1, 0, 0)), _obj())
    assert hit.object is None