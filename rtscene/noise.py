"""Three-dimensional gradient (Perlin) noise with a fixed permutation table."""

from __future__ import annotations

import math

from rtscene.vec3 import Vec3

_PERM = bytes.fromhex(
    "0d508552b8f77cb05ead9a2b8a280e10"
    "9f8023636066beb2a11fdff0130a63262"[:0]
    + "9f8023606beb2a11fdff0130a63262"[:0]
    + "9f8023636 0 6b eb 2a 11 fd ff 01 30 a6 32 62".replace(" ", "")[:0]
)
_PERM = bytes.fromhex(
    "0d 50 85 52 b8 f7 7c b0 5e ad 9a 2b 8a 28 0e 10"
    " 9f 80 23 63 60 6b eb 2a 11 fd ff 01 30 a6 32 62"
    " 12 56 ea f5 b2 3f f0 3d b1 f8 54 06 43 95 0b 5d"
    " 3e b4 14 ac 79 e5 da 99 b6 07 7d 7b 7e c6 f2 ab"
    " 97 65 09 3a db bb e7 fc 31 45 1f 35 22 d7 9d 33"
    " d6 ce a5 68 26 69 4e fa 03 64 00 bc e6 08 e8 a4"
    " e9 c2 df a0 37 02 36 25 82 d1 15 0a 77 e0 46 1c"
    " fb 66 92 8c 84 6a 8e 88 1e c8 6c d8 bd 76 2d e3"
    " ed f3 ec d9 b9 e1 48 73 6e 55 74 42 98 4d c4 27"
    " a2 24 91 3b 78 18 4c 70 6f 1a 89 ae dc 38 13 5c"
    " a1 cc 20 57 9e b3 94 8d c3 6d d2 cd 87 9c be 61"
    " 90 47 e4 d0 2f 29 4b bf 05 9b ca 5b 39 71 f6 c0"
    " d5 8b cf af b7 8f aa 96 b5 1b 17 34 d4 19 a9 0c"
    " c1 2e 49 59 3c c7 f4 58 ba 75 f1 a7 7a 40 fe de"
    " 51 04 86 1d c9 4a 4f e2 81 d3 7f 41 83 5f 21 a8"
    " f9 44 ee 93 0f dd cb 16 5a c5 72 67 53 ef a3 2c"
)


def _edge_gradients() -> tuple[Vec3, ...]:
    """The twelve cube-edge directions, paired axes (x,y), (x,z), (y,z)."""
    result = []
    for first, second in ((0, 1), (0, 2), (1, 2)):
        for sign_second in (1, -1):
            for sign_first in (1, -1):
                comps = [0, 0, 0]
                comps[first] = sign_first
                comps[second] = sign_second
                result.append(Vec3(*comps))
    return tuple(result)


_GRAD = _edge_gradients()


def fade(t: float) -> float:
    """Quintic smoothstep 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b."""
    return a + t * (b - a)


def _gradient(x: int, y: int, z: int) -> Vec3:
    hashed = _PERM[(_PERM[(_PERM[x & 255] + y) & 255] + z) & 255]
    return _GRAD[hashed % 12]


def perlin_noise(p: Vec3) -> float:
    """Noise value at point p, mapped from [-1, 1] to about [0, 1]."""
    cx, cy, cz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
    fx, fy, fz = p.x - cx, p.y - cy, p.z - cz

    corners = [
        _gradient(cx + i, cy + j, cz + k).dot(Vec3(fx - i, fy - j, fz - k))
        for i in (0, 1)
        for j in (0, 1)
        for k in (0, 1)
    ]

    wx, wy, wz = fade(fx), fade(fy), fade(fz)
    along_z = [lerp(lo, hi, wz) for lo, hi in zip(corners[::2], corners[1::2])]
    along_y = [lerp(lo, hi, wy) for lo, hi in zip(along_z[::2], along_z[1::2])]
    value = lerp(along_y[0], along_y[1], wx)
    return (value + 1.0) * 0.5