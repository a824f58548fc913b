"""Improved Perlin gradient noise in one to four dimensions.

Each ``noiseN`` function returns a signed value that varies smoothly with
its coordinates. It repeats every 256 units along each axis. The
``pnoiseN`` variants also wrap the integer lattice to a caller-given period
on every axis.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

__all__ = [
    "noise1",
    "noise2",
    "noise3",
    "noise4",
    "pnoise1",
    "pnoise2",
    "pnoise3",
    "pnoise4",
]

_PERM_BASE = (
    151, 160, 137, 91, 90, 15,
    131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23,
    190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32, 57, 177, 33,
    88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71, 134, 139, 48, 27, 166,
    77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244,
    102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169, 200, 196,
    135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64, 52, 217, 226, 250, 124, 123,
    5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42,
    223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97, 228,
    251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239, 107,
    49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254,
    138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)

# Repeated twice so that sums of two wrapped indices never need wrapping again.
_PERM = _PERM_BASE * 2

_Grad = Callable[..., float]


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _fastfloor(x: float) -> int:
    # Exact integers map to x - 1, leaving a fractional part of 1.0.
    truncated = int(x)
    return truncated if truncated < x else truncated - 1


def _trunc_mod(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _grad1(hash_: int, x: float) -> float:
    h = hash_ & 15
    grad = 1.0 + (h & 7)
    if h & 8:
        grad = -grad
    return grad * x


def _grad2(hash_: int, x: float, y: float) -> float:
    h = hash_ & 7
    u, v = (x, y) if h < 4 else (y, x)
    return (-u if h & 1 else u) + (-2.0 * v if h & 2 else 2.0 * v)


def _grad3(hash_: int, x: float, y: float, z: float) -> float:
    h = hash_ & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (-u if h & 1 else u) + (-v if h & 2 else v)


def _grad4(hash_: int, x: float, y: float, z: float, t: float) -> float:
    h = hash_ & 31
    u = x if h < 24 else y
    v = y if h < 16 else z
    w = z if h < 8 else t
    return (-u if h & 1 else u) + (-v if h & 2 else v) + (-w if h & 4 else w)


def _hash(indices: Sequence[int]) -> int:
    h = 0
    for index in reversed(indices):
        h = _PERM[index + h]
    return h


def _lattice_noise(
    coords: Sequence[float],
    periods: Optional[Sequence[int]],
    grad: _Grad,
    scale: float,
) -> float:
    cells = [_fastfloor(c) for c in coords]
    fracs = [c - cell for c, cell in zip(coords, cells)]
    if periods is None:
        low = [cell & 0xFF for cell in cells]
        high = [(cell + 1) & 0xFF for cell in cells]
    else:
        low = [_trunc_mod(cell, p) & 0xFF for cell, p in zip(cells, periods)]
        high = [_trunc_mod(cell + 1, p) & 0xFF for cell, p in zip(cells, periods)]
    fades = [_fade(f) for f in fracs]
    dims = len(coords)

    def corner(axis: int, indices: tuple, offsets: tuple) -> float:
        if axis == dims:
            return grad(_hash(indices), *offsets)
        near = corner(axis + 1, indices + (low[axis],), offsets + (fracs[axis],))
        far = corner(axis + 1, indices + (high[axis],), offsets + (fracs[axis] - 1.0,))
        return _lerp(fades[axis], near, far)

    return scale * corner(0, (), ())


def noise1(x: float) -> float:
    """1D Perlin noise."""
    return _lattice_noise((x,), None, _grad1, 0.188)


def noise2(x: float, y: float) -> float:
    """2D Perlin noise."""
    return _lattice_noise((x, y), None, _grad2, 0.507)


def noise3(x: float, y: float, z: float) -> float:
    """3D Perlin noise."""
    return _lattice_noise((x, y, z), None, _grad3, 0.936)


def noise4(x: float, y: float, z: float, w: float) -> float:
    """4D Perlin noise."""
    return _lattice_noise((x, y, z, w), None, _grad4, 0.87)


def pnoise1(x: float, px: int) -> float:
    """1D Perlin noise with period ``px``."""
    return _lattice_noise((x,), (px,), _grad1, 0.188)


def pnoise2(x: float, y: float, px: int, py: int) -> float:
    """2D Perlin noise with periods ``px`` and ``py``."""
    return _lattice_noise((x, y), (px, py), _grad2, 0.507)


def pnoise3(x: float, y: float, z: float, px: int, py: int, pz: int) -> float:
    """3D Perlin noise with a period per axis."""
    return _lattice_noise((x, y, z), (px, py, pz), _grad3, 0.936)


def pnoise4(
    x: float, y: float, z: float, w: float, px: int, py: int, pz: int, pw: int
) -> float:
    """4D Perlin noise with a period per axis."""
    return _lattice_noise((x, y, z, w), (px, py, pz, pw), _grad4, 0.87)