"""Camera selection for rendering and box geometry for outlines."""

from __future__ import annotations

import enum
from typing import List, Tuple

from .physics import AABB

__all__ = [
    "CAMERA_STACK_MAX",
    "CameraType",
    "FillMode",
    "RenderPass",
    "CameraStack",
    "aabb_vertices",
    "aabb_indices",
]

CAMERA_STACK_MAX = 256

Vec3 = Tuple[float, float, float]

_AABB_INDICES = (
    1, 0, 3, 1, 3, 2,  # north (-z)
    4, 5, 6, 4, 6, 7,  # south (+z)
    5, 1, 2, 5, 2, 6,  # east (+x)
    0, 4, 7, 0, 7, 3,  # west (-x)
    2, 3, 7, 2, 7, 6,  # top (+y)
    5, 4, 0, 5, 0, 1,  # bottom (-y)
)


class CameraType(enum.Enum):
    PERSPECTIVE = "perspective"
    ORTHO = "ortho"


class FillMode(enum.Enum):
    FILL = "fill"
    LINE = "line"


class RenderPass(enum.Enum):
    PASS_2D = "2d"
    PASS_3D = "3d"


class CameraStack:
    """The active camera type with a stack to save and restore it."""

    def __init__(self, camera_type: CameraType = CameraType.PERSPECTIVE) -> None:
        self.current = CameraType(camera_type)
        self._saved: List[CameraType] = []

    def __len__(self) -> int:
        return len(self._saved)

    def set(self, camera_type: CameraType) -> None:
        """Make ``camera_type`` the active camera."""
        self.current = CameraType(camera_type)

    def push(self) -> None:
        """Save the active camera; raises OverflowError when full."""
        if len(self._saved) + 1 >= CAMERA_STACK_MAX:
            raise OverflowError("camera stack is full")
        self._saved.append(self.current)

    def pop(self) -> CameraType:
        """Restore the most recently saved camera and return it."""
        if not self._saved:
            raise IndexError("camera stack is empty")
        self.current = self._saved.pop()
        return self.current


def aabb_vertices(aabb: AABB) -> Tuple[Vec3, ...]:
    """The eight corners of a box, near face (-z) first, each counter-clockwise from the minimum."""
    (x0, y0, z0), (x1, y1, z1) = aabb.min, aabb.max
    return (
        (x0, y0, z0),
        (x1, y0, z0),
        (x1, y1, z0),
        (x0, y1, z0),
        (x0, y0, z1),
        (x1, y0, z1),
        (x1, y1, z1),
        (x0, y1, z1),
    )


def aabb_indices() -> Tuple[int, ...]:
    """Triangle indices into ``aabb_vertices`` for all six faces, wound outward."""
    return _AABB_INDICES