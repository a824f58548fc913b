"""Axis-aligned boxes and collision-resolving movement of physics bodies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, NamedTuple, Sequence, Tuple, Union

from .blocks import Block

__all__ = [
    "GRAVITY",
    "MOVEMENT_EPSILON",
    "F32_EPSILON",
    "AABB",
    "Motion",
    "move_axis",
    "move",
    "PhysicsBody",
]

Vec3 = Tuple[float, float, float]

MOVEMENT_EPSILON = 0.01
GRAVITY: Vec3 = (0.0, -0.0086, 0.0)
F32_EPSILON = 2.0 ** -23


def _vec3(values: Iterable[float]) -> Vec3:
    x, y, z = (float(v) for v in values)
    return (x, y, z)


def _sign(x: float) -> float:
    return float((x > 0) - (x < 0))


@dataclass(frozen=True)
class AABB:
    """An axis-aligned box given by its minimum and maximum corners."""

    min: Vec3
    max: Vec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _vec3(self.min))
        object.__setattr__(self, "max", _vec3(self.max))

    def intersects(self, other: "AABB") -> bool:
        """True if the boxes overlap; touching faces count as overlapping."""
        return all(
            a_lo <= b_hi and a_hi >= b_lo
            for a_lo, a_hi, b_lo, b_hi in zip(self.min, self.max, other.min, other.max)
        )

    def depth(self, other: "AABB") -> Vec3:
        """Penetration depth of the two boxes along each axis."""
        return _vec3(
            min(a_hi - b_lo, b_hi - a_lo)
            for a_lo, a_hi, b_lo, b_hi in zip(self.min, self.max, other.min, other.max)
        )

    def translate(self, offset: Sequence[float]) -> "AABB":
        """This box moved by ``offset``."""
        return AABB(
            tuple(c + d for c, d in zip(self.min, offset)),
            tuple(c + d for c, d in zip(self.max, offset)),
        )

    def scale(self, factor: Union[float, Sequence[float]]) -> "AABB":
        """This box scaled about its centre by a scalar or per-axis factor."""
        factors = (float(factor),) * 3 if isinstance(factor, (int, float)) else _vec3(factor)
        centre = [(lo + hi) / 2.0 for lo, hi in zip(self.min, self.max)]
        half = [(hi - lo) / 2.0 * f for lo, hi, f in zip(self.min, self.max, factors)]
        return AABB(
            tuple(c - h for c, h in zip(centre, half)),
            tuple(c + h for c, h in zip(centre, half)),
        )


Colliders = Union[Iterable[AABB], Callable[[AABB], Iterable[AABB]]]


def move_axis(aabb: AABB, movement: float, axis: int, colliders: Iterable[AABB]) -> float:
    """How far ``aabb`` may move along one axis (0, 1 or 2) before colliding."""
    offset = [0.0, 0.0, 0.0]
    offset[axis] = movement
    direction = _sign(movement)
    moved = aabb.translate(offset)

    for collider in colliders:
        if not moved.intersects(collider):
            continue
        depth = moved.depth(collider)[axis]
        offset[axis] += -direction * (depth + MOVEMENT_EPSILON)
        moved = aabb.translate(offset)

        if abs(offset[axis]) <= MOVEMENT_EPSILON:
            offset[axis] = 0.0
            break

    result = offset[axis]
    return 0.0 if abs(result) <= F32_EPSILON else result


def move(aabb: AABB, movement: Sequence[float], colliders: Iterable[AABB]) -> Vec3:
    """Resolve a movement one axis at a time; returns the movement achieved."""
    colliders = list(colliders)
    current = aabb
    result = [0.0, 0.0, 0.0]
    for axis, amount in enumerate(_vec3(movement)):
        achieved = move_axis(current, amount, axis, colliders)
        step = [0.0, 0.0, 0.0]
        step[axis] = achieved
        current = current.translate(step)
        result[axis] = achieved
    return _vec3(result)


class Motion(NamedTuple):
    """Outcome of moving a body: its new position and the movement achieved."""

    position: Vec3
    moved: Vec3


@dataclass
class PhysicsBody:
    """A body with velocity and a box of ``size`` centred on its position."""

    size: AABB
    velocity: Vec3 = (0.0, 0.0, 0.0)
    stopped: Tuple[bool, bool, bool] = (False, False, False)
    aabb: AABB = field(default_factory=lambda: AABB((0.0, 0.0, 0.0), (0.0, 0.0, 0.0)))
    collide: bool = True
    gravity: bool = True
    drag: bool = False
    grounded: bool = False

    def make_aabb(self, position: Sequence[float]) -> AABB:
        """Centre the body's box on ``position``, store it and return it."""
        half = [(hi - lo) / 2.0 for lo, hi in zip(self.size.min, self.size.max)]
        self.aabb = self.size.translate([p - h for p, h in zip(position, half)])
        return self.aabb

    def move(self, position: Sequence[float], movement: Sequence[float], colliders: Colliders) -> Motion:
        """Move from ``position``, stopping at colliders.

        ``colliders`` is either boxes or a function that returns the boxes
        found in a query area twice the size of the body.
        """
        position = _vec3(position)
        movement = _vec3(movement)

        if not self.collide:
            new_position = _vec3(p + m for p, m in zip(position, movement))
            self.make_aabb(new_position)
            return Motion(new_position, movement)

        box = self.make_aabb(position)
        boxes = colliders(box.scale(2.0)) if callable(colliders) else colliders
        moved = move(box, movement, boxes)
        new_position = _vec3(p + m for p, m in zip(position, moved))
        self.make_aabb(new_position)
        return Motion(new_position, moved)

    def tick(self, position: Sequence[float], block: Block, colliders: Colliders) -> Vec3:
        """Advance one tick inside ``block``; returns the new position."""
        if self.gravity:
            modifier = 1.0 if block.solid else block.gravity_modifier
            self.velocity = _vec3(v + g * modifier for v, g in zip(self.velocity, GRAVITY))

        new_position, moved = self.move(position, self.velocity, colliders)

        stopped = tuple(abs(m - v) >= F32_EPSILON for m, v in zip(moved, self.velocity))
        self.stopped = (stopped[0], stopped[1], stopped[2])
        self.velocity = _vec3(0.0 if s else v for s, v in zip(self.stopped, self.velocity))

        self.grounded = self.velocity[1] <= 0 and self.stopped[1]

        if self.drag:
            factor = -0.02 * block.drag
            self.velocity = _vec3(v + v * factor for v in self.velocity)

        if self.grounded:
            slipperiness = block.slipperiness * 0.6
            vx, vy, vz = self.velocity
            self.velocity = (vx * slipperiness, vy, vz * slipperiness)

        return new_position

    def collides(self, aabb: AABB) -> bool:
        """True if the body's current box overlaps ``aabb``."""
        return self.aabb.intersects(aabb)