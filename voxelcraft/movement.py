"""Player-style movement: walking, jumping, swimming and flying."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .blocks import Block
from .physics import Colliders, PhysicsBody

__all__ = [
    "BASE_SPEED",
    "JUMP_VELOCITY",
    "Directions",
    "Movement",
]

Vec3 = Tuple[float, float, float]

BASE_SPEED = 0.0245
FLYING_SPEED_FACTOR = 1.8
FLYING_MOVE_FACTOR = 8.0
JUMP_VELOCITY = 0.16
SWIM_FACTOR = 0.7
BREACH_FACTOR = 1.4
EXIT_FACTOR = 2.0


@dataclass
class Directions:
    """Which movement inputs are currently held."""

    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False


def _accumulate(total: List[float], vector: Sequence[float], sign: float) -> None:
    for axis, value in enumerate(vector):
        total[axis] += sign * value


@dataclass
class Movement:
    """Turns held directions into velocity changes of a physics body."""

    speed: float = 1.0
    jump_height: float = 1.0
    directions: Directions = field(default_factory=Directions)
    flying: bool = False

    def tick(
        self,
        yaw: float,
        body: PhysicsBody,
        position: Sequence[float],
        block: Block,
        top_block: Block,
        colliders: Colliders = (),
    ) -> Vec3:
        """Apply one tick of movement; returns the body's position afterwards.

        ``block`` is the block at the body's position and ``top_block`` the
        block at the top of the body.
        """
        speed = BASE_SPEED * self.speed * (FLYING_SPEED_FACTOR if self.flying else 1.0)
        held = self.directions

        fx, fz = math.sin(yaw), math.cos(yaw)
        forward = (fx, 0.0, fz)
        right = (fz, 0.0, -fx)
        up = (0.0, 1.0, 0.0)

        direction = [0.0, 0.0, 0.0]
        if held.forward:
            _accumulate(direction, forward, 1.0)
        if held.backward:
            _accumulate(direction, forward, -1.0)
        if held.left:
            _accumulate(direction, right, 1.0)
        if held.right:
            _accumulate(direction, right, -1.0)

        vx, vy, vz = body.velocity
        if self.flying:
            if held.up:
                _accumulate(direction, up, 1.0)
            if held.down:
                _accumulate(direction, up, -1.0)
        elif block.liquid:
            if held.up:
                breaching = not top_block.liquid
                exiting = breaching and (body.stopped[0] or body.stopped[2])
                vy += (
                    speed
                    * SWIM_FACTOR
                    * (BREACH_FACTOR if breaching else 1.0)
                    * (EXIT_FACTOR if exiting else 1.0)
                )
            if held.down:
                vy -= speed * SWIM_FACTOR
        elif held.up and body.grounded:
            vy += JUMP_VELOCITY * self.jump_height

        norm = math.sqrt(sum(c * c for c in direction))
        if norm == 0.0 or math.isnan(norm):
            movement = [0.0, 0.0, 0.0]
        else:
            movement = [c / norm * speed for c in direction]

        if self.flying:
            xz_modifier = 1.0
        elif block.liquid:
            xz_modifier = 0.8 if body.grounded else 0.45
        else:
            xz_modifier = 1.0 if body.grounded else 0.07
        movement[0] *= xz_modifier
        movement[2] *= xz_modifier

        body.drag = not self.flying
        body.gravity = not self.flying

        if self.flying:
            body.velocity = (0.0, 0.0, 0.0)
            factor = FLYING_MOVE_FACTOR * self.speed
            return body.move(position, [m * factor for m in movement], colliders).position

        body.velocity = (vx + movement[0], vy + movement[1], vz + movement[2])
        px, py, pz = (float(p) for p in position)
        return (px, py, pz)