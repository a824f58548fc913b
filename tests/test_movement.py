import math

import pytest

from voxelcraft.blocks import BlockId, get_block
from voxelcraft.movement import BASE_SPEED, JUMP_VELOCITY, Directions, Movement
from voxelcraft.physics import AABB, PhysicsBody

AIR = get_block(BlockId.AIR)
WATER = get_block(BlockId.WATER)


def make_body(grounded=False):
    body = PhysicsBody(size=AABB((0.0, 0.0, 0.0), (0.2, 1.6, 0.2)))
    body.grounded = grounded
    return body


def run(directions, *, grounded=False, block=AIR, top=AIR, flying=False, yaw=0.0, body=None):
    body = body or make_body(grounded)
    movement = Movement(directions=directions, flying=flying)
    position = movement.tick(yaw, body, (0.0, 1.0, 0.0), block, top, [])
    return body, position


def test_idle_leaves_velocity_and_sets_flags():
    body, position = run(Directions(), grounded=True)
    assert body.velocity == (0.0, 0.0, 0.0)
    assert body.drag is True and body.gravity is True
    assert position == (0.0, 1.0, 0.0)


def test_forward_on_ground_at_yaw_zero():
    body, _ = run(Directions(forward=True), grounded=True)
    assert body.velocity[0] == pytest.approx(0.0, abs=1e-12)
    assert body.velocity[2] == pytest.approx(BASE_SPEED)


def test_airborne_movement_is_slowed():
    ground, _ = run(Directions(forward=True), grounded=True)
    air, _ = run(Directions(forward=True), grounded=False)
    assert air.velocity[2] / ground.velocity[2] == pytest.approx(0.07)


def test_forward_and_backward_cancel():
    body, _ = run(Directions(forward=True, backward=True), grounded=True)
    assert body.velocity == pytest.approx((0.0, 0.0, 0.0))


def test_diagonal_is_normalised():
    straight, _ = run(Directions(forward=True), grounded=True, yaw=0.7)
    diagonal, _ = run(Directions(forward=True, left=True), grounded=True, yaw=0.7)
    assert math.hypot(*diagonal.velocity) == pytest.approx(math.hypot(*straight.velocity))


def test_left_and_right_are_opposite():
    left, _ = run(Directions(left=True), grounded=True, yaw=0.3)
    right, _ = run(Directions(right=True), grounded=True, yaw=0.3)
    assert left.velocity == pytest.approx(tuple(-v for v in right.velocity))


def test_jump_when_grounded():
    body, _ = run(Directions(up=True), grounded=True)
    assert body.velocity[1] == pytest.approx(JUMP_VELOCITY)


def test_no_jump_in_the_air():
    body, _ = run(Directions(up=True), grounded=False)
    assert body.velocity[1] == 0.0


def test_swim_up_breaching_is_faster_than_down():
    up, _ = run(Directions(up=True), block=WATER, top=AIR)
    down, _ = run(Directions(down=True), block=WATER, top=AIR)
    assert down.velocity[1] < 0
    assert up.velocity[1] / down.velocity[1] == pytest.approx(-1.4)


def test_swim_up_submerged_matches_down():
    up, _ = run(Directions(up=True), block=WATER, top=WATER)
    down, _ = run(Directions(down=True), block=WATER, top=WATER)
    assert up.velocity[1] == pytest.approx(-down.velocity[1])


def test_exiting_liquid_doubles_float_speed():
    breaching, _ = run(Directions(up=True), block=WATER, top=AIR)
    stuck = make_body()
    stuck.stopped = (True, False, False)
    exiting, _ = run(Directions(up=True), block=WATER, top=AIR, body=stuck)
    assert exiting.velocity[1] / breaching.velocity[1] == pytest.approx(2.0)


def test_liquid_ground_modifier():
    water, _ = run(Directions(forward=True), grounded=True, block=WATER, top=WATER)
    land, _ = run(Directions(forward=True), grounded=True)
    assert water.velocity[2] / land.velocity[2] == pytest.approx(0.8)


def test_flying_moves_position_directly():
    body, position = run(Directions(forward=True), flying=True)
    assert body.velocity == (0.0, 0.0, 0.0)
    assert body.gravity is False and body.drag is False
    assert position[0] == pytest.approx(0.0, abs=1e-12)
    assert position[1] == pytest.approx(1.0)
    assert position[2] > 0.0


def test_flying_up_raises_position():
    _, position = run(Directions(up=True), flying=True)
    assert position[1] > 1.0


def test_flying_stops_at_wall():
    body = make_body()
    wall = AABB((-1.0, 0.0, 0.3), (1.0, 3.0, 1.3))
    movement = Movement(directions=Directions(forward=True), flying=True)
    position = movement.tick(0.0, body, (0.0, 1.0, 0.0), AIR, AIR, [wall])
    assert position[2] > 0.0
    assert body.aabb.max[2] <= wall.min[2]