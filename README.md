# voxelcraft

The game logic behind a small voxel sandbox, kept apart from any window or
graphics library so that it can be used and tested on its own. It has no
dependencies outside the standard library.

## Modules

- `voxelcraft.noise`: "improved" Perlin gradient noise in one to four
  dimensions (`noise1` to `noise4`), repeating every 256 units, and periodic
  variants (`pnoise1` to `pnoise4`) that also wrap the lattice to a given
  period per axis.
- `voxelcraft.blocks`: the block registry. `BlockId` lists the 25 block types;
  `get_block` looks one up (raising `KeyError` for unknown ids) and
  `all_blocks` returns them all in id order. Each `Block` carries its physical
  properties (`solid`, `liquid`, `transparent`, `gravity_modifier`, `drag`,
  `slipperiness`, ...) and answers `texture_location(direction)`,
  `animation_frames()`, `torchlight()`, `aabb(pos)` and, for custom-mesh blocks
  such as the torch, `mesh_information(direction)` returning a `MeshInfo`.
- `voxelcraft.ecs`: an entity-component system. Register a `System` (with
  `init`, `destroy`, `render`, `update` and `tick` subscribers and an optional
  `factory`) per `ComponentType`, create entities with `ECS.new`, attach and
  detach components with `ECS.add` and `ECS.remove`, query with `ECS.has` and
  `ECS.get`, and call every component's subscriber with `ECS.event`.
- `voxelcraft.physics`: axis-aligned boxes (`AABB` with `intersects`,
  `depth`, `translate`, `scale`), collision resolution one axis at a time
  (`move_axis`, `move`), and `PhysicsBody`, which applies gravity, drag,
  grounding and ground friction each `tick`.
- `voxelcraft.movement`: `Movement` turns held `Directions` into walking,
  jumping, swimming or flying on a `PhysicsBody`.
- `voxelcraft.controls`: `Button` and `ButtonSet` track press edges per frame
  (`pressed`) and per tick (`pressed_tick`); `TickClock.advance` turns frame
  durations in nanoseconds into a count of fixed 60 Hz ticks.
- `voxelcraft.ui`: the `UI` component list holding a `Hotbar` (ten block
  slots, chosen with number keys) and a `Crosshair`. Components draw by
  handing `Quad` descriptions to the `draw` callback of a `Screen`.
- `voxelcraft.atlas`: `Atlas.uv` gives the texture coordinates of a sprite
  cell; `animation_frame` picks the animation frame for a tick count, and
  `animate_pixels` builds an atlas image for one frame by copying each
  animated block's current frame cell over its first cell (the first byte of
  each pixel is what gets copied).
- `voxelcraft.cameras`: `CameraStack`, which saves and restores the active
  `CameraType`, and `aabb_vertices` / `aabb_indices`, the triangle data for
  drawing a box.

## Example

```python
from voxelcraft.noise import noise2
from voxelcraft.blocks import BlockId, Direction, get_block
from voxelcraft.physics import AABB, PhysicsBody

height = 64 + 16 * noise2(12.5 / 32, -3.25 / 32)

grass = get_block(BlockId.GRASS)
print(grass.texture_location(Direction.UP))    # (0, 0)
print(get_block(BlockId.TORCH).torchlight())

body = PhysicsBody(size=AABB((0, 0, 0), (0.2, 1.6, 0.2)))
floor = [AABB((-5, -1, -5), (5, 0, 5))]
position = (0.0, 2.0, 0.0)
for _ in range(60):
    position = body.tick(position, get_block(BlockId.AIR), floor)
print(position, body.grounded)
```

## What it does not do

There is no window, no rendering, no command to run and no game loop: the
package supplies the pieces a game loop drives, and the caller feeds in input,
frame times and drawing. There is no world either: no chunk storage, terrain
generation, light propagation or saving. Where a world would be consulted,
the functions take what they need as arguments, such as the `Block` a body
stands in or the collider boxes near it.

## Running the tests

```
pip install -e ".[test]"
pytest
```