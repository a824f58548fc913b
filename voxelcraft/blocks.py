"""Block types: their ids, physical properties, textures and light."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Sequence, Tuple, Union

__all__ = [
    "ANIMATION_FRAMES",
    "BlockId",
    "Direction",
    "BlockMeshType",
    "Torchlight",
    "MeshInfo",
    "Block",
    "get_block",
    "all_blocks",
]

# Number of frames in an animated block texture.
ANIMATION_FRAMES = 16

IVec2 = Tuple[int, int]
IVec3 = Tuple[int, int, int]
Vec3 = Tuple[float, float, float]


class BlockId(enum.IntEnum):
    AIR = 0
    GRASS = 1
    DIRT = 2
    STONE = 3
    SAND = 4
    WATER = 5
    GLASS = 6
    LOG = 7
    LEAVES = 8
    ROSE = 9
    BUTTERCUP = 10
    COAL = 11
    COPPER = 12
    LAVA = 13
    CLAY = 14
    GRAVEL = 15
    PLANKS = 16
    TORCH = 17
    COBBLESTONE = 18
    SNOW = 19
    PODZOL = 20
    SHRUB = 21
    TALLGRASS = 22
    PINE_LOG = 23
    PINE_LEAVES = 24


class Direction(enum.Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"


class BlockMeshType(enum.Enum):
    DEFAULT = "default"
    SPRITE = "sprite"
    LIQUID = "liquid"
    CUSTOM = "custom"


class Torchlight(NamedTuple):
    """Emitted light as red, green, blue and intensity channels (0..15)."""

    red: int = 0
    green: int = 0
    blue: int = 0
    intensity: int = 0


NO_LIGHT = Torchlight()


@dataclass(frozen=True)
class MeshInfo:
    """Geometry and texture region of one face of a custom-mesh block."""

    offset: Vec3
    size: Vec3
    uv_offset: IVec2
    uv_size: IVec2


MeshFunction = Callable[[Direction], MeshInfo]


@dataclass(frozen=True)
class Block:
    """A block type and its behaviour."""

    id: BlockId
    transparent: bool = False
    liquid: bool = False
    can_emit_light: bool = False
    animated: bool = False
    mesh_type: BlockMeshType = BlockMeshType.DEFAULT
    solid: bool = True
    gravity_modifier: float = 1.0
    drag: float = 1.0
    slipperiness: float = 1.0
    texture: Optional[IVec2] = None
    face_textures: Tuple[Tuple[Direction, IVec2], ...] = ()
    frames: Tuple[IVec2, ...] = ()
    light: Torchlight = NO_LIGHT
    mesh: Optional[MeshFunction] = None

    def texture_location(self, direction: Direction) -> IVec2:
        """Atlas cell holding this block's texture for the given face."""
        for face, location in self.face_textures:
            if face is direction:
                return location
        if self.texture is None:
            raise LookupError(f"block {self.id.name} has no texture")
        return self.texture

    def animation_frames(self) -> Tuple[IVec2, ...]:
        """Atlas cells of each animation frame; empty if not animated."""
        return self.frames

    def torchlight(self) -> Torchlight:
        """Light emitted by this block."""
        return self.light

    def aabb(self, pos: Sequence[int]) -> Tuple[Vec3, Vec3]:
        """Unit bounding box of this block placed at ``pos``."""
        x, y, z = (float(c) for c in pos)
        return (x, y, z), (x + 1.0, y + 1.0, z + 1.0)

    def mesh_information(self, direction: Direction) -> MeshInfo:
        """Mesh geometry of a face; only custom-mesh blocks have one."""
        if self.mesh is None:
            raise LookupError(f"block {self.id.name} has no custom mesh")
        return self.mesh(direction)


def _torch_mesh(direction: Direction) -> MeshInfo:
    width = 0.125
    offset = (0.5 - width / 2.0, 0.0, 0.5 - width / 2.0)
    size = (width, 10.0 / 16.0, width)
    if direction is Direction.UP:
        return MeshInfo(offset, size, (7, 7), (2, 2))
    return MeshInfo(offset, size, (7, 0), (2, 10))


def _sprite(block_id: BlockId, texture: IVec2) -> Block:
    return Block(
        id=block_id,
        transparent=True,
        solid=False,
        mesh_type=BlockMeshType.SPRITE,
        texture=texture,
    )


def _build_registry() -> Tuple[Block, ...]:
    blocks = [
        Block(id=BlockId.AIR, transparent=True, solid=False),
        Block(
            id=BlockId.GRASS,
            texture=(1, 0),
            face_textures=((Direction.UP, (0, 0)), (Direction.DOWN, (2, 0))),
        ),
        Block(id=BlockId.DIRT, texture=(2, 0)),
        Block(id=BlockId.STONE, texture=(3, 0)),
        Block(id=BlockId.SAND, texture=(0, 1)),
        Block(
            id=BlockId.WATER,
            transparent=True,
            animated=True,
            liquid=True,
            solid=False,
            gravity_modifier=0.72,
            drag=10.0,
            mesh_type=BlockMeshType.LIQUID,
            texture=(0, 15),
            frames=tuple((i, 15) for i in range(ANIMATION_FRAMES)),
        ),
        Block(id=BlockId.GLASS, transparent=True, texture=(1, 1)),
        Block(
            id=BlockId.LOG,
            texture=(2, 1),
            face_textures=((Direction.UP, (3, 1)), (Direction.DOWN, (3, 1))),
        ),
        Block(id=BlockId.LEAVES, transparent=True, texture=(4, 1)),
        _sprite(BlockId.ROSE, (0, 3)),
        _sprite(BlockId.BUTTERCUP, (1, 3)),
        Block(id=BlockId.COAL, texture=(4, 0)),
        Block(id=BlockId.COPPER, texture=(5, 0)),
        Block(
            id=BlockId.LAVA,
            transparent=True,
            animated=True,
            liquid=True,
            solid=False,
            can_emit_light=True,
            mesh_type=BlockMeshType.LIQUID,
            texture=(0, 14),
            frames=tuple((14, i) for i in range(ANIMATION_FRAMES)),
            light=Torchlight(0xF, 0x8, 0x2, 0x7),
        ),
        Block(id=BlockId.CLAY, texture=(5, 1)),
        Block(id=BlockId.GRAVEL, texture=(6, 0)),
        Block(id=BlockId.PLANKS, texture=(6, 1)),
        Block(
            id=BlockId.TORCH,
            transparent=True,
            solid=False,
            can_emit_light=True,
            mesh_type=BlockMeshType.CUSTOM,
            texture=(0, 2),
            face_textures=((Direction.UP, (1, 2)),),
            light=Torchlight(0xF, 0xB, 0x5, 0xF),
            mesh=_torch_mesh,
        ),
        Block(id=BlockId.COBBLESTONE, texture=(2, 2)),
        Block(id=BlockId.SNOW, texture=(3, 2)),
        Block(
            id=BlockId.PODZOL,
            texture=(5, 2),
            face_textures=((Direction.UP, (4, 2)), (Direction.DOWN, (2, 0))),
        ),
        _sprite(BlockId.SHRUB, (3, 3)),
        _sprite(BlockId.TALLGRASS, (2, 3)),
        Block(
            id=BlockId.PINE_LOG,
            texture=(4, 3),
            face_textures=((Direction.UP, (5, 3)), (Direction.DOWN, (5, 3))),
        ),
        Block(id=BlockId.PINE_LEAVES, transparent=True, texture=(6, 3)),
    ]
    return tuple(sorted(blocks, key=lambda block: block.id))


_BLOCKS = _build_registry()


def get_block(block_id: Union[BlockId, int]) -> Block:
    """Look up a block type by id; raises KeyError for unknown ids."""
    try:
        key = BlockId(block_id)
    except ValueError:
        raise KeyError(block_id) from None
    return _BLOCKS[key]


def all_blocks() -> Tuple[Block, ...]:
    """Every block type, in id order."""
    return _BLOCKS