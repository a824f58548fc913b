"""Texture atlases of square sprites and the animated block atlas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from .blocks import ANIMATION_FRAMES, BlockId, all_blocks
from .controls import TICKRATE

__all__ = [
    "ANIMATION_FPS",
    "BYTES_PER_PIXEL",
    "Atlas",
    "animation_frame",
    "animate_pixels",
]

# Animated block textures advance this many frames per second.
ANIMATION_FPS = 6

# Pixels are stored as RGBA, one byte per channel.
BYTES_PER_PIXEL = 4

IVec2 = Tuple[int, int]
Vec2 = Tuple[float, float]


def _ivec2(values: Sequence[int]) -> IVec2:
    x, y = (int(v) for v in values)
    return (x, y)


@dataclass(frozen=True)
class Atlas:
    """A texture of ``texture_size`` pixels divided into ``sprite_size`` cells.

    Cell (0, 0) is the top-left cell; texture coordinates have their origin
    at the bottom-left corner.
    """

    texture_size: IVec2
    sprite_size: IVec2

    def __post_init__(self) -> None:
        object.__setattr__(self, "texture_size", _ivec2(self.texture_size))
        object.__setattr__(self, "sprite_size", _ivec2(self.sprite_size))
        if any(s <= 0 for s in self.texture_size + self.sprite_size):
            raise ValueError("texture and sprite sizes must be positive")

    @property
    def size(self) -> IVec2:
        """Number of whole cells along each axis."""
        (tw, th), (sw, sh) = self.texture_size, self.sprite_size
        return (tw // sw, th // sh)

    @property
    def sprite_unit(self) -> Vec2:
        """Size of one cell in texture coordinates."""
        (tw, th), (sw, sh) = self.texture_size, self.sprite_size
        return (sw / tw, sh / th)

    @property
    def pixel_unit(self) -> Vec2:
        """Size of one pixel in texture coordinates."""
        tw, th = self.texture_size
        return (1.0 / tw, 1.0 / th)

    def uv(self, pos: Sequence[int]) -> Tuple[Vec2, Vec2]:
        """Minimum and maximum texture coordinates of the cell at ``pos``."""
        x, y = _ivec2(pos)
        (tw, th), (sw, sh) = self.texture_size, self.sprite_size
        min_x = float(x * sw)
        min_y = float((self.size[1] - y - 1) * sh)
        return (min_x / tw, min_y / th), ((min_x + sw) / tw, (min_y + sh) / th)


def animation_frame(ticks: int, tickrate: int = TICKRATE) -> int:
    """Index of the block animation frame shown after ``ticks`` ticks."""
    ticks_per_frame = tickrate // ANIMATION_FPS
    if ticks_per_frame <= 0:
        raise ValueError(f"tick rate {tickrate} is below the animation rate")
    return (ticks // ticks_per_frame) % ANIMATION_FRAMES


def _copy_cell(
    pixels: bytearray,
    image_width: int,
    sprite_size: IVec2,
    source: IVec2,
    target: IVec2,
) -> None:
    # Only the first channel of each pixel is carried over.
    sw, sh = sprite_size
    for j in range(sh):
        src_row = (source[1] + j) * image_width + source[0]
        dst_row = (target[1] + j) * image_width + target[0]
        for i in range(sw):
            pixels[(dst_row + i) * BYTES_PER_PIXEL] = pixels[(src_row + i) * BYTES_PER_PIXEL]


def animate_pixels(
    pixels: Union[bytes, bytearray],
    size: Sequence[int],
    sprite_size: Sequence[int],
    frame: int,
) -> bytes:
    """The atlas image as shown at animation ``frame``.

    ``pixels`` is an RGBA image of ``size`` pixels stored bottom row first.
    For every animated block the cell of its current frame is copied over
    the cell of its first frame, which is where the block's texture is read.
    The first byte of each pixel (the red channel) is what gets copied.
    """
    width, height = _ivec2(size)
    sprite = _ivec2(sprite_size)
    if sprite[0] <= 0 or sprite[1] <= 0:
        raise ValueError("sprite size must be positive")
    if len(pixels) != width * height * BYTES_PER_PIXEL:
        raise ValueError(
            f"expected {width * height * BYTES_PER_PIXEL} bytes, got {len(pixels)}"
        )
    if not 0 <= frame < ANIMATION_FRAMES:
        raise ValueError(f"frame {frame} out of range 0..{ANIMATION_FRAMES - 1}")

    rows = height // sprite[1]
    out = bytearray(pixels)

    def cell_origin(cell: IVec2) -> IVec2:
        return (sprite[0] * cell[0], sprite[1] * (rows - cell[1] - 1))

    for block in all_blocks():
        if block.id == BlockId.AIR or not block.animated:
            continue
        frames = block.animation_frames()
        _copy_cell(out, width, sprite, cell_origin(frames[frame]), cell_origin(frames[0]))

    return bytes(out)