"""Drawing a first-person view of a grid map into a frame of colours."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from raycub.raycast import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    RayHit,
    Vec,
    cast_ray,
    ray_direction,
    start_direction,
    texture_index,
    texture_x,
    wall_span,
)

__all__ = ["INT_MAX", "Player", "Frame", "draw_column", "render"]

INT_MAX = 2**31 - 1


@dataclass
class Player:
    """Position, facing direction and camera plane of the viewer."""

    pos: Vec
    direction: Vec
    camera: Vec

    @classmethod
    def from_start(cls, grid: Sequence[str], start: tuple[int, int]) -> Player:
        """Place the player in the middle of the start cell ``(x, y)``."""
        x, y = start
        direction, camera = start_direction(grid[y][x])
        return cls(Vec(x + 0.5, y + 0.5), direction, camera)


class Frame:
    """A ``width`` by ``height`` image of integer colours, stored row by row."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return y * self.width + x

    def pixel(self, x: int, y: int) -> int:
        """Colour at column ``x``, row ``y``."""
        return self.pixels[self._index(x, y)]

    def _set(self, x: int, y: int, colour: int) -> None:
        self.pixels[self._index(x, y)] = colour

    def fill_ceiling_floor(self, ceiling: int, floor: int) -> None:
        """Paint the upper half with ``ceiling`` and the lower half with ``floor``."""
        half = self.height // 2
        self.pixels = [ceiling] * (half * self.width) + [floor] * (
            (self.height - half) * self.width
        )


def _texture_size(texture: Sequence[int]) -> int:
    size = math.isqrt(len(texture))
    if size == 0 or size * size != len(texture):
        raise ValueError("textures must be square and not empty")
    return size


def draw_column(
    frame: Frame,
    column: int,
    hit: RayHit,
    pos: Vec,
    textures: Sequence[Sequence[int]],
) -> None:
    """Draw the textured wall slice for ``hit`` into ``column`` of ``frame``.

    ``textures`` holds the north, south, west and east textures, each a
    square of colours stored row by row.  A colour of 0 is drawn as 1.
    """
    texture = textures[texture_index(hit, pos)]
    size = _texture_size(texture)
    line_height, draw_start, draw_end = wall_span(hit.perp_dist, frame.height)
    tex_x = texture_x(hit, pos, size)
    step = size / line_height
    offset = line_height - frame.height
    offset = -((-offset) // 2) if offset < 0 else offset // 2
    tex_pos = (draw_start + offset) * step
    for row in range(draw_start, draw_end):
        tex_y = INT_MAX if tex_pos > INT_MAX else int(tex_pos)
        tex_y = min(tex_y, size - 1)
        tex_pos += step
        colour = texture[size * tex_y + tex_x] or 1
        frame._set(column, row, colour)


def render(
    frame: Frame,
    grid: Sequence[str],
    player: Player,
    textures: Sequence[Sequence[int]],
    ceiling: int,
    floor: int,
) -> Frame:
    """Draw the whole view seen by ``player`` into ``frame`` and return it."""
    frame.fill_ceiling_floor(ceiling, floor)
    for column in range(frame.width):
        ray = ray_direction(player.direction, player.camera, column, frame.width)
        hit = cast_ray(grid, player.pos, ray)
        draw_column(frame, column, hit, player.pos, textures)
    return frame