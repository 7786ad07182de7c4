"""Ray casting on a character grid with the DDA algorithm.

The grid is a sequence of rows; ``"1"`` marks a wall.  Positions are in
grid units with ``x`` growing to the right and ``y`` growing downwards.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "WINDOW_WIDTH",
    "WINDOW_HEIGHT",
    "TEXTURE_W_H",
    "FOV_FACTOR",
    "FAR",
    "Vec",
    "RayHit",
    "start_direction",
    "ray_direction",
    "delta_distances",
    "cast_ray",
    "wall_span",
    "texture_index",
    "texture_x",
]

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
TEXTURE_W_H = 360
FOV_FACTOR = 0.66
FAR = 10.0**30

WALL = "1"


@dataclass(frozen=True)
class Vec:
    """A 2-D vector of floats."""

    x: float
    y: float


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall.

    ``side`` is 0 when an x-facing cell edge was crossed last, 1 for a
    y-facing edge.  ``perp_dist`` is the distance to the wall measured
    perpendicular to the camera plane.
    """

    map_x: int
    map_y: int
    side: int
    perp_dist: float
    ray_dir: Vec


def start_direction(heading: str) -> tuple[Vec, Vec]:
    """Return ``(direction, camera_plane)`` for a start heading.

    ``N``, ``S`` and ``W`` have their own headings; anything else faces east.
    """
    if heading == "N":
        return Vec(0.0, -1.0), Vec(FOV_FACTOR, 0.0)
    if heading == "S":
        return Vec(0.0, 1.0), Vec(-FOV_FACTOR, 0.0)
    if heading == "W":
        return Vec(-1.0, 0.0), Vec(0.0, -FOV_FACTOR)
    return Vec(1.0, 0.0), Vec(0.0, FOV_FACTOR)


def ray_direction(direction: Vec, camera: Vec, column: int, width: int = WINDOW_WIDTH) -> Vec:
    """Direction of the ray through screen ``column`` of a view ``width`` wide."""
    cam_x = 2 * column / width - 1
    return Vec(direction.x + camera.x * cam_x, direction.y + camera.y * cam_x)


def delta_distances(ray_dir: Vec) -> Vec:
    """Ray length needed to cross one whole cell along each axis."""
    return Vec(
        abs(1 / ray_dir.x) if ray_dir.x != 0 else FAR,
        abs(1 / ray_dir.y) if ray_dir.y != 0 else FAR,
    )


def _is_wall(grid: Sequence[str], x: int, y: int) -> bool:
    if y < 0 or y >= len(grid) or x < 0 or x >= len(grid[y]):
        raise ValueError("ray left the map without hitting a wall")
    return grid[y][x] == WALL


def cast_ray(grid: Sequence[str], pos: Vec, ray_dir: Vec) -> RayHit:
    """Follow a ray from ``pos`` cell by cell until it enters a wall cell."""
    map_x, map_y = int(pos.x), int(pos.y)
    delta = delta_distances(ray_dir)
    if ray_dir.x < 0:
        step_x, side_x = -1, (pos.x - map_x) * delta.x
    else:
        step_x, side_x = 1, (map_x + 1 - pos.x) * delta.x
    if ray_dir.y < 0:
        step_y, side_y = -1, (pos.y - map_y) * delta.y
    else:
        step_y, side_y = 1, (map_y + 1 - pos.y) * delta.y
    while True:
        if side_x < side_y:
            side_x += delta.x
            map_x += step_x
            side = 0
        else:
            side_y += delta.y
            map_y += step_y
            side = 1
        if _is_wall(grid, map_x, map_y):
            break
    perp = side_x - delta.x if side == 0 else side_y - delta.y
    return RayHit(map_x, map_y, side, perp, ray_dir)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def wall_span(perp_dist: float, height: int = WINDOW_HEIGHT) -> tuple[int, int, int]:
    """Return ``(line_height, draw_start, draw_end)`` of a wall slice.

    The drawn rows are ``draw_start`` up to, not including, ``draw_end``,
    clamped to the screen.
    """
    if perp_dist <= 0:
        raise ValueError("wall distance must be positive")
    line_height = int(height / perp_dist)
    draw_start = max(0, _trunc_div(height - line_height, 2))
    draw_end = min(height, _trunc_div(height + line_height, 2))
    return line_height, draw_start, draw_end


def texture_index(hit: RayHit, pos: Vec) -> int:
    """Texture slot for a hit: 0 north, 1 south, 2 west, 3 east."""
    if hit.side:
        return 0 if hit.map_y - pos.y > 0 else 1
    return 2 if hit.map_x - pos.x > 0 else 3


def texture_x(hit: RayHit, pos: Vec, texture_size: int = TEXTURE_W_H) -> int:
    """Texture column to sample for the point where the ray met the wall."""
    if hit.side == 0:
        wall_x = pos.y + hit.perp_dist * hit.ray_dir.y
    else:
        wall_x = pos.x + hit.perp_dist * hit.ray_dir.x
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * texture_size)
    if (hit.side == 0 and hit.ray_dir.x < 0) or (hit.side == 1 and hit.ray_dir.y > 0):
        tex_x = texture_size - tex_x - 1
    return tex_x