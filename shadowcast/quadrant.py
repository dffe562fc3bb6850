"""Quadrant coordinate transforms.

Each quadrant is a 90-degree arc around the origin, centred on one cardinal
direction. Scanning happens in a local ``(depth, col)`` frame: depth counts
rows outward from the origin, and col runs across the row, negative on one
side of the cardinal axis and positive on the other. This lets one scanning
routine serve all four directions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from shadowcast.types import LocalTile, Position


class Cardinal(Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @classmethod
    def from_index(cls, index: int) -> Cardinal:
        try:
            return cls(index)
        except ValueError:
            raise ValueError(f"Cardinal index must be 0-3, got {index}") from None


# Transform coefficients: (col_to_x, depth_to_x, col_to_y, depth_to_y).
# World coordinates are:
#   wx = ox + col * cx + depth * dx
#   wy = oy + col * cy + depth * dy
_QUADRANT_TRANSFORMS: dict[Cardinal, tuple[int, int, int, int]] = {
    Cardinal.NORTH: (1, 0, 0, -1),  # col->x, depth->-y
    Cardinal.EAST: (0, 1, 1, 0),  # depth->x, col->y
    Cardinal.SOUTH: (1, 0, 0, 1),  # col->x, depth->+y
    Cardinal.WEST: (0, -1, 1, 0),  # depth->-x, col->y
}


@dataclass(frozen=True, slots=True)
class Quadrant:
    """Maps local tiles of one cardinal sweep to absolute grid positions."""

    cardinal: Cardinal
    origin: Position

    def transform(self, tile: LocalTile) -> Position:
        depth, col = tile
        cx, dx, cy, dy = _QUADRANT_TRANSFORMS[self.cardinal]
        ox, oy = self.origin
        return (ox + col * cx + depth * dx, oy + col * cy + depth * dy)
