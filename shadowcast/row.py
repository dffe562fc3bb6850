"""Scan rows and the slope helpers that bound them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from shadowcast.types import LocalTile
from shadowcast.util.rational import ExactFraction, round_ties_down, round_ties_up


@dataclass(slots=True)
class Row:
    """Tiles at one depth of a quadrant, between two slopes.

    Attributes:
        depth: Distance from the origin along the quadrant's axis (>= 1).
        start_slope: Lower bound of the visible sector, as col/depth.
        end_slope: Upper bound of the visible sector, as col/depth.
    """

    depth: int
    start_slope: ExactFraction
    end_slope: ExactFraction

    def tiles(self) -> Iterator[LocalTile]:
        """Yield ``(depth, col)`` for every column within the row's slopes.

        Boundary columns whose centre lies exactly half a tile outside a slope
        are included. The sequence is empty when rounding collapses the range.
        """
        min_col = round_ties_up(self.start_slope * self.depth)
        max_col = round_ties_down(self.end_slope * self.depth)
        depth = self.depth
        for col in range(min_col, max_col + 1):
            yield (depth, col)

    def next(self) -> Row:
        return Row(self.depth + 1, self.start_slope, self.end_slope)


def slope(tile: LocalTile) -> ExactFraction:
    """Slope of the line through the origin and the tile's near-left corner."""
    depth, col = tile
    return ExactFraction(2 * col - 1, 2 * depth)


def is_symmetric(row: Row, tile: LocalTile) -> bool:
    """Whether the tile's centre lies inside the row's sector.

    Floor tiles are only revealed when this holds, which is what makes
    visibility mutual between any two floor tiles.
    """
    _, col = tile
    return (
        row.start_slope * row.depth <= col and row.end_slope * row.depth >= col
    )
