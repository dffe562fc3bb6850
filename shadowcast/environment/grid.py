"""Field of view over numpy tile grids.

Grids are boolean arrays shaped ``(width, height)`` and indexed ``[x, y]``,
where ``True`` marks a see-through tile (floor, open door, etc.). This module
builds the blocking predicate and the visibility sink that
:func:`shadowcast.fov.compute_fov` consumes, so callers holding a plain
array never have to write them by hand.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import numpy as np
from numpy.typing import NDArray

from shadowcast.fov import compute_fov
from shadowcast.types import IsBlocking, Position, ScanStrategy

logger = logging.getLogger(__name__)


def in_bounds(pos: Position, shape: tuple[int, ...]) -> bool:
    """Return True if *pos* is a valid ``[x, y]`` index for *shape*."""
    x, y = pos
    width, height = shape[:2]
    return 0 <= x < width and 0 <= y < height


def _within_radius(pos: Position, origin: Position, radius: int) -> bool:
    # Chebyshev distance equals row depth in every quadrant, so this matches
    # cutting the scan off after `radius` rows.
    return max(abs(pos[0] - origin[0]), abs(pos[1] - origin[1])) <= radius


def blocking_from_transparent(
    transparent: NDArray[np.bool_],
    origin: Position | None = None,
    radius: int | None = None,
) -> IsBlocking:
    """Build a blocking predicate over a transparency grid.

    Tiles outside the grid always block. When *radius* is given, tiles
    further than *radius* rows from *origin* block too, which stops the scan
    there.
    """
    if radius is not None and origin is None:
        raise ValueError("origin is required when radius is given")

    shape = transparent.shape

    def is_blocking(pos: Position) -> bool:
        if not in_bounds(pos, shape):
            return True
        if radius is not None and not _within_radius(pos, origin, radius):  # type: ignore[arg-type]
            return True
        return not transparent[pos[0], pos[1]]

    return is_blocking


class VisibleSet:
    """Sink that records each in-bounds visible position once.

    Positions outside the grid (or beyond *radius* from *origin*) are
    dropped, since the scan reports the walls bounding its sector even when
    those walls are off the map.
    """

    def __init__(
        self,
        shape: tuple[int, ...],
        origin: Position | None = None,
        radius: int | None = None,
    ) -> None:
        if radius is not None and origin is None:
            raise ValueError("origin is required when radius is given")
        self.shape = shape
        self.origin = origin
        self.radius = radius
        self._seen: set[Position] = set()
        self.positions: list[Position] = []

    def mark(self, pos: Position) -> None:
        if pos in self._seen or not in_bounds(pos, self.shape):
            return
        if self.radius is not None and not _within_radius(
            pos,
            self.origin,  # type: ignore[arg-type]
            self.radius,
        ):
            return
        self._seen.add(pos)
        self.positions.append(pos)

    __call__ = mark

    def __contains__(self, pos: object) -> bool:
        return pos in self._seen

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def to_array(self) -> NDArray[np.bool_]:
        visible = np.zeros(self.shape[:2], dtype=np.bool_)
        for x, y in self.positions:
            visible[x, y] = True
        return visible


def compute_fov_array(
    transparent: NDArray[np.bool_],
    origin: Position,
    radius: int | None = None,
    *,
    strategy: ScanStrategy | None = None,
) -> NDArray[np.bool_]:
    """Compute the set of tiles visible from *origin*.

    Args:
        transparent: Boolean array shaped ``(width, height)``.
            ``True`` means the tile is see-through.
        origin: ``(x, y)`` position of the viewer.
        radius: Maximum sight distance in rows. Tiles beyond this are never
            visible. ``None`` means unlimited.
        strategy: Scan strategy passed to :func:`compute_fov`.

    Returns:
        Boolean array with the same shape as *transparent*, where ``True``
        marks a visible tile. The origin is visible whenever it is on the
        grid, even if it is opaque.
    """
    sink = VisibleSet(transparent.shape, origin, radius)
    is_blocking = blocking_from_transparent(transparent, origin, radius)
    compute_fov(origin, is_blocking, sink.mark, strategy=strategy)
    logger.debug(
        f"FOV from {origin} (radius={radius}) on {transparent.shape} grid: "
        f"{len(sink)} visible tiles"
    )
    return sink.to_array()


def visible_positions(
    origin: Position,
    is_blocking: IsBlocking,
    *,
    strategy: ScanStrategy | None = None,
) -> set[Position]:
    """Return every position reported visible from *origin*.

    Unlike :class:`VisibleSet`, nothing is filtered: off-map walls reported
    by the scan are included.
    """
    visible: set[Position] = set()
    compute_fov(origin, is_blocking, visible.add, strategy=strategy)
    return visible


def format_visibility(visible: NDArray[np.bool_]) -> str:
    """Render a visibility array as lines of ``0``/``1``, one line per y."""
    width, height = visible.shape
    return "\n".join(
        "".join("1" if visible[x, y] else "0" for x in range(width))
        for y in range(height)
    )
