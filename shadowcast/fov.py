"""Field-of-view computation using Albert Ford's symmetric shadowcasting.

Implements the algorithm described at https://www.albertford.com/shadowcasting/
with exact rational slopes to avoid floating-point edge cases.

Key properties of symmetric shadowcasting:
- **Symmetry**: If floor tile A can see floor tile B, then B can see A.
- **Light walls**: Opaque tiles that border the visible sector are themselves
  visible (the wall that blocks you is always revealed).
- **No blind corners**: A wall seen only across a diagonal gap does not leak
  visibility to the floor behind it.

The map is never touched directly. Callers supply two callbacks: one reports
whether a position blocks sight, the other receives visible positions. Any
exception raised by either callback aborts the scan and propagates unchanged;
positions already marked are left in the caller's sink.
"""

from __future__ import annotations

import logging

from shadowcast import config
from shadowcast.quadrant import Cardinal, Quadrant
from shadowcast.row import Row, is_symmetric, slope
from shadowcast.types import IsBlocking, MarkVisible, Position, ScanStrategy
from shadowcast.util.rational import ExactFraction

logger = logging.getLogger(__name__)


def compute_fov(
    origin: Position,
    is_blocking: IsBlocking,
    mark_visible: MarkVisible,
    *,
    strategy: ScanStrategy | None = None,
) -> None:
    """Report every position visible from *origin* to *mark_visible*.

    Args:
        origin: ``(x, y)`` position of the viewer.
        is_blocking: Returns ``True`` for positions that block sight. It must
            treat positions outside the map as blocking, otherwise the scan
            runs on without bound. Making it return ``True`` beyond some
            distance is the way to limit the view radius.
        mark_visible: Called with each visible position. The origin is
            always reported first. A position may be reported more than once.
        strategy: ``"recursive"`` or ``"iterative"``. Defaults to
            ``config.DEFAULT_SCAN_STRATEGY``. The recursive scan needs one
            stack frame per row explored, so very deep open scans should use
            the iterative one.

    Raises:
        ValueError: If *strategy* is not a known scan strategy.
        SlopeOverflowError: If slope arithmetic exceeds the configured
            integer range.
    """
    if strategy is None:
        strategy = config.DEFAULT_SCAN_STRATEGY
    if strategy == "recursive":
        scanner = scan
    elif strategy == "iterative":
        scanner = scan_iterative
    else:
        raise ValueError(f"Unknown scan strategy: {strategy!r}")

    logger.debug(f"Computing FOV from {origin} ({strategy})")

    # The origin tile is always visible.
    mark_visible(origin)

    for cardinal in Cardinal:
        quadrant = Quadrant(cardinal, origin)
        first_row = Row(1, ExactFraction(-1, 1), ExactFraction(1, 1))
        try:
            scanner(first_row, quadrant, is_blocking, mark_visible)
        except Exception as e:
            logger.debug(
                f"FOV from {origin} aborted in {cardinal.name} quadrant: "
                f"{type(e).__name__}: {e}"
            )
            raise


def scan(
    row: Row,
    quadrant: Quadrant,
    is_blocking: IsBlocking,
    mark_visible: MarkVisible,
) -> None:
    """Scan *row* and, recursively, every deeper row still in view.

    *row*'s start slope is narrowed in place as the scan passes shadows, so
    the caller must hand over a row it no longer needs.
    """
    prev_tile = None
    prev_is_wall = False

    for tile in row.tiles():
        pos = quadrant.transform(tile)
        is_wall = is_blocking(pos)

        if is_wall or is_symmetric(row, tile):
            mark_visible(pos)

        if prev_tile is not None:
            if prev_is_wall and not is_wall:
                # Wall-to-floor: the sector re-opens at this tile's near edge.
                row.start_slope = slope(tile)
            elif not prev_is_wall and is_wall:
                # Floor-to-wall: a shadow begins. Follow the still-open part
                # of the sector outward before carrying on along this row.
                next_row = row.next()
                next_row.end_slope = slope(tile)
                scan(next_row, quadrant, is_blocking, mark_visible)

        prev_tile = tile
        prev_is_wall = is_wall

    # If the row ended on a floor tile, the sector continues unobstructed.
    if prev_tile is not None and not prev_is_wall:
        scan(row.next(), quadrant, is_blocking, mark_visible)


def scan_iterative(
    row: Row,
    quadrant: Quadrant,
    is_blocking: IsBlocking,
    mark_visible: MarkVisible,
) -> None:
    """Same scan as :func:`scan`, using an explicit stack instead of recursion.

    Rows are still walked left to right, but pending deeper rows are taken
    last-in first-out, so the order of ``mark_visible`` calls differs from
    the recursive scan. The set of positions reported is the same.
    """
    stack: list[Row] = [row]

    while stack:
        row = stack.pop()
        prev_tile = None
        prev_is_wall = False

        for tile in row.tiles():
            pos = quadrant.transform(tile)
            is_wall = is_blocking(pos)

            if is_wall or is_symmetric(row, tile):
                mark_visible(pos)

            if prev_tile is not None:
                if prev_is_wall and not is_wall:
                    row.start_slope = slope(tile)
                elif not prev_is_wall and is_wall:
                    next_row = row.next()
                    next_row.end_slope = slope(tile)
                    stack.append(next_row)

            prev_tile = tile
            prev_is_wall = is_wall

        if prev_tile is not None and not prev_is_wall:
            stack.append(row.next())
