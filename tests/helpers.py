from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from shadowcast.types import Position


def grid_from_rows(rows: Sequence[Sequence[int]]) -> np.ndarray:
    """Build a transparency grid from rows of tiles (0 = open, 1 = wall).

    Rows are listed top to bottom, so ``rows[y][x]`` lands at ``[x, y]``.
    """
    return np.array(rows, dtype=np.uint8).T == 0


def mask_from_rows(rows: Sequence[str]) -> np.ndarray:
    """Build an expected visibility mask from strings like ``"1100111"``."""
    return np.array([[ch == "1" for ch in row] for row in rows], dtype=np.bool_).T


class RecordingSink:
    """Sink that keeps every call, duplicates included, in order."""

    def __init__(self) -> None:
        self.calls: list[Position] = []

    def __call__(self, pos: Position) -> None:
        self.calls.append(pos)
