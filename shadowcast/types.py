from __future__ import annotations

from collections.abc import Callable
from typing import Literal, TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

TileCoord: TypeAlias = int  # Always integer tile position

# Absolute grid position. Any pair is valid, including cells off the map.
Position: TypeAlias = tuple[TileCoord, TileCoord]  # Example: (5, 3) = x=5, y=3

# Position inside a quadrant's local frame, before transformation.
LocalTile: TypeAlias = tuple[int, int]  # Example: (2, -1) = depth 2, column -1

# =============================================================================
# CALLBACK TYPES
# =============================================================================

# Returns True when the tile at the position blocks sight.
IsBlocking: TypeAlias = Callable[[Position], bool]

# Receives each visible position. May be called more than once per position.
MarkVisible: TypeAlias = Callable[[Position], None]

ScanStrategy: TypeAlias = Literal["recursive", "iterative"]
