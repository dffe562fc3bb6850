#!/usr/bin/env python3
"""Benchmark our symmetric shadowcasting against tcod's C implementation.

Times both scan strategies and tcod on identical inputs, prints a comparison
table, then checks that all three agree tile for tile.

Usage:
    uv run --extra bench python scripts/benchmark_fov.py
"""

# ruff: noqa: E402  # Allow path setup before importing project modules

from __future__ import annotations

import sys
import timeit
from pathlib import Path

import numpy as np
import tcod.constants
import tcod.map

# Add the project root to Python path so running as a script works.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from shadowcast.environment.grid import compute_fov_array
from shadowcast.types import ScanStrategy


def _make_open_field(width: int, height: int) -> np.ndarray:
    """All-transparent map (worst case - maximum visible tiles)."""
    return np.ones((width, height), dtype=np.bool_)


def _make_dungeon(
    width: int, height: int, wall_fraction: float, seed: int
) -> np.ndarray:
    """Randomly scatter walls to simulate a dungeon layout."""
    rng = np.random.default_rng(seed)
    return (rng.random((width, height)) > wall_fraction).astype(np.bool_)


def _time_ms(fn) -> float:
    fn()  # Warm up.
    number, total = timeit.Timer(fn).autorange()
    return (total / number) * 1000


def _tcod_fov(
    transparent: np.ndarray, origin: tuple[int, int], radius: int
) -> np.ndarray:
    # radius=0 makes tcod unlimited; clipping to our square radius afterwards
    # does the limiting so the two are comparable.
    visible = tcod.map.compute_fov(
        transparent,
        origin,
        radius=0,
        light_walls=True,
        algorithm=tcod.constants.FOV_SYMMETRIC_SHADOWCAST,
    )
    ox, oy = origin
    xs, ys = np.ogrid[: transparent.shape[0], : transparent.shape[1]]
    in_square = np.maximum(np.abs(xs - ox), np.abs(ys - oy)) <= radius
    return visible & in_square


def _ours(strategy: ScanStrategy):
    def run(
        transparent: np.ndarray, origin: tuple[int, int], radius: int
    ) -> np.ndarray:
        return compute_fov_array(transparent, origin, radius, strategy=strategy)

    return run


def main() -> None:
    scenarios: list[tuple[str, np.ndarray, tuple[int, int], int]] = [
        ("Open field", _make_open_field(120, 80), (60, 40), 50),
        ("Dungeon (~40% walls)", _make_dungeon(120, 80, 0.40, seed=42), (60, 40), 50),
        ("Small radius", _make_open_field(120, 80), (60, 40), 10),
    ]
    recursive = _ours("recursive")
    iterative = _ours("iterative")

    print("FOV Benchmark: shadowcast (pure Python) vs tcod (C)")
    print("=" * 72)
    print(
        f"{'Scenario':<24} {'tcod (C)':>10} {'recursive':>12} "
        f"{'iterative':>12} {'ratio':>8}"
    )
    print("-" * 72)

    for name, transparent, origin, radius in scenarios:
        tcod_ms = _time_ms(lambda: _tcod_fov(transparent, origin, radius))
        rec_ms = _time_ms(lambda: recursive(transparent, origin, radius))
        it_ms = _time_ms(lambda: iterative(transparent, origin, radius))
        ratio = rec_ms / tcod_ms if tcod_ms > 0 else float("inf")
        print(
            f"{name:<24} {tcod_ms:>9.3f}ms {rec_ms:>9.3f}ms "
            f"{it_ms:>9.3f}ms {ratio:>7.1f}x"
        )

    print("-" * 72)
    print("Ratio = recursive / tcod. Lower is closer to C performance.")
    print()

    # Correctness check: verify all implementations produce the same results.
    print("Correctness check...")
    transparent = _make_dungeon(120, 80, 0.40, seed=123)
    origin = (60, 40)
    radius = 50

    theirs = _tcod_fov(transparent, origin, radius)
    for label, ours in [
        ("recursive", recursive(transparent, origin, radius)),
        ("iterative", iterative(transparent, origin, radius)),
    ]:
        match_count = np.sum(ours == theirs)
        total_tiles = ours.size
        mismatch_count = total_tiles - match_count
        match_pct = match_count / total_tiles * 100

        print(f"  {label}: {match_pct:.2f}% ({match_count}/{total_tiles} tiles)")
        if mismatch_count > 0:
            print(f"    Mismatches: {mismatch_count} tiles")
            diff_coords = np.argwhere(ours != theirs)
            for coord in diff_coords[:10]:
                x, y = coord
                print(
                    f"      ({x}, {y}): ours={ours[x, y]}, tcod={theirs[x, y]}, "
                    f"transparent={transparent[x, y]}"
                )
        else:
            print("    Perfect match!")


if __name__ == "__main__":
    main()
