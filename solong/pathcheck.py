"""Reachability checks for game maps.

A map is a sequence of equal-length rows. ``'1'`` is a wall, ``'C'`` a
collectible, ``'E'`` the exit and ``'M'`` an enemy. The exit can be reached
but not walked through, so the fill never spreads beyond it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

WALL = "1"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "M"

Position = tuple[int, int]


@dataclass(frozen=True)
class FloodResult:
    """What a flood fill from the player's position could reach."""

    collectibles: int = 0
    exit_reachable: bool = False
    visited: frozenset[Position] = field(default_factory=frozenset)


def _tile_at(rows: Sequence[str], x: int, y: int) -> str | None:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return None


def flood_fill(
    rows: Sequence[str], start: Position, enemies_block: bool = False
) -> FloodResult:
    """Fill the map from ``start`` (x, y) and report what was reached.

    Walls always block. Enemies block when ``enemies_block`` is true.
    Cells outside the map are treated as walls.
    """
    blocking = {WALL, ENEMY} if enemies_block else {WALL}
    visited: set[Position] = set()
    collectibles = 0
    exit_reachable = False
    stack: list[Position] = [start]

    while stack:
        x, y = stack.pop()
        if (x, y) in visited:
            continue
        tile = _tile_at(rows, x, y)
        if tile is None or tile in blocking:
            continue
        visited.add((x, y))
        if tile == EXIT:
            exit_reachable = True
            continue
        if tile == COLLECTIBLE:
            collectibles += 1
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))

    return FloodResult(collectibles, exit_reachable, frozenset(visited))


def path_is_valid(
    rows: Sequence[str],
    start: Position,
    collectibles: int,
    enemies_block: bool = False,
) -> bool:
    """Return whether every collectible and the exit can be reached from ``start``."""
    result = flood_fill(rows, start, enemies_block)
    return result.collectibles == collectibles and result.exit_reachable