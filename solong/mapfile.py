"""Reading and validating ``.ber`` map files.

A map is a rectangle of tiles: ``'1'`` wall, ``'0'`` floor, ``'P'`` player,
``'E'`` exit, ``'C'`` collectible and, in bonus mode, ``'M'`` enemy. It must
be closed by walls and hold exactly one player, exactly one exit and at least
one collectible. Every collectible and the exit must be reachable from the
player.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from solong.pathcheck import path_is_valid

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "M"

_BASE_TILES = frozenset({PLAYER, EXIT, COLLECTIBLE, FLOOR, WALL})
_BONUS_TILES = _BASE_TILES | {ENEMY}

EMPTY_FILE = "Error: Empty map file"
INCONSISTENT_FILE = "Error: Map lines have inconsistent lengths"
NOT_A_FILE = "Error: expected a file, not a directory"
CANNOT_OPEN = "Error: Could not open map file"
INVALID_MAP = "Error: Invalid map"
INVALID_MAP_BONUS = "Error: Invalid map configuration"
INCONSISTENT_ROWS = "Map Error: Inconsistent line lengths"
WRONG_ELEMENTS = "Map Error: Wrong elements inside map."
BAD_PLAYER_COUNT = "Map Error: Player Missing or more than one"
BAD_EXIT_COUNT = "Map Error: Exit Missing or more than one"
NO_COLLECTIBLES = "Map Error: No collectibles"
INVALID_PATH = "Error: map with invalid path"
INVALID_PATH_BONUS = "Error: Map has unreachable collectibles or exit"


class MapError(Exception):
    """A map file could not be read or does not describe a playable map."""


@dataclass
class GameMap:
    """A mutable grid of tiles, addressed as (x, y)."""

    grid: list[list[str]] = field(default_factory=list)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> GameMap:
        return cls([list(row) for row in rows])

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def rows(self) -> list[str]:
        """The map as a list of strings, one per row."""
        return ["".join(row) for row in self.grid]

    def _cells(self) -> Iterator[tuple[int, int, str]]:
        for y, row in enumerate(self.grid):
            for x, tile in enumerate(row):
                yield x, y, tile

    def find_player(self) -> tuple[int, int] | None:
        """Return the (x, y) of the first player tile in row order, if any."""
        return next(((x, y) for x, y, tile in self._cells() if tile == PLAYER), None)

    def count_collectibles(self) -> int:
        return sum(tile == COLLECTIBLE for _, _, tile in self._cells())

    def tile(self, x: int, y: int) -> str:
        if not (0 <= y < self.height and 0 <= x < len(self.grid[y])):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def set_tile(self, x: int, y: int, value: str) -> None:
        if not (0 <= y < self.height and 0 <= x < len(self.grid[y])):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        self.grid[y][x] = value


def has_ber_extension(filename: str) -> bool:
    """Return whether the text from the last dot on is exactly ``.ber``.

    A dot at the very start of the name does not count as an extension.
    """
    dot = filename.rfind(".")
    return dot > 0 and filename[dot:] == ".ber"


def _split_lines(text: str) -> list[str]:
    """Split map text into rows, raising if it is empty or ragged."""
    if not text:
        raise MapError(EMPTY_FILE)
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    first = len(lines[0])
    if any(len(line) != first for line in lines[1:]):
        raise MapError(INCONSISTENT_FILE)
    return lines


def _read_text(path: str | os.PathLike[str]) -> str:
    if os.path.isdir(path):
        raise MapError(NOT_A_FILE)
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise MapError(CANNOT_OPEN) from exc


def read_map_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a map file and return its rows without line endings."""
    return _split_lines(_read_text(path))


def _check_layout(rows: Sequence[str], width: int, bonus: bool) -> tuple[int, int, int]:
    """Check shape, borders and tile set; return player, exit, collectible counts."""
    allowed = _BONUS_TILES if bonus else _BASE_TILES
    invalid = INVALID_MAP_BONUS if bonus else INVALID_MAP
    height = len(rows)
    players = exits = collectibles = 0
    for y, row in enumerate(rows):
        if len(row) != width:
            raise MapError(invalid if bonus else INCONSISTENT_ROWS)
        for x, tile in enumerate(row):
            on_border = y in (0, height - 1) or x in (0, width - 1)
            if on_border and tile != WALL:
                raise MapError(invalid)
            if tile not in allowed:
                raise MapError(WRONG_ELEMENTS)
            if tile == PLAYER:
                players += 1
            elif tile == EXIT:
                exits += 1
            elif tile == COLLECTIBLE:
                collectibles += 1
    return players, exits, collectibles


def _validate(rows: Sequence[str], width: int, bonus: bool) -> None:
    players, exits, collectibles = _check_layout(rows, width, bonus)
    if players != 1:
        raise MapError(BAD_PLAYER_COUNT)
    if exits != 1:
        raise MapError(BAD_EXIT_COUNT)
    if collectibles < 1:
        raise MapError(NO_COLLECTIBLES)
    start = GameMap.from_rows(rows).find_player()
    if start is None or not path_is_valid(rows, start, collectibles, enemies_block=bonus):
        raise MapError(INVALID_PATH_BONUS if bonus else INVALID_PATH)


def validate_map(rows: Sequence[str], bonus: bool = False) -> None:
    """Raise :class:`MapError` unless ``rows`` describe a playable map."""
    if not rows:
        raise MapError(EMPTY_FILE)
    _validate(rows, len(rows[0]), bonus)


def parse_map(text: str, bonus: bool = False) -> GameMap:
    """Parse and validate the contents of a map file."""
    rows = _split_lines(text)
    width = len(rows[0])
    if len(rows) == 1 and not text.endswith("\n"):
        # The width is taken from the first line less its line ending, so a
        # lone unterminated line is one column longer than the map width.
        width -= 1
    _validate(rows, width, bonus)
    return GameMap.from_rows(rows)


def load_map(path: str | os.PathLike[str], bonus: bool = False) -> GameMap:
    """Read, parse and validate a map file."""
    return parse_map(_read_text(path), bonus)