"""Drawing the game map onto a pygame surface."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

from solong.game import Direction, Game
from solong.mapfile import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, WALL

TILE_SIZE = 64
TEXTURE_SUFFIX = ".xpm"

ROOM_TEXTURES = ("wall", "floor", "collectible", "exit")
PLAYER_TEXTURES = ("player_front", "player_back", "player_left", "player_right")
ENEMY_TEXTURES = ("enemy1", "enemy2")

ROOM_TEXTURES_FAILED = "Error: Failed to load room textures"
PLAYER_TEXTURES_FAILED = "Error: Failed to load player textures"
ENEMY_TEXTURES_FAILED = "Error: Failed to load enemy textures"

_TILE_TEXTURES = {
    WALL: "wall",
    FLOOR: "floor",
    COLLECTIBLE: "collectible",
    EXIT: "exit",
}

_PLAYER_BY_DIRECTION = {
    Direction.FRONT: "player_front",
    Direction.BACK: "player_back",
    Direction.LEFT: "player_left",
    Direction.RIGHT: "player_right",
}


@dataclass
class Textures:
    """The images used to draw tiles, the player and, in bonus mode, enemies."""

    wall: pygame.Surface
    floor: pygame.Surface
    collectible: pygame.Surface
    exit: pygame.Surface
    player_front: pygame.Surface
    player_back: pygame.Surface
    player_left: pygame.Surface
    player_right: pygame.Surface
    enemy1: pygame.Surface | None = None
    enemy2: pygame.Surface | None = None

    def image(self, name: str) -> pygame.Surface | None:
        """Return the image called ``name``, or ``None`` if it is not loaded."""
        return getattr(self, name, None)


def _load_image(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        return None


def load_textures(directory: str | Path = "textures", bonus: bool = False) -> Textures:
    """Load every texture from ``directory``; raise ``RuntimeError`` if one is missing."""
    base = Path(directory)
    names = ROOM_TEXTURES + PLAYER_TEXTURES + (ENEMY_TEXTURES if bonus else ())
    images = {name: _load_image(base / f"{name}{TEXTURE_SUFFIX}") for name in names}

    if bonus and any(images[name] is None for name in ENEMY_TEXTURES):
        raise RuntimeError(ENEMY_TEXTURES_FAILED)
    if any(images[name] is None for name in ROOM_TEXTURES):
        raise RuntimeError(ROOM_TEXTURES_FAILED)
    if any(images[name] is None for name in PLAYER_TEXTURES):
        raise RuntimeError(PLAYER_TEXTURES_FAILED)
    return Textures(**images)


def tile_texture_name(tile: str, enemy_frame: int = 0) -> str | None:
    """Return the texture drawn for ``tile``; the player tile has none of its own."""
    if tile == ENEMY:
        return ENEMY_TEXTURES[0] if enemy_frame == 0 else ENEMY_TEXTURES[1]
    return _TILE_TEXTURES.get(tile)


def player_texture_name(direction: int) -> str:
    """Return the player texture for a facing; unknown facings show the front."""
    try:
        return _PLAYER_BY_DIRECTION[Direction(direction)]
    except ValueError:
        return "player_front"


def draw_map(surface: pygame.Surface, game: Game, textures: Textures) -> None:
    """Blit every tile of the game's map, and the player, onto ``surface``."""
    for y, row in enumerate(game.map.grid):
        for x, tile in enumerate(row):
            position = (x * TILE_SIZE, y * TILE_SIZE)
            name = tile_texture_name(tile, game.enemy_frame)
            image = textures.image(name) if name else None
            if image is not None:
                surface.blit(image, position)
            if tile == PLAYER:
                player = textures.image(player_texture_name(game.direction))
                if player is not None:
                    surface.blit(player, position)


def moves_caption(moves: int) -> str:
    """Return the move counter text shown in the window."""
    return f"Moves: {moves}"