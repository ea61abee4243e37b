import os

import pygame
import pytest

from solong.game import Direction, Game
from solong.mapfile import parse_map
from solong.render import (
    TILE_SIZE,
    Textures,
    draw_map,
    load_textures,
    moves_caption,
    player_texture_name,
    tile_texture_name,
)

COLORS = {
    "wall": (10, 20, 30),
    "floor": (40, 50, 60),
    "collectible": (70, 80, 90),
    "exit": (100, 110, 120),
    "player_front": (130, 140, 150),
    "player_back": (160, 170, 180),
    "player_left": (190, 200, 210),
    "player_right": (220, 230, 240),
    "enemy1": (250, 0, 10),
    "enemy2": (0, 250, 20),
}


def _solid(color):
    surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
    surface.fill(color)
    return surface


def _textures():
    return Textures(**{name: _solid(color) for name, color in COLORS.items()})


def _rgb(surface, x, y):
    return tuple(surface.get_at((x * TILE_SIZE + 5, y * TILE_SIZE + 5)))[:3]


def _write_textures(directory, names):
    for name in names:
        bmp = directory / f"{name}.bmp"
        pygame.image.save(_solid(COLORS[name]), str(bmp))
        os.replace(bmp, directory / f"{name}.xpm")


@pytest.mark.parametrize(
    "tile, frame, expected",
    [
        ("1", 0, "wall"),
        ("0", 0, "floor"),
        ("C", 0, "collectible"),
        ("E", 0, "exit"),
        ("M", 0, "enemy1"),
        ("M", 1, "enemy2"),
        ("P", 0, None),
    ],
)
def test_tile_texture_name(tile, frame, expected):
    assert tile_texture_name(tile, frame) == expected


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.FRONT, "player_front"),
        (Direction.BACK, "player_back"),
        (Direction.LEFT, "player_left"),
        (Direction.RIGHT, "player_right"),
        (7, "player_front"),
    ],
)
def test_player_texture_name(direction, expected):
    assert player_texture_name(direction) == expected


def test_moves_caption():
    assert moves_caption(12) == "Moves: 12"


def test_draw_map_places_each_tile():
    game = Game(parse_map("11111\n1PCE1\n11111\n"))
    surface = pygame.Surface((game.map.width * TILE_SIZE, game.map.height * TILE_SIZE))
    draw_map(surface, game, _textures())
    assert _rgb(surface, 0, 0) == COLORS["wall"]
    assert _rgb(surface, 1, 1) == COLORS["player_front"]
    assert _rgb(surface, 2, 1) == COLORS["collectible"]
    assert _rgb(surface, 3, 1) == COLORS["exit"]


def test_draw_map_follows_player_facing():
    game = Game(parse_map("11111\n1P0C1\n1E001\n11111\n"))
    game.move(1, 0)
    surface = pygame.Surface((game.map.width * TILE_SIZE, game.map.height * TILE_SIZE))
    draw_map(surface, game, _textures())
    assert _rgb(surface, 2, 1) == COLORS["player_right"]
    assert _rgb(surface, 1, 1) == COLORS["floor"]


def test_draw_map_animates_enemies():
    game = Game(parse_map("111111\n1PCEM1\n111111\n", bonus=True), bonus=True)
    surface = pygame.Surface((game.map.width * TILE_SIZE, game.map.height * TILE_SIZE))
    textures = _textures()
    draw_map(surface, game, textures)
    assert _rgb(surface, 4, 1) == COLORS["enemy1"]
    game.enemy_frame = 1
    draw_map(surface, game, textures)
    assert _rgb(surface, 4, 1) == COLORS["enemy2"]


def test_load_textures_reads_files(tmp_path):
    _write_textures(tmp_path, COLORS)
    textures = load_textures(tmp_path, bonus=True)
    assert tuple(textures.wall.get_at((0, 0)))[:3] == COLORS["wall"]
    assert tuple(textures.enemy2.get_at((0, 0)))[:3] == COLORS["enemy2"]


def test_load_textures_without_bonus_skips_enemies(tmp_path):
    _write_textures(tmp_path, [n for n in COLORS if not n.startswith("enemy")])
    textures = load_textures(tmp_path)
    assert textures.enemy1 is None
    assert tuple(textures.player_left.get_at((0, 0)))[:3] == COLORS["player_left"]


def test_missing_room_textures(tmp_path):
    with pytest.raises(RuntimeError, match="Failed to load room textures"):
        load_textures(tmp_path)


def test_missing_player_textures(tmp_path):
    _write_textures(tmp_path, ["wall", "floor", "collectible", "exit"])
    with pytest.raises(RuntimeError, match="Failed to load player textures"):
        load_textures(tmp_path)


def test_missing_enemy_textures_reported_first(tmp_path):
    with pytest.raises(RuntimeError, match="Failed to load enemy textures"):
        load_textures(tmp_path, bonus=True)