"""Command line entry point and window loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import pygame

from solong.game import Game, MoveOutcome
from solong.mapfile import MapError, has_ber_extension, load_map
from solong.render import TILE_SIZE, Textures, draw_map, load_textures, moves_caption

PROG = "solong"
USAGE = f"Usage: {PROG} <path/map_file.ber>"
BAD_EXTENSION = "Error: Map file must have .ber extension"
LOST_TEXT = "You lose! Enemy touched you!"

WHITE = (255, 255, 255)
RED = (255, 0, 0)
BLACK = (0, 0, 0)
DEFEAT_PAUSE_MS = 3000

_KEY_DELTAS = {
    pygame.K_w: (0, -1),
    pygame.K_s: (0, 1),
    pygame.K_a: (-1, 0),
    pygame.K_d: (1, 0),
}


def delta_for_key(key: int) -> tuple[int, int] | None:
    """Return the (dx, dy) step for a movement key, or ``None`` for other keys."""
    return _KEY_DELTAS.get(key)


def _say(message: str) -> None:
    print(message, flush=True)


def _render_frame(
    screen: pygame.Surface,
    game: Game,
    textures: Textures,
    font: pygame.font.Font | None,
) -> None:
    screen.fill(BLACK)
    draw_map(screen, game, textures)
    if game.bonus and font is not None:
        screen.blit(font.render(moves_caption(game.moves), True, WHITE), (10, 20))
        game.tick_animation()
    pygame.display.flip()


def _show_defeat(screen: pygame.Surface, game: Game, font: pygame.font.Font | None) -> None:
    if font is not None:
        x = game.map.width * TILE_SIZE // 2 - 50
        y = game.map.height * TILE_SIZE // 2
        screen.blit(font.render(LOST_TEXT, True, RED), (x, y))
        pygame.display.flip()
    pygame.time.wait(DEFEAT_PAUSE_MS)


def _play(game: Game, texture_dir: str | Path) -> int:
    size = (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
    screen = pygame.display.set_mode(size)
    pygame.display.set_caption("So Long Bonus" if game.bonus else "So Long")
    try:
        textures = load_textures(texture_dir, game.bonus)
    except RuntimeError as exc:
        _say(str(exc))
        return 1
    font = pygame.font.Font(None, 24) if game.bonus else None
    _render_frame(screen, game, textures, font)

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return 0
            if event.type != pygame.KEYUP:
                continue
            if event.key == pygame.K_ESCAPE:
                return 0
            delta = delta_for_key(event.key)
            if delta is None:
                continue
            outcome = game.move(*delta)
            if game.last_message:
                _say(game.last_message)
            if outcome is MoveOutcome.WON:
                return 0
            if outcome is MoveOutcome.LOST:
                _show_defeat(screen, game, font)
                return 0
        _render_frame(screen, game, textures, font)


def run_window(game: Game, texture_dir: str | Path = "textures") -> int:
    """Open a window and play ``game`` until it ends; return the exit status."""
    pygame.init()
    try:
        return _play(game, texture_dir)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named on the command line."""
    args = iter(sys.argv[1:] if argv is None else argv)
    bonus = False
    texture_dir = "textures"
    positional: list[str] = []
    for arg in args:
        if arg == "--bonus":
            bonus = True
        elif arg == "--textures":
            value = next(args, None)
            if value is None:
                _say(USAGE)
                return 1
            texture_dir = value
        else:
            positional.append(arg)

    if len(positional) != 1:
        _say(USAGE)
        return 1
    map_path = positional[0]
    if not has_ber_extension(map_path):
        _say(BAD_EXTENSION)
        return 1
    try:
        game_map = load_map(map_path, bonus)
    except MapError as exc:
        _say(str(exc))
        return 1
    return run_window(Game(game_map, bonus), texture_dir)


if __name__ == "__main__":
    sys.exit(main())