# solong

A small tile-based puzzle game. You walk a player around a walled map,
pick up every collectible, and then step onto the exit. Every move
counts, and the total is printed when you win.

## Installing

    pip install .

The window is drawn with pygame.

## Playing

    solong path/to/map.ber
    solong --bonus path/to/map.ber
    solong --textures path/to/textures path/to/map.ber

Options:

| Option            | Effect                                                   |
|-------------------|----------------------------------------------------------|
| `--bonus`         | play in bonus mode (enemies, on-screen move counter)     |
| `--textures DIR`  | load images from `DIR` instead of `textures`             |

Exactly one map path must be given, and it must end in `.ber`;
otherwise a usage line or an error is printed and the command exits
with status 1.

Controls:

| Key    | Action     |
|--------|------------|
| W      | move up    |
| S      | move down  |
| A      | move left  |
| D      | move right |
| Escape | quit       |

Closing the window also quits. Every move is printed as `Moves: N`.
Walking into a wall does nothing. If you step onto the exit before you
have picked up all the collectibles, the game prints
`You need to collect all collectibles before exiting!` and you stay
where you are. Stepping onto the exit with everything collected prints
`Congratulations! You won with N moves!` and closes the window.

## Map files

A map is a plain text file with the `.ber` extension. It is made of
rows of equal length built from these characters:

| Char | Meaning                  |
|------|--------------------------|
| `1`  | wall                     |
| `0`  | floor                    |
| `P`  | player start (exactly 1) |
| `E`  | exit (exactly 1)         |
| `C`  | collectible (at least 1) |
| `M`  | enemy (bonus mode only)  |

The map must be enclosed by walls. The exit and every collectible must
be reachable from the player's start; the exit itself cannot be walked
through on the way. If a map breaks any of these rules, the game prints
an `Error` or `Map Error` message and exits with status 1.

Example:

    1111111111
    1P0C00C0E1
    1111111111

In bonus mode, touching an enemy loses the game: `You lose! Enemy
touched you!` is printed and shown in the window for three seconds
before it closes. Enemies also count as walls when the map is checked
for a route to the collectibles and the exit. The window shows an
animated enemy sprite and a move counter in its top-left corner.

## Textures

The game loads its images from the `textures` directory (relative to
the current directory) or from the one given with `--textures`:

- `wall.xpm`
- `floor.xpm`
- `collectible.xpm`
- `exit.xpm`
- `player_front.xpm`, `player_back.xpm`, `player_left.xpm`, `player_right.xpm`
- `enemy1.xpm` and `enemy2.xpm` (bonus mode)

If any of them cannot be loaded, an error is printed and the command
exits with status 1.

## Using it as a library

```python
from solong.mapfile import load_map
from solong.game import Game, MoveOutcome

game = Game(load_map("maps/level.ber", bonus=False), bonus=False)
outcome = game.move(1, 0)          # a MoveOutcome
print(game.last_message)           # e.g. "Moves: 1", or None
```

- `solong.mapfile` — `load_map`, `parse_map`, `read_map_lines`,
  `validate_map`, `has_ber_extension`, the `GameMap` grid and the
  `MapError` exception raised for unreadable or unplayable maps.
- `solong.pathcheck` — `flood_fill` and `path_is_valid`, which check
  maps without opening a window.
- `solong.game` — `Game`, with `move`, `move_to` and `tick_animation`,
  plus the `Direction` and `MoveOutcome` enums.
- `solong.render` — `load_textures`, `draw_map` and helpers that pick
  the texture for a tile or a facing.
- `solong.cli` — `main`, the command above, and `run_window`, which
  plays a `Game` in a pygame window.

## Running the tests

    pip install .[test]
    pytest