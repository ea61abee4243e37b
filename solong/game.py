"""Game state and player movement rules."""

from __future__ import annotations

from enum import Enum, IntEnum

from solong.mapfile import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, WALL, GameMap, MapError

ANIMATION_DELAY = 2000

OUT_OF_BOUNDS_MESSAGE = "Error: New position is out of bounds!"
EXIT_LOCKED_MESSAGE = "You need to collect all collectibles before exiting!"
LOST_MESSAGE = "You lose! Enemy touched you!"


class Direction(IntEnum):
    """The way the player sprite faces."""

    FRONT = 0
    BACK = 1
    LEFT = 2
    RIGHT = 3


class MoveOutcome(Enum):
    """What a single move attempt did."""

    MOVED = "moved"
    BLOCKED = "blocked"
    OUT_OF_BOUNDS = "out_of_bounds"
    EXIT_LOCKED = "exit_locked"
    WON = "won"
    LOST = "lost"
    GAME_OVER = "game_over"


class Game:
    """A running game on one map.

    After each move ``last_message`` holds the text the move reports to the
    player, or ``None`` when it reports nothing.
    """

    def __init__(self, game_map: GameMap, bonus: bool = False) -> None:
        start = game_map.find_player()
        if start is None:
            raise MapError("Map Error: Player Missing or more than one")
        self.map = game_map
        self.bonus = bonus
        self.player_x, self.player_y = start
        self.direction = Direction.FRONT
        self.collectibles = game_map.count_collectibles()
        self.moves = 0
        self.enemy_frame = 0
        self.won = False
        self.lost = False
        self.last_message: str | None = None
        self._frame = 0

    @property
    def over(self) -> bool:
        return self.won or self.lost

    @property
    def position(self) -> tuple[int, int]:
        return self.player_x, self.player_y

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.map.width and 0 <= y < self.map.height

    def _face_towards(self, new_x: int, new_y: int) -> None:
        if new_y < self.player_y:
            self.direction = Direction.BACK
        elif new_y > self.player_y:
            self.direction = Direction.FRONT
        elif new_x < self.player_x:
            self.direction = Direction.LEFT
        elif new_x > self.player_x:
            self.direction = Direction.RIGHT

    def move_to(self, new_x: int, new_y: int) -> MoveOutcome:
        """Try to move the player to (new_x, new_y) and report the outcome."""
        self.last_message = None
        if self.over:
            return MoveOutcome.GAME_OVER
        if not self._in_bounds(new_x, new_y):
            self.last_message = OUT_OF_BOUNDS_MESSAGE
            return MoveOutcome.OUT_OF_BOUNDS
        target = self.map.tile(new_x, new_y)
        if target == WALL:
            return MoveOutcome.BLOCKED
        if self.bonus and target == ENEMY:
            self.lost = True
            self.last_message = LOST_MESSAGE
            return MoveOutcome.LOST
        if target == COLLECTIBLE:
            self.collectibles -= 1
            self.map.set_tile(new_x, new_y, FLOOR)
        if target == EXIT:
            if self.collectibles == 0:
                self.moves += 1
                self.won = True
                self.last_message = f"Congratulations! You won with {self.moves} moves!"
                return MoveOutcome.WON
            self.last_message = EXIT_LOCKED_MESSAGE
            return MoveOutcome.EXIT_LOCKED
        self._face_towards(new_x, new_y)
        self.map.set_tile(self.player_x, self.player_y, FLOOR)
        self.map.set_tile(new_x, new_y, PLAYER)
        self.player_x, self.player_y = new_x, new_y
        self.moves += 1
        self.last_message = f"Moves: {self.moves}"
        return MoveOutcome.MOVED

    def move(self, dx: int, dy: int) -> MoveOutcome:
        """Try to move the player by (dx, dy)."""
        return self.move_to(self.player_x + dx, self.player_y + dy)

    def tick_animation(self) -> int:
        """Advance the enemy animation by one frame and return the sprite index."""
        self._frame = (self._frame + 1) % (2 * ANIMATION_DELAY)
        self.enemy_frame = int(self._frame >= ANIMATION_DELAY)
        return self.enemy_frame