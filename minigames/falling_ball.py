"""Falling-ball game: dodge the falling balls, catch the healing ones."""

from __future__ import annotations

import argparse
import itertools
import random
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Protocol, Sequence

from .console import Color, KeyboardInput, MoveDir, Screen

MAP_HEIGHT = 25
MAP_WIDTH = 8
MAX_BALLS = 40
MAX_LIFE = 10
START_LIFE = 3
SCORE_PER_LEVEL = 100

SPAWN_FRAMES = 3
BLUE_FRAMES = 2
HEAL_FRAMES = 3
FRAME_SECONDS = 0.05

CELL = "□"
PLAYER = "♥"
HIT = "☆"
HEAL_BALL = "○"
FALLING_BALL = "▼"
BLANK = "  "


class _Rng(Protocol):
    def randrange(self, stop: int) -> int: ...


class BallType(IntEnum):
    YELLOW = 0
    BLUE = 1
    HEAL = 2


@dataclass
class Position:
    x: int = -1
    y: int = -1

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)


_MOVES = {
    MoveDir.LEFT: Position(-1, 0),
    MoveDir.RIGHT: Position(1, 0),
}

_BALL_LOOKS = {
    BallType.HEAL: (HEAL_BALL, Color.RIGHT_GREEN),
    BallType.YELLOW: (FALLING_BALL, Color.YELLOW),
    BallType.BLUE: (FALLING_BALL, Color.RIGHT_BLUE),
}


@dataclass
class FallingBallGame:
    """State of one game, advanced one frame at a time."""

    rng: _Rng = field(default_factory=random.SystemRandom)
    player: Position = field(default_factory=lambda: Position(MAP_WIDTH // 2, MAP_HEIGHT - 1))
    balls: dict[BallType, list[Position]] = field(
        default_factory=lambda: {ball_type: [] for ball_type in BallType}
    )
    score: int = 0
    life: int = START_LIFE
    spawn_timer: int = SPAWN_FRAMES
    blue_timer: int = BLUE_FRAMES
    heal_timer: int = HEAL_FRAMES
    hit: bool = False
    over: bool = False

    @property
    def level(self) -> int:
        return self.score // SCORE_PER_LEVEL + 1

    def spawn_ball(self, ball_type: BallType) -> Position | None:
        """Drop a new ball of the type at a random column; None when its pool is full."""
        pool = self.balls[BallType(ball_type)]
        if len(pool) >= MAX_BALLS:
            return None
        ball = Position(self.rng.randrange(MAP_WIDTH), 0)
        pool.append(ball)
        return ball

    def spawn_wave(self) -> list[BallType]:
        """Spawn one ball per level: 87% yellow, 10% blue, 3% healing."""
        spawned = []
        for _ in range(self.level):
            roll = SCORE_PER_LEVEL - self.rng.randrange(100)
            if roll > 13:
                ball_type = BallType.YELLOW
            elif roll > 3:
                ball_type = BallType.BLUE
            else:
                ball_type = BallType.HEAL
            self.spawn_ball(ball_type)
            spawned.append(ball_type)
        return spawned

    def update_balls(self, ball_type: BallType) -> int:
        """Move the balls of one type down a row; those already on the floor vanish.

        Yellow and blue balls that reach the floor score a point each.
        Returns how many balls vanished.
        """
        ball_type = BallType(ball_type)
        pool = self.balls[ball_type]
        remaining = []
        landed = 0
        for ball in pool:
            if ball.y == MAP_HEIGHT - 1:
                landed += 1
                if ball_type != BallType.HEAL:
                    self.score += 1
            else:
                ball.y += 1
                remaining.append(ball)
        pool[:] = remaining
        return landed

    def move_player(self, direction: MoveDir) -> None:
        """Move the player left or right, staying on the board."""
        if direction == MoveDir.LEFT and self.player.x <= 0:
            return
        if direction == MoveDir.RIGHT and self.player.x >= MAP_WIDTH - 1:
            return
        offset = _MOVES.get(direction)
        if offset is not None:
            self.player = self.player + offset

    def check_collision(self) -> bool:
        """Remove a ball under the player; True when it was a harmful one.

        A healing ball under the player gives one extra life instead.
        """
        for ball_type in (BallType.YELLOW, BallType.BLUE):
            pool = self.balls[ball_type]
            for index, ball in enumerate(pool):
                if ball == self.player:
                    del pool[index]
                    return True
        heals = self.balls[BallType.HEAL]
        for index, ball in enumerate(heals):
            if ball == self.player:
                del heals[index]
                self.life += 1
                return False
        return False

    def step(self, direction: MoveDir = MoveDir.NONE) -> bool:
        """Advance one frame; return False once the game is over."""
        if self.over:
            return False

        self.spawn_timer -= 1
        if self.spawn_timer == 0:
            self.spawn_wave()
            self.spawn_timer = SPAWN_FRAMES

        self.update_balls(BallType.YELLOW)
        if self.blue_timer == 0:
            self.update_balls(BallType.BLUE)
            self.blue_timer = BLUE_FRAMES
        if self.heal_timer == 0:
            self.update_balls(BallType.HEAL)
            self.heal_timer = HEAL_FRAMES

        self.move_player(direction)

        self.hit = self.check_collision()
        if self.hit:
            self.life -= 1
        if self.life <= 0:
            self.over = True
            return False

        self.blue_timer -= 1
        self.heal_timer -= 1
        return True

    def _cells(self) -> list[list[tuple[str, Color]]]:
        grid = [[(CELL, Color.WHITE) for _ in range(MAP_WIDTH)] for _ in range(MAP_HEIGHT)]

        def put(position: Position, glyph: str, color: Color) -> None:
            if 0 <= position.x < MAP_WIDTH and 0 <= position.y < MAP_HEIGHT:
                grid[position.y][position.x] = (glyph, color)

        put(self.player, PLAYER, Color.RED)
        for ball_type in (BallType.HEAL, BallType.YELLOW, BallType.BLUE):
            glyph, color = _BALL_LOOKS[ball_type]
            for ball in self.balls[ball_type]:
                put(ball, glyph, color)

        grid.append([])
        grid.append([(PLAYER, Color.RED)] * max(self.life, 0))
        grid.append([(f"SCORE : {self.score}", Color.SKY_BLUE)])
        return grid

    def render(self) -> str:
        """The board, the remaining lives and the score as lines of text."""
        return "\n".join("".join(glyph for glyph, _ in row) for row in self._cells())


def _draw(screen: Screen, game: FallingBallGame) -> None:
    for y, row in enumerate(game._cells()):
        screen.move_cursor(0, y)
        for color, cells in itertools.groupby(row, key=lambda cell: cell[1]):
            screen.set_color(color)
            screen.write("".join(glyph for glyph, _ in cells))
        if y > MAP_HEIGHT:
            screen.write(BLANK * MAX_LIFE * 2)
    if game.hit:
        screen.set_color(Color.RED)
        screen.move_cursor(game.player.x * 2, game.player.y)
        screen.write(HIT)
    screen.set_color(Color.WHITE)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="minigames-falling-ball", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for a repeatable game")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else random.SystemRandom()

    game = FallingBallGame(rng=rng)
    screen = Screen()
    screen.clear()
    screen.set_cursor_visible(False)
    try:
        with KeyboardInput() as keys:
            while game.step(keys.poll()):
                _draw(screen, game)
                time.sleep(FRAME_SECONDS)
        _draw(screen, game)
        screen.move_cursor(0, MAP_HEIGHT + 1)
        screen.write(BLANK * MAX_LIFE * 2)
        screen.move_cursor(0, MAP_HEIGHT + 3)
        screen.write("\n")
    except KeyboardInterrupt:
        pass
    finally:
        screen.set_color(Color.DEFAULT)
        screen.set_cursor_visible(True)
    return 0