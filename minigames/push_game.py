"""Push game: shove every ball onto a flag to clear the board."""

from __future__ import annotations

import argparse
import dataclasses
import random
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Protocol, Sequence

from .console import Color, KeyboardInput, MoveDir, Screen

MAP_SIZE = 10
GOAL_COUNT = 3
FRAME_SECONDS = 0.02

WALL = "■"
FLOOR = "□"
FLAG = "☆"
BALL = "♬"
CLEARED = "♨"
PLAYER = "♧"

_TEXT_COLOR = 14
_CLEAR_BACKGROUND = 12


class _Rng(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class Position:
    x: int = 0
    y: int = 0


@dataclass
class Goal:
    """One flag with the ball meant for it; a ball of None has been scored."""

    flag: Position
    ball: Position | None
    start: Position = field(default_factory=Position)
    clear: Position | None = None


class Key(IntEnum):
    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3


_HORIZONTAL = (Key.LEFT, Key.RIGHT)
_STEP = {Key.RIGHT: 1, Key.LEFT: -1, Key.UP: -1, Key.DOWN: 1}
_LIMIT = {Key.RIGHT: MAP_SIZE, Key.LEFT: 1, Key.UP: 1, Key.DOWN: MAP_SIZE}

_FROM_MOVE = {
    MoveDir.LEFT: Key.LEFT,
    MoveDir.RIGHT: Key.RIGHT,
    MoveDir.UP: Key.UP,
    MoveDir.DOWN: Key.DOWN,
}


def _coordinate(position: Position, key: Key) -> int:
    return position.x if key in _HORIZONTAL else position.y


def _shift(position: Position, key: Key, amount: int = 1) -> None:
    delta = _STEP[key] * amount
    if key in _HORIZONTAL:
        position.x += delta
    else:
        position.y += delta


def random_goal(rng: _Rng) -> Goal:
    """A goal with a random start, flag and a ball kept off the board's edge rows."""
    start = Position(rng.randrange(MAP_SIZE) + 1, rng.randrange(MAP_SIZE) + 1)
    flag = Position(rng.randrange(MAP_SIZE) + 1, rng.randrange(MAP_SIZE) + 1)
    ball = Position(rng.randrange(MAP_SIZE), rng.randrange(MAP_SIZE))
    ball.x = min(max(ball.x, 2), MAP_SIZE - 1)
    ball.y = min(max(ball.y, 2), MAP_SIZE - 1)
    return Goal(flag=flag, ball=ball, start=start)


def handle_move(player: Position, goals: Sequence[Goal], key: Key | None) -> None:
    """Move the player for one key press, pushing balls and stopping at flags.

    With no key the player does not step, but the flag and box corrections
    still run as if RIGHT had been pressed.
    """
    pressed = Key.RIGHT if key is None else Key(key)

    if key is not None:
        limit = _LIMIT[pressed]
        if (_coordinate(player, pressed) - limit) * _STEP[pressed] < 0:
            _shift(player, pressed)
        for goal in goals:
            ball = goal.ball
            if ball is None or ball != player:
                continue
            if _coordinate(ball, pressed) != limit:
                _shift(ball, pressed)
            else:
                _shift(player, pressed, -1)

    for goal in goals:
        if player == goal.flag:
            _shift(player, pressed, -1)

    resolve_box_overlap(pressed, goals)


def resolve_box_overlap(key: Key, goals: Sequence[Goal]) -> None:
    """Push a ball one step further when two balls share a cell.

    The last matching pair decides which ball moves: the goal at the pair's
    offset from the first, per the board rules. Scored balls stay put.
    """
    count = len(goals)
    owner = None
    for first in range(count - 1):
        for offset in range(1, count):
            other = first + offset
            if other < count and goals[first].ball == goals[other].ball:
                owner = goals[offset]
    if owner is None or owner.ball is None:
        return
    _shift(owner.ball, Key(key))


def check_goals(goals: Sequence[Goal]) -> bool:
    """Score balls resting on flags; True once every ball was already scored."""
    cleared = 0
    for goal in goals:
        ball = goal.ball
        if ball is None:
            cleared += 1
            continue
        for target in goals:
            if ball == target.flag:
                target.clear = Position(ball.x, ball.y)
                goal.ball = None
    return cleared == len(goals)


def build_map(player: Position, goals: Sequence[Goal]) -> list[list[str]]:
    """The board as rows of glyphs, walls around a floor of MAP_SIZE by MAP_SIZE."""
    size = MAP_SIZE + 2
    grid = [
        [FLOOR if 0 < x < size - 1 and 0 < y < size - 1 else WALL for x in range(size)]
        for y in range(size)
    ]

    def put(position: Position, glyph: str) -> None:
        if 0 <= position.x < size and 0 <= position.y < size:
            grid[position.y][position.x] = glyph

    for goal in goals:
        put(goal.flag, FLAG)
        if goal.ball is not None:
            put(goal.ball, BALL)
        if goal.clear is not None:
            put(goal.clear, CLEARED)
    put(player, PLAYER)
    return grid


def render_map(grid: Sequence[Sequence[str]]) -> str:
    """Join the rows of glyphs, each ending with a newline."""
    return "".join("".join(row) + "\n" for row in grid)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="minigames-push", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for a repeatable game")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else random.SystemRandom()

    goals = [random_goal(rng) for _ in range(GOAL_COUNT)]
    player = dataclasses.replace(goals[-1].start)

    screen = Screen()
    screen.clear()
    screen.set_color(_TEXT_COLOR, Color.BLACK)
    screen.set_cursor_visible(False)
    try:
        with KeyboardInput() as keys:
            while True:
                screen.move_cursor(0, 0)
                handle_move(player, goals, _FROM_MOVE.get(keys.poll()))
                grid = build_map(player, goals)
                screen.write(render_map(grid))
                if check_goals(goals):
                    screen.clear()
                    screen.set_color(_TEXT_COLOR, _CLEAR_BACKGROUND)
                    screen.write(render_map(grid))
                    screen.write("\n\n--게임클리어--\n")
                    break
                time.sleep(FRAME_SECONDS)
    except KeyboardInterrupt:
        pass
    finally:
        screen.set_color(Color.DEFAULT)
        screen.set_cursor_visible(True)
    return 0