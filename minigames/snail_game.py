"""Snail game: steer with the arrow keys, eat food to grow, avoid walls and yourself."""

from __future__ import annotations

import argparse
import itertools
import random
import time
from typing import Sequence

from .console import Color, KeyboardInput, Screen
from .snail_logic import MAP_HEIGHT, MAP_WIDTH, SnailGame

FRAME_SECONDS = 0.07

WALL = "■"
BLANK = "  "
HEAD = "◎"
BODY = "●"
FOOD = "○"
DIET_FOOD = "※"

_GLYPH_COLORS = {
    HEAD: Color.RIGHT_GREEN,
    BODY: Color.RIGHT_GREEN,
    FOOD: Color.YELLOW,
    DIET_FOOD: Color.SKY_BLUE,
}


def _inside(x: int, y: int) -> bool:
    return 0 <= x < MAP_WIDTH and 0 <= y < MAP_HEIGHT


def render_frame(game: SnailGame) -> str:
    """Draw the board, snail, foods and score as lines of text."""
    grid = [
        [BLANK if 0 < x < MAP_WIDTH - 1 and 0 < y < MAP_HEIGHT - 1 else WALL for x in range(MAP_WIDTH)]
        for y in range(MAP_HEIGHT)
    ]
    for index, segment in enumerate(game.body):
        if _inside(segment.x, segment.y):
            grid[segment.y][segment.x] = HEAD if index == 0 else BODY
    for glyph, foods in ((FOOD, game.foods), (DIET_FOOD, game.diet_foods)):
        for food in foods:
            if _inside(food.x, food.y):
                grid[food.y][food.x] = glyph

    rows = ["".join(row) for row in grid]
    rows[0] += f"  현재 SCORE : {game.score}"
    return "\n".join(rows)


def _draw(screen: Screen, frame: str) -> None:
    for y, row in enumerate(frame.split("\n")):
        screen.move_cursor(0, y)
        for color, chars in itertools.groupby(row, key=lambda ch: _GLYPH_COLORS.get(ch, Color.WHITE)):
            screen.set_color(color)
            screen.write("".join(chars))
    screen.set_color(Color.WHITE)


def _game_over(screen: Screen, game: SnailGame) -> None:
    head = game.head
    screen.set_color(Color.RED)
    screen.move_cursor(head.past_x * 2, head.past_y)
    screen.write(HEAD)
    screen.set_color(Color.WHITE)
    screen.move_cursor(0, MAP_HEIGHT + 2)
    screen.write("--Game Over--\n[press any key]\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="minigames-snail", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for a repeatable game")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else random.SystemRandom()

    game = SnailGame(rng=rng)
    screen = Screen()
    screen.clear()
    screen.set_cursor_visible(False)
    try:
        with KeyboardInput() as keys:
            while game.step(keys.poll()):
                _draw(screen, render_frame(game))
                time.sleep(FRAME_SECONDS)
        _game_over(screen, game)
        try:
            input()
        except EOFError:
            pass
    except KeyboardInterrupt:
        pass
    finally:
        screen.set_color(Color.DEFAULT)
        screen.set_cursor_visible(True)
    return 0