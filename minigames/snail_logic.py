"""Rules of the snail game: moving, growing, eating and colliding."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from .console import MoveDir

MAP_WIDTH = 35
MAP_HEIGHT = 20
FOOD_SPAWN_FRAMES = 5
DIET_FOOD_SPAWN_FRAMES = 300


class _Rng(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass(eq=False)
class Segment:
    """A cell on the board that also remembers where it was one frame ago."""

    x: int = -1
    y: int = -1
    past_x: int = 0
    past_y: int = 0

    def __add__(self, other: "Segment") -> "Segment":
        return Segment(
            self.x + other.x,
            self.y + other.y,
            self.past_x + other.past_x,
            self.past_y + other.past_y,
        )

    def __sub__(self, other: "Segment") -> "Segment":
        return Segment(
            self.x - other.x,
            self.y - other.y,
            self.past_x - other.past_x,
            self.past_y - other.past_y,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y


OFFSETS: dict[MoveDir, Segment] = {
    MoveDir.LEFT: Segment(-1, 0),
    MoveDir.RIGHT: Segment(1, 0),
    MoveDir.UP: Segment(0, -1),
    MoveDir.DOWN: Segment(0, 1),
}


def spawn_food(head: Segment, foods: Sequence[Segment], rng: _Rng) -> list[Segment]:
    """Return the foods with one more, placed inside the walls off the head and other foods."""
    while True:
        candidate = Segment(rng.randrange(MAP_WIDTH - 2) + 1, rng.randrange(MAP_HEIGHT - 2) + 1)
        if candidate == head:
            continue
        if any(food == candidate for food in foods):
            continue
        return [*foods, candidate]


def move_snail(body: list[Segment], direction: MoveDir) -> None:
    """Move the head one step and pull every segment into its predecessor's old place."""
    if direction == MoveDir.NONE or not body:
        return
    head = body[0]
    head.past_x, head.past_y = head.x, head.y
    moved = head + OFFSETS[direction]
    head.x, head.y = moved.x, moved.y

    for leader, segment in zip(body, body[1:]):
        if segment.x == 0 and segment.y == 0:
            break
        segment.past_x, segment.past_y = segment.x, segment.y
        segment.x, segment.y = leader.past_x, leader.past_y


def eat_food(head: Segment, foods: list[Segment]) -> int:
    """Remove every food under the head from the list and return how many there were."""
    remaining = [food for food in foods if food != head]
    eaten = len(foods) - len(remaining)
    foods[:] = remaining
    return eaten


def check_collision(body: Sequence[Segment]) -> bool:
    """True when the head is on a wall or on another segment."""
    head = body[0]
    if head.x in (0, MAP_WIDTH - 1) or head.y in (0, MAP_HEIGHT - 1):
        return True
    return any(segment == head for segment in body[1:])


def grow_snail(body: Sequence[Segment], tail: Segment) -> list[Segment]:
    """Return the body with a new segment at the given tail position."""
    return [*body, Segment(tail.x, tail.y)]


def halve_snail(body: Sequence[Segment]) -> list[Segment]:
    """Return the front half of the body; a one-segment snail stays as it is."""
    if len(body) == 1:
        return list(body)
    return list(body[: len(body) // 2])


def tail_position(body: Sequence[Segment]) -> Segment:
    """A copy of the last segment, or an unplaced segment for an empty body."""
    if not body:
        return Segment()
    last = body[-1]
    return Segment(last.x, last.y, last.past_x, last.past_y)


@dataclass
class SnailGame:
    """State of one snail game, advanced one frame at a time."""

    rng: _Rng = field(default_factory=random.SystemRandom)
    body: list[Segment] = field(
        default_factory=lambda: [Segment(MAP_WIDTH // 2, MAP_HEIGHT // 2)]
    )
    foods: list[Segment] = field(default_factory=list)
    diet_foods: list[Segment] = field(default_factory=list)
    direction: MoveDir = MoveDir.RIGHT
    score: int = 0
    food_timer: int = FOOD_SPAWN_FRAMES
    diet_timer: int = DIET_FOOD_SPAWN_FRAMES
    over: bool = False

    @property
    def head(self) -> Segment:
        return self.body[0]

    def step(self, key: MoveDir = MoveDir.NONE) -> bool:
        """Advance one frame with the given key; return False once the game is over."""
        if self.over:
            return False

        self.food_timer -= 1
        self.diet_timer -= 1

        if key != MoveDir.NONE:
            self.direction = key
        move_snail(self.body, self.direction)

        if self.food_timer == 0:
            self.foods = spawn_food(self.head, self.foods, self.rng)
            self.food_timer = FOOD_SPAWN_FRAMES
        if self.diet_timer == 0:
            self.diet_foods = spawn_food(self.head, self.diet_foods, self.rng)
            self.diet_timer = DIET_FOOD_SPAWN_FRAMES

        eaten = eat_food(self.head, self.foods)
        if eaten:
            self.score += eaten
            new_tail = tail_position(self.body) - OFFSETS[self.direction]
            self.body = grow_snail(self.body, new_tail)

        dieted = eat_food(self.head, self.diet_foods)
        if dieted:
            self.score += dieted
            self.body = halve_snail(self.body)

        if check_collision(self.body):
            self.over = True
        return not self.over