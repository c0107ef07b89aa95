"""Small console exercises: arrays, loops, a calculator, bingo and a calendar."""

from __future__ import annotations

import argparse
import dataclasses
import random
from dataclasses import dataclass
from typing import Callable, Sequence

OX_SIZE = 7
PASS_SCORE = 60

_MENU = {1: "게임 시작", 2: "설정 시작", 3: "게임 종료"}


def double_all(values: Sequence[int]) -> list[int]:
    """Return every value doubled."""
    return [value * 2 for value in values]


def average(values: Sequence[float]) -> float:
    """Return the arithmetic mean of the values."""
    if not values:
        raise ValueError("average of an empty sequence")
    return sum(values) / len(values)


def max_index(values: Sequence[int]) -> int | None:
    """Index of the first largest value above -1, or None when there is none."""
    best = -1
    found = None
    for index, value in enumerate(values):
        if value > best:
            best = value
            found = index
    return found


def min_max(values: Sequence[int]) -> tuple[int, int]:
    """Smallest and largest value, starting from the sentinels 100 and -1."""
    return min([100, *values]), max([-1, *values])


def random_death(player_hp: int, monster_hp: int, rng: random.Random) -> tuple[int, int]:
    """Zero either the player's or the monster's hit points at random."""
    if rng.getrandbits(1):
        return 0, monster_hp
    return player_hp, 0


def is_passed(score: int) -> bool:
    return score > PASS_SCORE


def calculate(first: float, second: float, operator: str) -> float:
    """Apply one of + - * / to two numbers."""
    if operator == "+":
        return first + second
    if operator == "-":
        return first - second
    if operator == "*":
        return first * second
    if operator == "/":
        if second == 0:
            raise ZeroDivisionError("Numberick Error!!")
        return first / second
    raise ValueError(f"Wrong Operator Inputted !! ({operator!r})")


def menu_choice(selection: int) -> str | None:
    """Message for a menu selection, or None for an unknown one."""
    return _MENU.get(selection)


def random_ox_grid(size: int, rng: random.Random) -> list[list[str]]:
    return [["X" if rng.getrandbits(1) else "O" for _ in range(size)] for _ in range(size)]


def count_bingo(grid: Sequence[Sequence[str]]) -> int:
    """Count rows, columns and diagonals made entirely of 'O'."""
    size = len(grid)
    rows = sum(all(cell == "O" for cell in row) for row in grid)
    columns = sum(all(row[col] == "O" for row in grid) for col in range(size))
    main_diagonal = all(grid[i][i] == "O" for i in range(size))
    anti_diagonal = all(grid[i][size - 1 - i] == "O" for i in range(size))
    return rows + columns + int(main_diagonal) + int(anti_diagonal)


def star_diamond(rows: int) -> str:
    """Draw the star diamond for the given number of rows."""
    half = rows // 2
    stars = 1
    parts = []
    if rows >= 1:
        for blanks in range(rows, half, -1):
            parts.append(" " * blanks + "*" * stars + "\n")
            stars += 2
        stamp = half
    else:
        stamp = rows
    if rows % 2 == 0:
        parts.append(" " * (stamp + 1) + "*" * (stars - 2))
    for blanks in range(stamp, -1, -1):
        parts.append("\n" + " " * (blanks + 1) + "*" * (stars - 2))
        stars -= 2
    return "".join(parts)


def times_table(number: int) -> list[str]:
    return [f"{number} * {i} = {number * i}" for i in range(1, 10)]


@dataclass(frozen=True)
class Date:
    year: int = 0
    month: int = 0
    day: int = 0


def apply_date(date: Date, days: int = 0) -> Date:
    """Add days, treating odd months as 31 days and even months as 30."""
    day_count = date.day + days
    month = date.month
    while day_count >= 30:
        day_count -= 31 if month & 1 else 30
        month += 1
    years, month = 0, month
    while month > 12:
        month -= 12
        years += 1
    return dataclasses.replace(date, year=date.year + years, month=month, day=day_count)


def _read_number(prompt: str, kind: Callable = int):
    try:
        return kind(input(prompt).strip())
    except (ValueError, EOFError):
        return kind(0)


def _run_pointer(rng: random.Random) -> None:
    values = double_all([rng.randrange(100) for _ in range(5)])
    average(values)
    print(values[max_index(values)] if max_index(values) is not None else -1)


def _run_minmax(rng: random.Random) -> None:
    count = _read_number("원하는 수 개수 : ")
    print("\n")
    values = [rng.randint(1, 100) for _ in range(max(count, 0))]
    print("".join(f" {value}" for value in values))
    low, high = min_max(values)
    print(f"Min : {low}")
    print(f"Max : {high}")


def _run_death(rng: random.Random) -> None:
    a, b = 7, 13
    a, b = b, a
    player_hp, monster_hp = random_death(a, b, rng)
    print(f"Player HP : {player_hp}  Monster HP : {monster_hp}")


def _run_pass(rng: random.Random) -> None:
    score = _read_number("너의 점수 : ")
    print("\nPASS!!" if is_passed(score) else "\nFAIL!!")


def _run_calc(rng: random.Random) -> None:
    print("----계산기 프로그램----\n")
    first = _read_number("첫번쨰 숫자를 입력하세요 : ", float)
    second = _read_number("두번쨰 숫자를 입력하세요 : ", float)
    try:
        operator = input("적용할 연산을 입력하세요 : ").strip()[:1]
    except EOFError:
        operator = ""
    print("\n")
    try:
        print(f"연살 결과 : {calculate(first, second, operator):g}")
    except ZeroDivisionError:
        print("Numberick Error!!")
    except ValueError:
        print("Wrong Operator Inputted !! ")


def _run_menu(rng: random.Random) -> None:
    print("메뉴를 선택하세요.")
    print("1. 게임 시작\n2. 설정\n3. 종료")
    message = menu_choice(_read_number(""))
    if message is not None:
        print(message)


def _run_bingo(rng: random.Random) -> None:
    game_count = 1
    while True:
        grid = random_ox_grid(OX_SIZE, rng)
        for row in grid:
            print("".join(f"{cell} " for cell in row))
        result = count_bingo(grid)
        if result > 1:
            print(f"[ {game_count} ]회차 게임")
            print(f"\n연속적인 0 배열의 개수 : {result}")
            return
        print("\n\n\n빙고실패!!\n\n")
        game_count += 1


def _run_stars(rng: random.Random) -> None:
    rows = _read_number("별 줄 수 : ")
    print("\n")
    print(star_diamond(rows))


def _run_times(rng: random.Random) -> None:
    while True:
        print("-----구구단을 외자-----")
        number = _read_number("단수 입력 : ")
        if number == 0:
            break
        print("\n".join(times_table(number)))
        print("\n")
    print("\n프로그램 종료, 아무키나 누르세요.")
    try:
        input()
    except EOFError:
        pass


def _run_calendar(rng: random.Random) -> None:
    try:
        fields = [int(part) for part in input("년 월 일  : ").split()[:3]]
    except (ValueError, EOFError):
        fields = []
    fields += [0] * (3 - len(fields))
    days = _read_number("더할 날자 : ")
    future = apply_date(Date(*fields), days)
    print(f"미래 날자 : {future.year} {future.month} {future.day}")


_COMMANDS: dict[str, Callable[[random.Random], None]] = {
    "pointer": _run_pointer,
    "minmax": _run_minmax,
    "death": _run_death,
    "pass": _run_pass,
    "calc": _run_calc,
    "menu": _run_menu,
    "bingo": _run_bingo,
    "stars": _run_stars,
    "times": _run_times,
    "calendar": _run_calendar,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="minigames-exercises", description=__doc__)
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name in _COMMANDS:
        subparsers.add_parser(name)
    args = parser.parse_args(argv)
    _COMMANDS[args.command](random.SystemRandom())
    return 0