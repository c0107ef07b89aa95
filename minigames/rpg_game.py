"""Turn-based dungeon game played by a party of three mercenaries."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from typing import Callable, Sequence, TextIO

from .console import Screen
from .rpg import (
    ItemOption,
    Monster,
    Player,
    describe_item_options,
    hunt_reward,
    lose_money,
    make_party,
    monster_stats,
    party_all_dead,
    spawn_monster,
)

PARTY_SIZE = 3
MAX_DUNGEON_SIZE = 5
LOSE_MONEY_THRESHOLD = 60


@dataclass(frozen=True)
class FightResult:
    """Outcome of one fight."""

    won: bool
    monster_hp: int
    player_hp: int
    reward: ItemOption | None = None

    def __bool__(self) -> bool:
        return self.won


def start_fight(
    player: Player,
    enemy: Monster,
    rng: random.Random,
    out: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> FightResult:
    """Trade blows until the monster or the player falls."""
    out = out if out is not None else sys.stdout
    monster_hp = enemy.hp
    player_hp = player.hp

    while True:
        out.write("\n공격 : ")
        sleep(1)

        if rng.randrange(10) + 1 < player.accuracy:
            critical_chance = (rng.getrandbits(32) & 100) / 100.0
            if critical_chance < player.critical_rate:
                out.write("크리티컬 공격!\n")
                damage = int(player.power * 2 - 0.5 * enemy.defense)
            else:
                out.write("보통 공격!\n")
                damage = player.power - enemy.defense
            monster_hp = max(monster_hp - damage, 0)
            out.write(f"[ {enemy.name} HP : {monster_hp} ]\n")
        else:
            player_hp = max(player_hp - enemy.attack, 0)
            out.write("실패!\n")
            out.write(f"{enemy.name}(의) 공격 : - {enemy.attack}\n")
            out.write(f"[ {player.class_name} HP : {player_hp} ]\n")
            out.write(f"[ {enemy.name} HP : {monster_hp} ]\n")

        if monster_hp > 0 and player_hp > 0:
            continue

        if monster_hp > 0:
            original = player.deposit
            remaining = max(original - enemy.deposit, 0)
            out.write(f"\n토벌 실패 : [ 잔여 몬스터 HP  {monster_hp}]\n")
            out.write(f"[ 소지금  {original}  ->  {remaining} ]\n")
            player.deposit = remaining
            player.hp = 0
            return FightResult(False, monster_hp, player_hp)

        out.write("☆★토벌 성공!!★☆\n\n")
        out.write("[보상]\n")
        out.write(f"[사냥골드] : {enemy.deposit} G\n")
        player.deposit += enemy.deposit
        reward = hunt_reward(rng)
        out.write(describe_item_options(reward) + "\n")
        return FightResult(True, monster_hp, player_hp, reward)


def _announce(monster: Monster) -> str:
    return f"\n-----[{monster.name}]이(가) 출현하였습니다-----{monster_stats(monster)}\n\n"


class Game:
    """Menu loop: enter the dungeon, switch mercenary, or quit."""

    def __init__(
        self,
        party: list[Player] | None = None,
        rng: random.Random | None = None,
        read: Callable[[], str] = input,
        out: TextIO | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.party = party if party is not None else make_party(PARTY_SIZE)
        self.rng = rng if rng is not None else random.SystemRandom()
        self.out = out if out is not None else sys.stdout
        self.current = 0
        self._read = read
        self._sleep = sleep
        self._screen = Screen(self.out)

    @property
    def player(self) -> Player:
        return self.party[self.current]

    def _ask_int(self, prompt: str) -> int:
        self.out.write(prompt)
        try:
            return int(self._read().strip())
        except ValueError:
            return 0

    def _spawn(self) -> Monster:
        monster = spawn_monster(self.rng)
        self.out.write(_announce(monster))
        return monster

    def run(self) -> None:
        while True:
            if party_all_dead(self.party):
                self.out.write("\n\n[파티가 전멸하였습니다]\n")
                break
            self.out.write("\n---메뉴---\n")
            self.out.write(f"[ 현재캐릭터 : {self.player.class_name} ]\n")
            self.out.write(f"[ 보유골드 - {self.player.deposit}G ]\n\n")
            self.out.write("1. 던전 입장\n2. 캐릭터 선택\n3. 종료\n")
            choice = self._ask_int(">>")
            if choice == 1:
                self.enter_dungeon()
            elif choice == 2:
                self.switch_player()
            elif choice == 3:
                break
        self.out.write("\n----------End Game----------")

    def enter_dungeon(self) -> bool | None:
        """Play one dungeon; True when cleared, False when failed, None when refused."""
        player = self.player
        if player.hp == 0:
            self.out.write(
                f" ( ! ) 캐릭터 [ {player.class_name} ] 는 사망하여 플레이 할 수 없습니다.\n\n"
            )
            return None

        size = self.rng.randrange(MAX_DUNGEON_SIZE) + 1
        enemies = [Monster() for _ in range(size)]
        while True:
            self.out.write(f"\n[난이도 : {size}]\n")
            enemies[0] = self._spawn()
            self.out.write("1. 싸운다.\n2. 도망간다.\n")
            choice = self._ask_int(">>")
            if choice == 1:
                break
            if choice == 2:
                size = self.rng.randrange(MAX_DUNGEON_SIZE) + 1
                enemies = [Monster() for _ in range(size)]

        cleared = True
        for index in range(size):
            if enemies[index].hp == 0:
                enemies[index] = self._spawn()
            if start_fight(player, enemies[index], self.rng, self.out, self._sleep):
                rate = self.rng.randrange(100) + 1
                victim = self.rng.randrange(len(self.party))
                if rate > LOSE_MONEY_THRESHOLD:
                    self.out.write(lose_money(self.party[victim]) + "\n")
                self._sleep(2)
            else:
                cleared = False
                break

        if cleared:
            self.out.write("\n\n---던젼 탐험 클리어---\n")
        else:
            self.out.write("\n\n---던젼 탐헝 실패---\n")
        self.out.write("\n\nPress Any Key To Continue --> (0)\n")
        self._read()
        self._screen.clear()
        return cleared

    def switch_player(self) -> Player:
        """Ask which mercenary to play and make it the current one."""
        menu = "".join(
            f"{number}. {member.class_name}\n" for number, member in enumerate(self.party, 1)
        )
        while True:
            self.out.write("\n--용병 변경--\n" + menu + "\n")
            choice = self._ask_int("")
            if not 1 <= choice <= len(self.party):
                continue
            if self.party[choice - 1].hp >= 0:
                self.current = choice - 1
                break
            self.out.write("\n 이미 사망한 캐릭터 입니다\n")
        self._screen.clear()
        return self.player


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="minigames-rpg", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for a repeatable game")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else random.SystemRandom()
    try:
        Game(rng=rng).run()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0