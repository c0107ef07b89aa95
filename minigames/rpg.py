"""Party, monster and loot rules for the text dungeon game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Iterable, Protocol


class _Rng(Protocol):
    def randrange(self, stop: int) -> int: ...

    def getrandbits(self, k: int) -> int: ...


class PlayerClass(IntEnum):
    WARRIOR = 1
    ARCHER = 2
    BERSERKER = 3


@dataclass
class Player:
    """One party member; hit points of zero mean the member is dead."""

    class_name: str = ""
    hp: int = 0
    deposit: int = 0
    power: int = 0
    critical_rate: float = 0.0
    accuracy: int = 0


class MonsterKind(IntEnum):
    SLIME = 1
    ORK = 2
    SKELETON = 3
    DRAGON = 4


@dataclass
class Monster:
    """A monster; a zero hp marks a slot that has not been spawned yet."""

    name: str = ""
    hp: int = 0
    defense: int = 0
    attack: int = 0
    deposit: int = 0


class ItemOption(IntFlag):
    CAN_SELL = 1 << 0
    CAN_ENCHANT = 1 << 1
    CAN_TRADE = 1 << 2
    CAN_DROP = 1 << 3


_ALL_OPTIONS = (
    ItemOption.CAN_SELL | ItemOption.CAN_ENCHANT | ItemOption.CAN_TRADE | ItemOption.CAN_DROP
)

_PLAYER_STATS = {
    PlayerClass.WARRIOR: dict(class_name="전사", hp=150, power=55, critical_rate=0.25, accuracy=9),
    PlayerClass.ARCHER: dict(class_name="궁수", hp=50, power=45, critical_rate=0.7, accuracy=7),
    PlayerClass.BERSERKER: dict(class_name="광전사", hp=70, power=70, critical_rate=0.2, accuracy=4),
}

_MONSTER_STATS = {
    MonsterKind.ORK: dict(name="오크", hp=70, defense=10, attack=10, deposit=50),
    MonsterKind.SLIME: dict(name="슬라임", hp=30, defense=5, attack=5, deposit=10),
    MonsterKind.DRAGON: dict(name="드래곤", hp=120, defense=30, attack=30, deposit=100),
    MonsterKind.SKELETON: dict(name="스켈레톤", hp=100, defense=0, attack=13, deposit=70),
}

_OPTION_LABELS = (
    (ItemOption.CAN_SELL, "판매 가능 상품", "판매 불가 상품"),
    (ItemOption.CAN_ENCHANT, "강화 가능 상품", "강화 불가 상품"),
    (ItemOption.CAN_TRADE, "교환 가능 상품", "교환 불가 상품"),
    (ItemOption.CAN_DROP, "폐기 가능 상품", "폐기 불가 상품"),
)


def make_player(player_class: int) -> Player:
    """Create a fresh player of the given class."""
    return Player(**_PLAYER_STATS[PlayerClass(player_class)])


def make_party(size: int) -> list[Player]:
    """One player per class in class order; members past the known classes stay blank."""
    return [
        make_player(number) if number in _PLAYER_STATS else Player()
        for number in range(1, size + 1)
    ]


def make_monster(kind: int) -> Monster:
    return Monster(**_MONSTER_STATS[MonsterKind(kind)])


def spawn_monster(rng: _Rng) -> Monster:
    """Pick one of the four monster kinds with equal chance."""
    return make_monster(rng.randrange(len(MonsterKind)) + 1)


def monster_stats(monster: Monster) -> str:
    return f"[ HP : {monster.hp}  ATK : {monster.attack} DEF : {monster.defense} ]"


def hunt_reward(rng: _Rng) -> ItemOption:
    """Roll a random combination of item options."""
    return ItemOption(rng.getrandbits(32) & _ALL_OPTIONS)


def describe_item_options(options: int) -> str:
    labels = [yes if options & flag else no for flag, yes, no in _OPTION_LABELS]
    return "[ " + " , ".join(labels) + " ]"


def party_all_dead(party: Iterable[Player]) -> bool:
    return all(member.hp == 0 for member in party)


def lose_money(player: Player) -> str:
    """Halve the player's gold and return the notice to show."""
    player.deposit //= 2
    return f"[ {player.class_name} ] 골드 소실!!"