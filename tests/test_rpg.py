import random

import pytest

from minigames.rpg import (
    ItemOption,
    Monster,
    MonsterKind,
    Player,
    PlayerClass,
    describe_item_options,
    hunt_reward,
    lose_money,
    make_monster,
    make_party,
    make_player,
    monster_stats,
    party_all_dead,
    spawn_monster,
)


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        assert 0 <= self.value < stop
        return self.value

    def getrandbits(self, k):
        return self.value


def test_warrior_stats():
    warrior = make_player(PlayerClass.WARRIOR)
    assert warrior.class_name == "전사"
    assert warrior.hp == 150
    assert warrior.power == 55
    assert warrior.accuracy == 9
    assert warrior.critical_rate == 0.25
    assert warrior.deposit == 0


def test_archer_and_berserker_stats():
    archer = make_player(2)
    berserker = make_player(3)
    assert (archer.class_name, archer.hp, archer.power, archer.accuracy) == ("궁수", 50, 45, 7)
    assert (berserker.class_name, berserker.hp, berserker.power, berserker.accuracy) == (
        "광전사",
        70,
        70,
        4,
    )


def test_unknown_class_rejected():
    with pytest.raises(ValueError):
        make_player(7)


def test_party_order_and_blank_extra_member():
    party = make_party(4)
    assert [member.class_name for member in party[:3]] == ["전사", "궁수", "광전사"]
    assert party[3] == Player()


def test_monster_stats_match_kind():
    ork = make_monster(MonsterKind.ORK)
    dragon = make_monster(MonsterKind.DRAGON)
    assert (ork.name, ork.hp, ork.defense, ork.attack, ork.deposit) == ("오크", 70, 10, 10, 50)
    assert (dragon.name, dragon.hp, dragon.defense, dragon.attack, dragon.deposit) == (
        "드래곤",
        120,
        30,
        30,
        100,
    )


@pytest.mark.parametrize("roll, kind", [(0, MonsterKind.SLIME), (3, MonsterKind.DRAGON)])
def test_spawn_monster_uses_roll(roll, kind):
    assert spawn_monster(FixedRandom(roll)) == make_monster(kind)


def test_spawn_monster_always_a_real_monster():
    rng = random.Random(5)
    for _ in range(50):
        assert spawn_monster(rng).hp > 0


def test_monster_stats_line():
    assert monster_stats(make_monster(MonsterKind.SLIME)) == "[ HP : 30  ATK : 5 DEF : 5 ]"


def test_hunt_reward_masks_to_four_bits():
    assert hunt_reward(FixedRandom(0xFFFF)) == (
        ItemOption.CAN_SELL | ItemOption.CAN_ENCHANT | ItemOption.CAN_TRADE | ItemOption.CAN_DROP
    )
    rng = random.Random(1)
    for _ in range(50):
        assert 0 <= int(hunt_reward(rng)) <= 15


def test_describe_no_options():
    assert describe_item_options(ItemOption(0)) == (
        "[ 판매 불가 상품 , 강화 불가 상품 , 교환 불가 상품 , 폐기 불가 상품 ]"
    )


def test_describe_some_options():
    text = describe_item_options(ItemOption.CAN_SELL | ItemOption.CAN_DROP)
    assert text == "[ 판매 가능 상품 , 강화 불가 상품 , 교환 불가 상품 , 폐기 가능 상품 ]"


def test_party_all_dead():
    party = make_party(3)
    assert not party_all_dead(party)
    for member in party:
        member.hp = 0
    assert party_all_dead(party)


def test_lose_money_halves_gold():
    player = make_player(PlayerClass.ARCHER)
    player.deposit = 101
    message = lose_money(player)
    assert player.deposit == 50
    assert message == "[ 궁수 ] 골드 소실!!"


def test_default_monster_is_unspawned():
    assert Monster().hp == 0