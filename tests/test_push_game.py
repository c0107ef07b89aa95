import random

import pytest

from minigames.push_game import (
    BALL,
    CLEARED,
    FLAG,
    FLOOR,
    GOAL_COUNT,
    MAP_SIZE,
    PLAYER,
    WALL,
    Goal,
    Key,
    Position,
    build_map,
    check_goals,
    handle_move,
    random_goal,
    render_map,
    resolve_box_overlap,
)


class _Fixed:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


def _far_goals():
    return [
        Goal(flag=Position(9, 9), ball=Position(8, 9)),
        Goal(flag=Position(9, 8), ball=Position(8, 8)),
        Goal(flag=Position(9, 7), ball=Position(8, 7)),
    ]


def test_position_equality():
    assert Position(3, 4) == Position(3, 4)
    assert not Position(3, 4) == Position(4, 3)


@pytest.mark.parametrize(
    "key, dx, dy",
    [(Key.LEFT, -1, 0), (Key.RIGHT, 1, 0), (Key.UP, 0, -1), (Key.DOWN, 0, 1)],
)
def test_player_steps(key, dx, dy):
    start = Position(5, 5)
    player = Position(start.x, start.y)
    handle_move(player, _far_goals(), key)
    assert player == Position(start.x + dx, start.y + dy)


def test_player_stays_inside_left_edge():
    player = Position(1, 5)
    handle_move(player, _far_goals(), Key.LEFT)
    assert player == Position(1, 5)


def test_player_stays_inside_bottom_edge():
    player = Position(4, MAP_SIZE)
    handle_move(player, _far_goals(), Key.DOWN)
    assert player == Position(4, MAP_SIZE)


def test_player_pushes_ball():
    player = Position(5, 5)
    goals = _far_goals()
    goals[0].ball = Position(4, 5)
    handle_move(player, goals, Key.LEFT)
    assert player == Position(4, 5)
    assert goals[0].ball == Position(4 - 1, 5)


def test_ball_at_edge_blocks_player():
    player = Position(2, 5)
    goals = _far_goals()
    goals[0].ball = Position(1, 5)
    handle_move(player, goals, Key.LEFT)
    assert player == Position(2, 5)
    assert goals[0].ball == Position(1, 5)


def test_flag_blocks_player():
    player = Position(5, 5)
    goals = _far_goals()
    goals[1].flag = Position(6, 5)
    handle_move(player, goals, Key.RIGHT)
    assert player == Position(5, 5)


def test_no_key_leaves_player_off_flags_in_place():
    player = Position(5, 5)
    goals = _far_goals()
    handle_move(player, goals, None)
    assert player == Position(5, 5)
    assert [goal.ball for goal in goals] == [goal.ball for goal in _far_goals()]


def test_no_key_on_flag_corrects_as_right():
    player = Position(5, 5)
    goals = _far_goals()
    goals[0].flag = Position(5, 5)
    handle_move(player, goals, None)
    assert player == Position(5 - 1, 5)


def test_overlap_moves_second_ball():
    goals = _far_goals()
    goals[1].ball = Position(4, 4)
    goals[0].ball = Position(4, 4)
    resolve_box_overlap(Key.UP, goals)
    assert goals[0].ball == Position(4, 4)
    assert goals[1].ball == Position(4, 4 - 1)


def test_overlap_between_later_pair_moves_goal_at_offset():
    goals = _far_goals()
    goals[1].ball = Position(6, 3)
    goals[2].ball = Position(6, 3)
    resolve_box_overlap(Key.RIGHT, goals)
    assert goals[1].ball == Position(6 + 1, 3)
    assert goals[2].ball == Position(6, 3)


def test_overlap_of_scored_balls_changes_nothing():
    goals = _far_goals()
    goals[1].ball = None
    goals[2].ball = None
    resolve_box_overlap(Key.DOWN, goals)
    assert goals[0].ball == _far_goals()[0].ball
    assert goals[1].ball is None and goals[2].ball is None


def test_no_overlap_changes_nothing():
    goals = _far_goals()
    resolve_box_overlap(Key.LEFT, goals)
    assert [goal.ball for goal in goals] == [goal.ball for goal in _far_goals()]


def test_check_goals_scores_then_clears():
    goals = [
        Goal(flag=Position(2, 2), ball=Position(2, 2)),
        Goal(flag=Position(3, 3), ball=Position(3, 3)),
        Goal(flag=Position(4, 4), ball=Position(4, 4)),
    ]
    assert check_goals(goals) is False
    assert all(goal.ball is None for goal in goals)
    assert [goal.clear for goal in goals] == [goal.flag for goal in goals]
    assert check_goals(goals) is True


def test_check_goals_ball_on_other_flag():
    goals = _far_goals()
    goals[0].ball = Position(goals[1].flag.x, goals[1].flag.y)
    assert check_goals(goals) is False
    assert goals[0].ball is None
    assert goals[1].clear == goals[1].flag
    assert goals[0].clear is None


def test_check_goals_nothing_scored():
    goals = _far_goals()
    assert check_goals(goals) is False
    assert all(goal.clear is None for goal in goals)


def test_build_map_layout():
    goals = _far_goals()
    goals[2].ball = None
    goals[2].clear = Position(2, 3)
    player = Position(5, 6)
    grid = build_map(player, goals)
    size = MAP_SIZE + 2
    assert len(grid) == size
    assert all(len(row) == size for row in grid)
    assert all(cell == WALL for cell in grid[0])
    assert all(row[0] == WALL and row[-1] == WALL for row in grid)
    assert grid[6][5] == PLAYER
    assert grid[9][9] == FLAG
    assert grid[9][8] == BALL
    assert grid[3][2] == CLEARED
    assert grid[1][1] == FLOOR


def test_build_map_player_drawn_over_flag():
    goals = _far_goals()
    player = Position(goals[0].flag.x, goals[0].flag.y)
    grid = build_map(player, goals)
    assert grid[player.y][player.x] == PLAYER


def test_render_map_round_trip():
    grid = build_map(Position(3, 3), _far_goals())
    text = render_map(grid)
    assert text.endswith("\n")
    assert text.splitlines() == ["".join(row) for row in grid]


def test_random_goal_low_values_clamped():
    goal = random_goal(_Fixed(0))
    assert goal.start == Position(1, 1)
    assert goal.flag == Position(1, 1)
    assert goal.ball == Position(2, 2)
    assert goal.clear is None


def test_random_goal_high_values_clamped():
    goal = random_goal(_Fixed(MAP_SIZE - 1))
    assert goal.start == Position(MAP_SIZE, MAP_SIZE)
    assert goal.flag == Position(MAP_SIZE, MAP_SIZE)
    assert goal.ball == Position(MAP_SIZE - 1, MAP_SIZE - 1)


def test_random_goal_ranges():
    rng = random.Random(7)
    for _ in range(200):
        goal = random_goal(rng)
        assert 1 <= goal.start.x <= MAP_SIZE and 1 <= goal.start.y <= MAP_SIZE
        assert 1 <= goal.flag.x <= MAP_SIZE and 1 <= goal.flag.y <= MAP_SIZE
        assert 2 <= goal.ball.x <= MAP_SIZE - 1 and 2 <= goal.ball.y <= MAP_SIZE - 1


def test_goal_count_matches_board_rules():
    goals = [random_goal(random.Random(seed)) for seed in range(GOAL_COUNT)]
    assert len(build_map(Position(1, 1), goals)) == MAP_SIZE + 2
    assert check_goals(goals) is False or all(goal.ball is None for goal in goals)