# minigames

A handful of small games that run in a terminal, plus a set of short
practice exercises. Only the Python standard library is needed. The game
text is in Korean.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## The games

Every game takes `--seed N` for a repeatable run; without it the games use
the system's random source. The arcade games draw with ANSI escape
sequences, read the arrow keys without waiting for Enter, and stop on
Ctrl-C.

### Text RPG

```
minigames-rpg
```

You lead a party of three mercenaries: a warrior (전사), an archer (궁수)
and a berserker (광전사), each with their own power, critical rate,
accuracy and hit points. From the menu you enter a dungeon (1), switch to
another character (2) or quit (3).

A dungeon holds one to five monsters, drawn from slime, orc, skeleton and
dragon. After seeing the first one you may fight or flee; fleeing rolls a
new dungeon. Each attack either hits, sometimes critically, or misses and
lets the monster strike back. A won fight pays the monster's gold and an
item with random options (sellable, enchantable, tradable, droppable);
after each win there is a 40% chance that a random party member loses half
their gold. A lost fight costs gold and kills the character, who can no
longer enter dungeons. When the whole party is dead, the game ends.

### Snail

```
minigames-snail
```

The snail keeps moving; the arrow keys steer it. Food appears every five
frames and makes the snail one segment longer; diet food appears every 300
frames and cuts it in half. Both score a point. Running into a wall or into
your own body ends the game.

### Falling balls

```
minigames-falling-ball
```

Move left and right along the bottom row. Yellow and blue balls cost a life
when they hit you and score a point when they reach the floor; green balls
restore a life. You start with three lives. Every hundred points, one more
ball falls in each wave. The game ends when no lives are left.

### Push

```
minigames-push
```

A puzzle on a 10 × 10 board. Walk with the arrow keys and push each of the
three balls onto one of the three flags. Flags block your way; balls stop at
the edge of the board. Once every ball is on a flag, the board is cleared.

## Exercises

`minigames-exercises` takes the name of one exercise:

```
minigames-exercises calc
```

| name       | what it does                                                  |
|------------|---------------------------------------------------------------|
| `pointer`  | doubles five random numbers and prints the largest            |
| `minmax`   | prints N random numbers from 1 to 100 with their min and max  |
| `death`    | swaps two values, then zeroes one of them at random           |
| `pass`     | reports PASS for a score above 60, FAIL otherwise             |
| `calc`     | applies `+`, `-`, `*` or `/` to two numbers                   |
| `menu`     | prints the message for a menu choice 1 to 3                   |
| `bingo`    | draws random 7 × 7 O/X boards until one has two or more lines |
| `stars`    | draws a star diamond with the given number of rows            |
| `times`    | prints times tables until 0 is entered                        |
| `calendar` | adds days to a date, with 31-day odd and 30-day even months   |

The same routines can be used from Python:

```python
from minigames.exercises import calculate, count_bingo, star_diamond, Date, apply_date

calculate(6, 3, "/")               # 2.0
apply_date(Date(2024, 1, 20), 15)  # Date(year=2024, month=2, day=4)
```

`calculate` raises `ZeroDivisionError` for division by zero and
`ValueError` for an unknown operator.

## Using the game rules from Python

The rules are kept apart from the screen code:

- `minigames.rpg`: `make_party`, `make_player`, `spawn_monster`,
  `hunt_reward`, `describe_item_options`, `party_all_dead`, `lose_money`.
- `minigames.rpg_game`: `start_fight` and the menu-driven `Game`, which
  take the input function, output stream and sleep function as arguments.
- `minigames.snail_logic`: `SnailGame`, advanced with `step(key)`, and
  helpers such as `move_snail`, `spawn_food` and `check_collision`;
  `minigames.snail_game.render_frame` draws a game as text.
- `minigames.falling_ball`: `FallingBallGame`, with `step`, `spawn_wave`,
  `check_collision` and `render`.
- `minigames.push_game`: `random_goal`, `handle_move`, `check_goals`,
  `build_map` and `render_map`.
- `minigames.console`: `Screen` (cursor, colour and clearing through ANSI
  sequences), `KeyboardInput` and `decode_key` for arrow keys.

## What it does not do

Nothing is saved: there are no save games, high scores or settings files.
There is no board game such as five-in-a-row; the collection is the four
games and the exercises above.