# questgrid

A small turn-based simulation on a rectangular grid. Heroes (archers,
warriors and wizards) walk one step at a time from a start cell towards a
destination cell. On each turn a hero scans the cells within its radius,
picks up weapons, armour and potions that suit it, and fights the enemies
and elites it sees until one side falls. The game ends when every hero has
either reached its destination, walked into the edge of the grid, or died.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running a scenario

```
questgrid -help
questgrid -n 2 -files scenarios/g1_in.csv scenarios/g2_in.csv
```

The command first prints each argument it received on its own line. With
no arguments it prints a short hint; with `-help` as the first argument it
prints usage help. Otherwise every argument after the first three is taken
as a scenario file and played in turn. The first three are expected to be
`-n`, a count and `-files`, but they are not checked.

If a scenario file cannot be opened, the command prints
`Unable to open file` and exits with status 1. If a scenario is malformed,
for example when it has no `matrix` line, the command prints the error and
exits with status 1. Any files listed after the failing one are not played.

Each turn prints the grid to standard output. When a game ends, the final
state of every character is printed. The last grid and the character list
are also written to a result file in the current directory. The file is
named from the input path: reading stops at the first `_` in the path and
starts over after each `/`, and `_out.csv` is appended. For example,
`scenarios/g1_in.csv` gives `g1_out.csv`.

## Scenario files

Each line starts with a name and a comma, followed by that entry's numbers:

| Name | Numbers |
| --- | --- |
| `matrix` | rows, columns |
| `health`, `mana` | amount, x, y |
| `bow`, `crossbow`, `staff`, `wand`, `hammer`, `sword` | power, x, y |
| `bodyArmor`, `shieldArmor` | defence factor, x, y |
| `enemy`, `elite` | power, x1, y1, x2, y2 |
| `archer`, `wizard`, `warrior` | power, x1, y1, x2, y2, gender (0 female, otherwise male) |

Lines whose name is not in the table are ignored.

Grid symbols: `R` archer, `A` warrior, `Z` wizard, `E` enemy, `L` elite,
`W` weapon, `S` armour, `P` potion, `.` empty.

## Rules in brief

- Archers take bows and crossbows, warriors take swords and hammers, and
  wizards take staffs and wands. All heroes take armour and health potions.
  Only wizards drink mana potions, and these restore life as well.
- A potion is drunk only when the hero's life is below 100. Life never
  rises above 100.
- Bows, hammers and staffs are two-handed and multiply their power by 1.6.
  Crossbows, swords and wands are one-handed and multiply their power by
  1.2. A hero's total power is its own power times its weapon's power.
- Armour values are damage multipliers, so lower is better. A hero swaps
  armour only for a piece with a lower factor. A hero with a two-handed
  weapon does not take a shield. A hero holding a one-handed weapon and a
  shield gives up the shield for a two-handed weapon only if the shield's
  factor is at least 0.85.
- A fight goes on, blow for blow, until one side has no life left.
- Archers see 5 cells around them; warriors and wizards see 3.

## Library use

The building blocks can also be used directly:

```python
import io
from questgrid.game import Game

log = io.StringIO()
game = Game("scenarios/g1_in.csv", out=log, output_dir="results")
game.play()
```

- `questgrid.game.Game(path, out=None, output_dir=None)` reads a scenario
  (`read()`), runs it (`play()`) and writes the result file
  (`write_last_configuration()`, which returns the path it wrote). `out` is
  where progress is written (standard output by default). `output_dir` is
  where the result file goes (the current directory by default).
- `questgrid.game.line_name` and `questgrid.game.output_name` give a
  scenario line's name and a result file's name.
- `questgrid.factory` builds objects from single scenario lines:
  `build_world`, `build_potion`, `build_weapon`, `build_armor`,
  `build_enemy` and `build_actor`.
- `questgrid.console` draws the grid and lists characters: `render_world`,
  `print_world`, `print_characters`, `fill_world`, `symbol_at`,
  `item_symbol` and `character_symbol`.
- `questgrid.characters` holds `Hero` (`Archer`, `Warrior`, `Wizard`) and
  `Enemy` (`Elite`). `questgrid.items` holds the weapons, armour and
  `Potion`.

## What it does not do

The simulation runs unattended from start to finish. There is no
interactive play, and no way to save a game part-way and resume it. The
result file records only the final grid and the characters' final state.