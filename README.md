# pelletmaze

A small tile-based maze game. It reads a level from a plain text file and
draws it with pygame: walls, pellets, super pellets, a player and up to three
ghosts. You move the player with the arrow keys.

## Installing

```
pip install .
```

This pulls in pygame. To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Playing

```
pelletmaze [LEVEL_FILE]
```

If you leave out the level file, the game loads `levels/original.txt` from
the current directory. The window is sized to the level, 32 pixels per tile,
and titled "Pac-Man". Close the window to quit.

The game state is updated at a fixed step of 16667 microseconds (about 60
updates per second), however fast the screen is drawn. On each update the
player moves 5 pixels for every arrow key held down.

## Level files

A level is a text file with one line per row of the maze. Every character is
one tile, 32 pixels square:

| Character | Meaning                    |
|-----------|----------------------------|
| `*`       | wall                       |
| ` `       | empty floor                |
| `.`       | pellet                     |
| `+`       | super pellet               |
| `1`       | teleport                   |
| `P`       | the player's starting tile |
| `G`       | a ghost's starting tile    |

Tiles under `P` and `G` are empty floor. Every row must have the same number
of characters as the first one, and a level may hold at most three ghosts.
An empty file, a row of the wrong length, a fourth ghost or any other
character raises `ValueError`. For example:

```
***********
*P...+...G*
*.*******.*
*G.......G*
***********
```

## Using it as a library

```python
from pelletmaze.levels import Direction, generate_level

level = generate_level("levels/small.txt")
level.update({Direction.RIGHT})
print(level.pacman.position)
```

- `pelletmaze.levels.read_level(path)` returns a level file's lines.
- `pelletmaze.levels.generate_level(path)` builds a `Level` holding a `Map`
  of `TileObject`s and a list of four `Agent`s; the player is always
  `level.agents[0]` (also `level.pacman`), and unused slots hold agents of
  kind `AgentKind.UNKNOWN`.
- `Level.update(pressed)` moves the player by one step for each `Direction`
  in `pressed`.
- `pelletmaze.model.Map.tile_at(row, column)` returns one tile and raises
  `IndexError` outside the map; iterating a `Map` yields its tiles row by row.
- `pelletmaze.render.draw_level(surface, level)` draws a level onto a pygame
  surface; `draw_tile` and `draw_agent` draw single pieces.
- `pelletmaze.app.FixedStepClock` turns elapsed microseconds into a number of
  update steps due.
- `pelletmaze.app.run(level_file)` opens a window and runs the game loop.
- `pelletmaze.fps.FPSCounter` counts frames per second; the game loop does
  not use it.

## What it does not do

This is an early stage of the game. The player is not stopped by walls, does
not eat pellets and scores nothing. Ghosts stand still, nothing happens when
they meet the player, and teleport tiles neither move anything nor are drawn.