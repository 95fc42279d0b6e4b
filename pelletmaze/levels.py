"""Loading levels from text files and updating them each frame."""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Iterable, Sequence

from pelletmaze.model import (
    MAX_AGENTS,
    MAX_GHOSTS,
    PAC_MAN_SPEED,
    TILE_SIZE,
    Agent,
    AgentKind,
    Map,
    Tile,
    TileObject,
)

log = logging.getLogger(__name__)


class Direction(Enum):
    """A movement direction, valued by its pixel offset per update."""

    RIGHT = (PAC_MAN_SPEED, 0.0)
    LEFT = (-PAC_MAN_SPEED, 0.0)
    UP = (0.0, -PAC_MAN_SPEED)
    DOWN = (0.0, PAC_MAN_SPEED)

    @property
    def delta(self) -> tuple[float, float]:
        return self.value


class Level:
    """A map together with the agents on it; Pac-Man is always agent 0."""

    def __init__(self, level_map: Map, agents: Sequence[Agent] | None = None) -> None:
        self.map = level_map
        if agents is None:
            agents = [Agent() for _ in range(MAX_AGENTS)]
        if len(agents) != MAX_AGENTS:
            raise ValueError(f"a level holds exactly {MAX_AGENTS} agents")
        self.agents = list(agents)

    @property
    def pacman(self) -> Agent:
        return self.agents[0]

    def update(self, pressed: Iterable[Direction]) -> None:
        """Move Pac-Man according to the directions currently held down."""
        held = set(pressed)
        for direction in Direction:
            if direction in held:
                self.pacman.move(*direction.delta)
                log.debug("%s key pressed", direction.name.capitalize())


def read_level(path: str | os.PathLike[str]) -> list[str]:
    """Return the rows of a level file."""
    log.debug("Reading level file %s", path)
    with open(path, encoding="utf-8") as handle:
        return handle.read().splitlines()


def generate_level(path: str | os.PathLike[str]) -> Level:
    """Build a level from a text file of tile and agent characters."""
    rows = read_level(path)
    if not rows or not rows[0]:
        raise ValueError(f"level file {path} is empty")
    width = len(rows[0])

    agents = [Agent() for _ in range(MAX_AGENTS)]
    ghosts_seen = 0
    grid: list[list[TileObject]] = []

    for row_index, line in enumerate(rows):
        if len(line) != width:
            raise ValueError(
                f"row {row_index} has {len(line)} columns, expected {width}"
            )
        row: list[TileObject] = []
        for column, char in enumerate(line):
            x, y = column * TILE_SIZE, row_index * TILE_SIZE
            tile = TileObject()
            if char == AgentKind.PACMAN.value:
                agents[0] = Agent(AgentKind.PACMAN)
                agents[0].set_position(x, y)
            elif char == AgentKind.GHOST.value:
                if ghosts_seen >= MAX_GHOSTS:
                    raise ValueError(f"a level holds at most {MAX_GHOSTS} ghosts")
                ghost = Agent(AgentKind.GHOST)
                ghost.set_position(x, y)
                agents[ghosts_seen + 1] = ghost
                ghosts_seen += 1
            else:
                try:
                    tile.tile_type = Tile(char)
                except ValueError:
                    raise ValueError(
                        f"unknown character {char!r} at row {row_index}, column {column}"
                    ) from None
            tile.set_position(x, y)
            row.append(tile)
        grid.append(row)

    return Level(Map(grid), agents)