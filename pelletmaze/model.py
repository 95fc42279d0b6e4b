"""Core game objects: tiles, agents, positions and the tile map."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

MAP_HEIGHT = 5
MAP_WIDTH = 11
TILE_SIZE = 32

MAX_GHOSTS = 3
MAX_AGENTS = MAX_GHOSTS + 1
PAC_MAN_SPEED = 5.0
GHOSTS_SPEED = 5.0


class Tile(Enum):
    """Static map features, keyed by their character in a level file."""

    WALL = "*"
    EMPTY = " "
    PELLET = "."
    SUPER_PELLET = "+"
    TELEPORT = "1"


class AgentKind(Enum):
    """Moving actors, keyed by their character in a level file."""

    GHOST = "G"
    PACMAN = "P"
    UNKNOWN = "?"


@dataclass
class Position:
    """A point in pixel coordinates."""

    x: float = 0.0
    y: float = 0.0


class GameObject:
    """Anything that occupies a place on the board."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.position = Position(float(x), float(y))

    def set_position(self, x: float, y: float) -> None:
        """Place the object at an absolute position."""
        self.position.x = float(x)
        self.position.y = float(y)

    def move(self, dx: float, dy: float) -> None:
        """Shift the object by a relative offset."""
        self.position.x += dx
        self.position.y += dy

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position!r})"


class Agent(GameObject):
    """Pac-Man or a ghost."""

    def __init__(self, kind: AgentKind = AgentKind.UNKNOWN) -> None:
        super().__init__()
        self.kind = kind
        self.speed = PAC_MAN_SPEED if kind is AgentKind.PACMAN else GHOSTS_SPEED
        self.alive = True

    def __repr__(self) -> str:
        return f"Agent(kind={self.kind!r}, position={self.position!r})"


class TileObject(GameObject):
    """A single cell of the map."""

    def __init__(self, tile_type: Tile = Tile.EMPTY) -> None:
        super().__init__()
        self.tile_type = tile_type

    def __repr__(self) -> str:
        return f"TileObject(tile_type={self.tile_type!r}, position={self.position!r})"


class Map:
    """A rectangular grid of tiles; dimensions are counted in tiles."""

    def __init__(self, grid: Sequence[Sequence[TileObject]]) -> None:
        if not grid or not grid[0]:
            raise ValueError("a map needs at least one row and one column")
        self.grid = [list(row) for row in grid]
        self.height = len(self.grid)
        self.width = len(self.grid[0])

    def tile_at(self, row: int, column: int) -> TileObject:
        """Return the tile in the given row and column."""
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(f"tile ({row}, {column}) is outside the map")
        return self.grid[row][column]

    def __iter__(self) -> Iterator[TileObject]:
        for row in self.grid:
            yield from row