"""Drawing a level onto a pygame surface."""

from __future__ import annotations

import pygame

from pelletmaze.levels import Level
from pelletmaze.model import TILE_SIZE, Agent, AgentKind, Tile, TileObject

WALL_COLOR = pygame.Color(0, 0, 255)
PELLET_COLOR = pygame.Color(255, 0, 255)
SUPER_PELLET_COLOR = pygame.Color(0, 255, 0)
PACMAN_COLOR = pygame.Color(255, 255, 0)
GHOST_COLOR = pygame.Color(0, 255, 255)
DEFAULT_AGENT_COLOR = pygame.Color(255, 255, 255)
BACKGROUND_COLOR = pygame.Color(0, 0, 0)

PELLET_RADIUS = TILE_SIZE / 8.0
SUPER_PELLET_RADIUS = TILE_SIZE / 4.0
AGENT_RADIUS = TILE_SIZE / 2.0

_AGENT_COLORS = {
    AgentKind.PACMAN: PACMAN_COLOR,
    AgentKind.GHOST: GHOST_COLOR,
}


def _tile_centre(x: float, y: float) -> tuple[float, float]:
    half = TILE_SIZE / 2.0
    return x + half, y + half


def draw_tile(surface: pygame.Surface, tile: TileObject) -> None:
    """Draw one map cell; empty and teleport cells leave the surface untouched."""
    x, y = tile.position.x, tile.position.y
    if tile.tile_type is Tile.WALL:
        rect = pygame.Rect(round(x), round(y), TILE_SIZE, TILE_SIZE)
        pygame.draw.rect(surface, WALL_COLOR, rect)
    elif tile.tile_type is Tile.PELLET:
        pygame.draw.circle(surface, PELLET_COLOR, _tile_centre(x, y), PELLET_RADIUS)
    elif tile.tile_type is Tile.SUPER_PELLET:
        pygame.draw.circle(
            surface, SUPER_PELLET_COLOR, _tile_centre(x, y), SUPER_PELLET_RADIUS
        )


def draw_agent(surface: pygame.Surface, agent: Agent) -> None:
    """Draw an agent as a disc filling its tile."""
    colour = _AGENT_COLORS.get(agent.kind, DEFAULT_AGENT_COLOR)
    centre = _tile_centre(agent.position.x, agent.position.y)
    pygame.draw.circle(surface, colour, centre, AGENT_RADIUS)


def draw_level(surface: pygame.Surface, level: Level) -> None:
    """Draw every tile of the level's map, then every agent on top."""
    for tile in level.map:
        draw_tile(surface, tile)
    for agent in level.agents:
        draw_agent(surface, agent)