import pytest

from pelletmaze.model import (
    PAC_MAN_SPEED,
    Agent,
    AgentKind,
    GameObject,
    Map,
    Position,
    Tile,
    TileObject,
)


def test_tile_characters_match_level_format():
    assert Tile("*") is Tile.WALL
    assert Tile(" ") is Tile.EMPTY
    assert Tile(".") is Tile.PELLET
    assert Tile("+") is Tile.SUPER_PELLET
    assert Tile("1") is Tile.TELEPORT


def test_agent_characters_match_level_format():
    assert AgentKind("G") is AgentKind.GHOST
    assert AgentKind("P") is AgentKind.PACMAN


def test_unknown_tile_character_rejected():
    with pytest.raises(ValueError):
        Tile("x")


def test_game_object_starts_at_origin():
    assert GameObject().position == Position(0.0, 0.0)


def test_set_position_overrides():
    obj = GameObject()
    obj.move(7, 9)
    obj.set_position(3, 4)
    assert obj.position == Position(3, 4)


def test_move_is_reversible():
    obj = GameObject(10, 20)
    obj.move(2.5, -1.5)
    obj.move(-2.5, 1.5)
    assert obj.position == Position(10, 20)


def test_move_changes_position():
    obj = GameObject()
    obj.move(6, 0)
    assert obj.position == Position(6, 0)


def test_agent_defaults():
    agent = Agent()
    assert agent.kind is AgentKind.UNKNOWN
    assert agent.alive is True
    assert agent.position == Position()


def test_pacman_speed():
    assert Agent(AgentKind.PACMAN).speed == PAC_MAN_SPEED


def test_tile_object_defaults_to_empty():
    assert TileObject().tile_type is Tile.EMPTY
    assert TileObject(Tile.WALL).tile_type is Tile.WALL


def test_map_dimensions_and_lookup():
    wall = TileObject(Tile.WALL)
    grid = [[TileObject(), wall, TileObject()], [TileObject(), TileObject(), TileObject()]]
    level_map = Map(grid)
    assert level_map.height == len(grid)
    assert level_map.width == len(grid[0])
    assert level_map.tile_at(0, 1) is wall
    assert len(list(level_map)) == level_map.height * level_map.width


def test_map_lookup_out_of_range():
    level_map = Map([[TileObject()]])
    with pytest.raises(IndexError):
        level_map.tile_at(1, 0)


def test_empty_map_rejected():
    with pytest.raises(ValueError):
        Map([])