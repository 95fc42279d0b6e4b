"""A tile-based maze game: level loading, a tile map with agents, pygame drawing and a game loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]