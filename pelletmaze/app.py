"""Game window and fixed-step main loop."""

from __future__ import annotations

import argparse
import os
import time
from typing import Sequence

import pygame

from pelletmaze.levels import Direction, generate_level
from pelletmaze.model import TILE_SIZE
from pelletmaze.render import BACKGROUND_COLOR, draw_level

DEFAULT_LEVEL = "levels/original.txt"
FRAME_DURATION_US = 16667
WINDOW_TITLE = "Pac-Man"

_KEY_DIRECTIONS = {
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


class FixedStepClock:
    """Accumulates elapsed time and hands it out as whole update steps."""

    def __init__(self, frame_duration_us: int = FRAME_DURATION_US) -> None:
        if frame_duration_us <= 0:
            raise ValueError("frame duration must be positive")
        self.frame_duration_us = frame_duration_us
        self.lag_us = 0

    def advance(self, elapsed_us: int) -> int:
        """Add elapsed microseconds; return how many updates are now due."""
        if elapsed_us < 0:
            raise ValueError("elapsed time cannot be negative")
        steps, self.lag_us = divmod(self.lag_us + elapsed_us, self.frame_duration_us)
        return steps


def _held_directions(keys) -> list[Direction]:
    """Directions whose arrow key is held in a pressed-keys lookup."""
    return [direction for key, direction in _KEY_DIRECTIONS.items() if keys[key]]


def _now_us() -> int:
    return time.perf_counter_ns() // 1000


def run(level_file: str | os.PathLike[str]) -> None:
    """Open a window on the given level and play until it is closed."""
    level = generate_level(level_file)
    pygame.init()
    try:
        window = pygame.display.set_mode(
            (level.map.width * TILE_SIZE, level.map.height * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        stepper = FixedStepClock()
        last = _now_us()
        running = True
        while running:
            now = _now_us()
            steps = stepper.advance(now - last)
            last = now
            for _ in range(steps):
                if any(event.type == pygame.QUIT for event in pygame.event.get()):
                    running = False
                level.update(_held_directions(pygame.key.get_pressed()))
            if not running:
                break
            window.fill(BACKGROUND_COLOR)
            draw_level(window, level)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="pelletmaze", description="Play a maze level.")
    parser.add_argument(
        "level_file",
        nargs="?",
        default=DEFAULT_LEVEL,
        help=f"level text file (default: {DEFAULT_LEVEL})",
    )
    args = parser.parse_args(argv)
    run(args.level_file)
    return 0