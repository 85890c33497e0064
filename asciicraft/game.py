"""The game loop: input, movement, block editing and drawing."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Container

from .render import HIGHLIGHT, X_PIXELS, Y_PIXELS, draw, render
from .terminal import RawTerminal
from .vector import PosView, initial_pos_view
from .world import EMPTY, World, find_target, place_block, update_pos_view

SOLID = "@"
GROUND_LEVEL = 4
FRAME_DELAY = 0.02


def new_world() -> World:
    """Return the starting world: solid ground in the lowest layers."""
    world = World()
    for x in range(world.width):
        for y in range(world.depth):
            for z in range(GROUND_LEVEL):
                world[x, y, z] = SOLID
    return world


class Game:
    """The world and the player, advanced one frame at a time."""

    def __init__(self, world: World, posview: PosView) -> None:
        self.world = world
        self.posview = posview
        self.width = X_PIXELS
        self.height = Y_PIXELS

    def step(self, keys: Container[str]) -> list[str]:
        """Apply ``keys`` for one frame and return the picture to show."""
        update_pos_view(self.posview, self.world, keys)
        target = find_target(self.posview.pos, self.posview.view.to_vector(), self.world)
        if target is None:
            return render(self.posview, self.world, self.width, self.height)

        cell = (int(target.x), int(target.y), int(target.z))
        original = self.world[cell]
        self.world[cell] = HIGHLIGHT
        removed = "x" in keys
        if removed:
            self.world[cell] = EMPTY
        if " " in keys:
            place_block(target, self.world, SOLID)
        try:
            return render(self.posview, self.world, self.width, self.height)
        finally:
            if not removed:
                self.world[cell] = original


def main(argv: list[str] | None = None) -> int:
    """Run the game on the terminal until ``q`` is pressed."""
    parser = argparse.ArgumentParser(
        prog="asciicraft", description="Walk around and build in a block world drawn in text.")
    parser.add_argument("--width", type=int, default=X_PIXELS, help="picture width in characters")
    parser.add_argument("--height", type=int, default=Y_PIXELS, help="picture height in rows")
    args = parser.parse_args(argv)
    if args.width < 2 or args.height < 2:
        parser.error("width and height must be at least 2")

    game = Game(new_world(), initial_pos_view())
    game.width, game.height = args.width, args.height
    with RawTerminal() as terminal:
        while True:
            keys = terminal.read_keys()
            if "q" in keys:
                break
            draw(game.step(keys), sys.stdout)
            time.sleep(FRAME_DELAY)
    return 0