"""Turning the world into a picture of characters and drawing it on a terminal."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby
from typing import TextIO

from .vector import PosView, Vector, ViewAngles
from .world import World, raytrace

X_PIXELS = 900
Y_PIXELS = 180
VIEW_HEIGHT = 0.7
VIEW_WIDTH = 1.0

HOME = "\x1b[0;0H"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"
HIGHLIGHT = "o"


def screen_directions(view: ViewAngles, width: int = X_PIXELS,
                      height: int = Y_PIXELS) -> list[list[Vector]]:
    """Return one unit ray direction per pixel, row by row from the top left."""
    if width < 2 or height < 2:
        raise ValueError("the screen must be at least 2 pixels wide and high")

    down = ViewAngles(view.psi - VIEW_HEIGHT / 2, view.phi).to_vector()
    up = ViewAngles(view.psi + VIEW_HEIGHT / 2, view.phi).to_vector()
    left = ViewAngles(view.psi, view.phi - VIEW_WIDTH / 2).to_vector()
    right = ViewAngles(view.psi, view.phi + VIEW_WIDTH / 2).to_vector()

    mid_vert = (up + down).scale(0.5)
    mid_hor = (left + right).scale(0.5)
    mid_to_left = left - mid_hor
    mid_to_up = up - mid_vert
    top_left = mid_hor + mid_to_left + mid_to_up

    return [
        [
            (top_left
             - mid_to_left.scale(x_pix / (width - 1) * 2)
             - mid_to_up.scale(y_pix / (height - 1) * 2)).normalized()
            for x_pix in range(width)
        ]
        for y_pix in range(height)
    ]


def render(posview: PosView, world: World, width: int = X_PIXELS,
           height: int = Y_PIXELS) -> list[str]:
    """Return the view from ``posview`` as ``height`` rows of ``width`` characters."""
    directions = screen_directions(posview.view, width, height)
    return ["".join(raytrace(posview.pos, d, world) for d in row) for row in directions]


def to_ansi(picture: Iterable[str]) -> str:
    """Return terminal output that draws ``picture`` from the top left, highlighted cells green."""
    parts = [HOME]
    for row in picture:
        for index, (green, run) in enumerate(groupby(row, lambda c: c == HIGHLIGHT)):
            if green:
                parts.append(GREEN)
            elif index > 0:
                parts.append(RESET)
            parts.extend(run)
        parts.append(RESET + "\n")
    return "".join(parts)


def draw(picture: Iterable[str], stream: TextIO) -> None:
    """Write ``picture`` to ``stream`` as terminal output and flush it."""
    stream.write(to_ansi(picture))
    stream.flush()