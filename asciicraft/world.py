"""The block world, ray marching through it and player movement."""

from __future__ import annotations

from collections.abc import Container
from dataclasses import replace

from .vector import EYE_HEIGHT, PosView, Vector, ViewAngles

X_BLOCKS = 20
Y_BLOCKS = 20
Z_BLOCKS = 10
BLOCK_BORDER_SIZE = 0.05
EMPTY = " "
MOVE_STEP = 0.30
TILT_STEP = 0.1

_RAY_EPS = 0.01


class World:
    """A box of block cells, each holding a single character."""

    def __init__(self, width: int = X_BLOCKS, depth: int = Y_BLOCKS,
                 height: int = Z_BLOCKS) -> None:
        if width <= 0 or depth <= 0 or height <= 0:
            raise ValueError("world dimensions must be positive")
        self.width = width
        self.depth = depth
        self.height = height
        self._cells = [[[EMPTY] * width for _ in range(depth)] for _ in range(height)]

    def _check(self, key: tuple[int, int, int]) -> tuple[int, int, int]:
        x, y, z = key
        if not (0 <= x < self.width and 0 <= y < self.depth and 0 <= z < self.height):
            raise IndexError(f"block {key!r} is outside the world")
        return x, y, z

    def __getitem__(self, key: tuple[int, int, int]) -> str:
        x, y, z = self._check(key)
        return self._cells[z][y][x]

    def __setitem__(self, key: tuple[int, int, int], value: str) -> None:
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError("a block must be a single character")
        x, y, z = self._check(key)
        self._cells[z][y][x] = value

    def contains(self, pos: Vector) -> bool:
        """Return whether ``pos`` lies inside the world's bounds."""
        return (0 <= pos.x < self.width and 0 <= pos.y < self.depth
                and 0 <= pos.z < self.height)

    def _cell_or_empty(self, x: int, y: int, z: int) -> str:
        if self.contains(Vector(x, y, z)):
            return self._cells[z][y][x]
        return EMPTY


def on_block_border(pos: Vector) -> bool:
    """Return whether ``pos`` lies near an edge, where two faces of a block meet."""
    near = sum(abs(c - round(c)) < BLOCK_BORDER_SIZE for c in (pos.x, pos.y, pos.z))
    return near >= 2


def _cell_of(pos: Vector) -> tuple[int, int, int]:
    return int(pos.x), int(pos.y), int(pos.z)


def _step_length(pos: Vector, direction: Vector) -> float:
    dist = 2.0
    for p, d in ((pos.x, direction.x), (pos.y, direction.y), (pos.z, direction.z)):
        if d > _RAY_EPS:
            dist = min(dist, (int(p + 1) - p) / d)
        elif d < -_RAY_EPS:
            dist = min(dist, (int(p) - p) / d)
    return dist


def _first_solid(pos: Vector, direction: Vector, world: World) -> tuple[Vector, str] | None:
    if direction == Vector(0.0, 0.0, 0.0):
        raise ValueError("ray direction must not be zero")
    while world.contains(pos):
        cell = world[_cell_of(pos)]
        if cell != EMPTY:
            return pos, cell
        pos = pos + direction.scale(_step_length(pos, direction) + _RAY_EPS)
    return None


def raytrace(pos: Vector, direction: Vector, world: World) -> str:
    """Return the character seen along a ray: the block, ``-`` on an edge, or blank."""
    hit = _first_solid(pos, direction, world)
    if hit is None:
        return EMPTY
    point, cell = hit
    return "-" if on_block_border(point) else cell


def find_target(pos: Vector, direction: Vector, world: World) -> Vector | None:
    """Return the point where a ray first enters a solid block, or None if it leaves the world."""
    hit = _first_solid(pos, direction, world)
    return None if hit is None else hit[0]


def place_block(pos: Vector, world: World, block: str) -> tuple[int, int, int] | None:
    """Put ``block`` next to the face of the block nearest to ``pos``.

    Returns the cell that was filled, or None when that cell is outside the world.
    """
    x, y, z = _cell_of(pos)
    faces = [
        (abs(x + 1 - pos.x), (x + 1, y, z)),
        (abs(pos.x - x), (x - 1, y, z)),
        (abs(y + 1 - pos.y), (x, y + 1, z)),
        (abs(pos.y - y), (x, y - 1, z)),
        (abs(z + 1 - pos.z), (x, y, z + 1)),
        (abs(pos.z - z), (x, y, z - 1)),
    ]
    _, target = min(faces, key=lambda face: face[0])
    if not world.contains(Vector(*target)):
        return None
    world[target] = block
    return target


def update_pos_view(posview: PosView, world: World, keys: Container[str]) -> None:
    """Apply climbing, falling and the pressed ``keys`` to ``posview`` in place."""
    pos = posview.pos
    x, y = int(pos.x), int(pos.y)
    z = int(int(pos.z) - EYE_HEIGHT + 0.01)
    if world._cell_or_empty(x, y, z) != EMPTY:
        pos = replace(pos, z=pos.z + 1)
    z = int(int(pos.z) - EYE_HEIGHT - 0.01)
    if world._cell_or_empty(x, y, z) == EMPTY:
        pos = replace(pos, z=pos.z - 1)

    psi, phi = posview.view.psi, posview.view.phi
    if "w" in keys:
        psi += TILT_STEP
    if "s" in keys:
        psi -= TILT_STEP
    if "d" in keys:
        phi += TILT_STEP
    if "a" in keys:
        phi -= TILT_STEP
    view = ViewAngles(psi, phi)
    direction = view.to_vector()

    dx = dy = 0.0
    if "i" in keys:
        dx += direction.x * MOVE_STEP
        dy += direction.y * MOVE_STEP
    if "k" in keys:
        dx -= direction.x * MOVE_STEP
        dy -= direction.y * MOVE_STEP
    if "j" in keys:
        dx += direction.y * MOVE_STEP
        dy -= direction.x * MOVE_STEP
    if "l" in keys:
        dx -= direction.y * MOVE_STEP
        dy += direction.x * MOVE_STEP

    posview.pos = Vector(pos.x + dx, pos.y + dy, pos.z)
    posview.view = view