# asciicraft

A small block world that you walk through in your terminal. Every frame is
rendered by casting one ray per character cell into a 20 × 20 × 10 grid of
blocks and drawing whatever the ray hits as ASCII. Block edges show as `-`, and
the block you are looking at is highlighted in green.

## Installing

```
pip install .
```

The game needs a POSIX terminal, because it puts the terminal into
non-blocking, no-echo mode to read keys without waiting for Enter.

## Playing

```
asciicraft
```

By default the picture is 900 columns wide and 180 rows tall, so either shrink
your terminal font a long way or choose a smaller picture:

```
asciicraft --width 160 --height 48
```

Both `--width` and `--height` must be at least 2.

| Key | Action |
| --- | --- |
| `w` / `s` | look up / down |
| `a` / `d` | turn left / right |
| `i` / `k` | walk forward / back |
| `j` / `l` | step sideways |
| `x` | remove the targeted block |
| space | place a block against the face of the targeted block nearest to where you look |
| `q` | quit |

You start standing on a flat floor four blocks deep. You climb up onto blocks
you walk into and fall into holes you dig. The terminal is put back the way it
was when you quit.

## Using it as a library

The pieces of the game can be used on their own:

```python
from asciicraft.game import new_world
from asciicraft.vector import initial_pos_view
from asciicraft.render import render, to_ansi

world = new_world()
view = initial_pos_view()
picture = render(view, world, 80, 24)
print(to_ansi(picture))
```

- `asciicraft.vector` holds the immutable `Vector` and `ViewAngles` types,
  the mutable `PosView` and `initial_pos_view()`.
- `asciicraft.world` holds the `World` grid (indexed as `world[x, y, z]`) and
  the ray functions `raytrace`, `find_target`, `place_block`, `on_block_border`
  and `update_pos_view`.
- `asciicraft.render` holds `screen_directions`, `render`, `to_ansi` and
  `draw`.
- `asciicraft.terminal.RawTerminal` is a context manager for raw,
  non-blocking key input; `read_keys()` returns the set of keys waiting.
- `asciicraft.game.Game` moves the world forward one frame at a time from a
  set of pressed keys; `step(keys)` returns the picture to show.

## What it does not do

The world lives only in memory: there is no saving or loading, and every run
starts from the same flat floor.

## Tests

```
pip install .[test]
pytest
```