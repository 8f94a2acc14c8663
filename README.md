# sandbox

A small falling-sand simulation. Hold a mouse button in the window and grains of
sand pour out around the cursor, fall straight down, and slide diagonally left or
right off the heaps below them until they come to rest.

The package also ships a selection sort visualizer that draws one bar for each
value and redraws after every swap.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running

Start the sand simulation:

```
sandbox
```

The window needs a TrueType font. By default it looks for
`assets/fonts/arial.ttf` relative to the current directory; point it elsewhere
with `--font`:

```
sandbox --font /path/to/font.ttf
```

If the font file does not exist, `sandbox` prints `Failed to load font!` and
exits with status 1.

Hold any mouse button to pour sand. Close the window or press Escape to quit.

Start the sorting visualizer:

```
sandbox-sortviz
```

It fills an 800x600 window with 800 random bars and sorts them with selection
sort, moving the largest remaining bar to the end on each pass and redrawing
after each swap. The window stays open after sorting finishes, until you close
it.

## Using the pieces

### The world

`sandbox.simulation.SandWorld(width=1900, height=1000, rng=None)` holds the
simulation and does not need a window. Empty cells are black.

- `spawn_sand(pos)` drops a grain at a random spot within a 30-pixel square
  around `pos` and returns the new `Pixel`, or `None` if that cell is taken or
  outside the world.
- `update_pixels()` moves every active grain one step.
- `check_fixed_pixels()` drops settled grains from the `active` list.
- `step(mouse_pos, held)` does all three in game-loop order, spawning only
  while `held` is true.
- `color_at(x, y)` reads back a cell's colour and raises `IndexError` outside
  the world; `cells()` yields every non-empty cell.

### Grains

`sandbox.pixel` holds the grain types (`PixelType`), status flags
(`PixelStatus`), the `Pixel` record and the colour pickers `sand_color`,
`water_color` and `murky_water_color`. Each picker takes an optional random
source such as `random.Random` and returns an RGBA tuple.

### Widgets

`sandbox.button` has `Button`, which calls one function when clicked, and
`MultiButton`, which calls every function added with `add_callback` or `+`, and
loses them again with `remove_callback` or `-` (a `ValueError` if the function
was never added). Feed either one the mouse position and button state through
`update(mouse_pos, pressed)`; a held button fires once, not every frame. An
inactive button shows as disabled and never fires. `draw(surface)` paints it
onto a pygame surface.

`sandbox.textfield.TextField(pos, font, on_execute)` is a clickable input box.
`update(mouse_pos, pressed)` selects it on a click inside and deselects it on a
click elsewhere; only one field is selected at a time (`TextField.selected`).
`set_string(value)` sets the selected field's text, raising `RuntimeError` if
none is selected, and `execute()` hands the text to `on_execute` and clears it.

### Timing

`sandbox.timer.Timer` is a context manager that prints
`[TIMER] <label> took <ms> ms` to standard output, or to the `stream` it was
given:

```python
from sandbox.timer import Timer

with Timer("physics"):
    world.update_pixels()
```

### Sorting

`sandbox.sortviz` offers `random_data(count, height, rng)`,
`selection_sort_swaps(data)`, which sorts the list in place and yields the
`(max_index, i)` pair of each swap, `bar_rects(data, width, height)`, which lays
the values out as bars standing on the bottom edge, and `draw_bars(surface,
data)`, which paints them.

## What it does not do

- Only sand moves. Water and murky water have types and colours but no
  behaviour of their own.
- The `sandbox` window shows no buttons or text fields; the widgets are there to
  be used from your own code.
- An image file dropped on the window is loaded into `Program.loaded_image` but
  is not drawn.